"""
Aggregate wizard state.

Created once per process with fixed defaults and mutated only by the
StepController. Nothing here is persisted.
"""

from pydantic import BaseModel, Field

from ocd_installer.wizard.progress import ProgressSimulator
from ocd_installer.wizard.selection import SelectionSet
from ocd_installer.wizard.steps import (
    ALIAS_CHOICES,
    ALIAS_PRESET,
    PACKAGE_MANAGER_CHOICES,
    SHORTCUT_CHOICES,
    SHORTCUT_PRESET,
    UNINSTALL_CHOICES,
    UNINSTALL_PRESET,
    ChoiceList,
    Step,
    choices_for,
)
from ocd_installer.wizard.text_input import TextConfirmationModel


class InstallPlan(BaseModel):
    """Labels of the choices made on the install screens."""

    package_manager: str
    aliases: list[str]
    shortcuts: list[str]


class WizardState(BaseModel):
    """Holds the state of the wizard during execution."""

    step: Step = Step.MENU
    cursor: int = Field(default=0, ge=0)
    package_manager: int = 0

    aliases: SelectionSet = Field(default_factory=lambda: SelectionSet.from_preset(ALIAS_PRESET))
    shortcuts: SelectionSet = Field(
        default_factory=lambda: SelectionSet.from_preset(SHORTCUT_PRESET)
    )
    uninstall_options: SelectionSet = Field(
        default_factory=lambda: SelectionSet.from_preset(UNINSTALL_PRESET)
    )

    confirmation: TextConfirmationModel = Field(default_factory=TextConfirmationModel)
    progress: ProgressSimulator = Field(default_factory=ProgressSimulator)

    # (0, 0) until the terminal reports its size
    viewport: tuple[int, int] = (0, 0)

    @property
    def progress_fraction(self) -> float:
        return self.progress.fraction

    @property
    def active_choices(self) -> ChoiceList:
        return choices_for(self.step)

    def install_plan(self) -> InstallPlan:
        return InstallPlan(
            package_manager=PACKAGE_MANAGER_CHOICES[self.package_manager],
            aliases=self.aliases.labels(ALIAS_CHOICES),
            shortcuts=self.shortcuts.labels(SHORTCUT_CHOICES),
        )

    def uninstall_plan(self) -> list[str]:
        return self.uninstall_options.labels(UNINSTALL_CHOICES)
