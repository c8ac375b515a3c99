"""
OCD installer wizard core.

UI-agnostic: the step controller, its state and the models of each screen.
Timers and rendering are left to the host (see ``ocd_installer.tui``).
"""

from ocd_installer.wizard.controller import StepController
from ocd_installer.wizard.progress import ProgressSimulator
from ocd_installer.wizard.selection import SelectionModel, SelectionSet
from ocd_installer.wizard.state import InstallPlan, WizardState
from ocd_installer.wizard.steps import MenuChoice, Step, choices_for
from ocd_installer.wizard.text_input import TextConfirmationModel

__all__ = [
    "InstallPlan",
    "MenuChoice",
    "ProgressSimulator",
    "SelectionModel",
    "SelectionSet",
    "Step",
    "StepController",
    "TextConfirmationModel",
    "WizardState",
    "choices_for",
]
