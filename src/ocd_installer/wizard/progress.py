"""
Simulated progress for the installing and uninstalling screens.

The fraction advances on a fixed schedule and has no link to any real work.
Defaults come from the configuration schema.
"""

from pydantic import BaseModel, Field

from ocd_installer.config.schema import ProgressConfig, TimingConfig
from ocd_installer.wizard.events import Command, ScheduleEvent, Tick


class ProgressSimulator(BaseModel):
    """Bounded fraction in [0, 1] advanced by scheduled ticks."""

    fraction: float = Field(default=0.0, ge=0.0, le=1.0)
    increment: float = ProgressConfig().install_step
    interval: float = Field(default=TimingConfig().tick_interval, gt=0.0)
    ticks: int = 0
    complete: bool = False

    def _next_tick(self) -> list[Command]:
        return [ScheduleEvent(Tick(), self.interval)]

    def start(self, increment: float) -> list[Command]:
        """Reset to zero and request the first tick."""
        self.fraction = 0.0
        self.increment = float(increment)
        self.ticks = 0
        self.complete = False
        return self._next_tick()

    def advance(self) -> list[Command]:
        """Apply one tick.

        Returns:
            A request for the next tick, or an empty list once the fraction
            has reached 1.0.
        """
        if self.complete:
            return []

        self.ticks += 1
        # Rounded so that 20 x 0.05 and 10 x 0.10 land on exactly 1.0
        self.fraction = min(1.0, round(self.fraction + self.increment, 9))
        if self.fraction >= 1.0:
            self.fraction = 1.0
            self.complete = True
            return []
        return self._next_tick()

    @property
    def percent(self) -> int:
        return int(round(self.fraction * 100))
