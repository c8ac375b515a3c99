"""
Pydantic configuration schema for the OCD installer.

Every value has a default, so an empty or missing config file is valid.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Wizard Timing
# =============================================================================


class TimingConfig(BaseModel):
    """Delays of the simulated work, in seconds."""

    model_config = ConfigDict(extra="allow")

    tick_interval: float = Field(default=0.2, gt=0.0)
    check_delay: float = Field(default=2.0, ge=0.0)


class ProgressConfig(BaseModel):
    """Per-tick progress increments."""

    model_config = ConfigDict(extra="allow")

    install_step: float = Field(default=0.05, gt=0.0, le=1.0)
    uninstall_step: float = Field(default=0.10, gt=0.0, le=1.0)


class WizardConfig(BaseModel):
    """Wizard input settings."""

    model_config = ConfigDict(extra="allow")

    text_char_limit: int = Field(default=10, ge=3)


# =============================================================================
# System Probing & Logging
# =============================================================================


class SystemConfig(BaseModel):
    """System information probing."""

    model_config = ConfigDict(extra="allow")

    package_managers: list[str] = Field(default_factory=lambda: ["bun", "pnpm", "npm"])


class LoggingConfig(BaseModel):
    """Debug logging. Output never goes to the terminal."""

    model_config = ConfigDict(extra="allow")

    debug: bool = False
    file: Path | None = None


# =============================================================================
# Root Configuration
# =============================================================================


class Config(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="allow")

    timing: TimingConfig = Field(default_factory=TimingConfig)
    progress: ProgressConfig = Field(default_factory=ProgressConfig)
    wizard: WizardConfig = Field(default_factory=WizardConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
