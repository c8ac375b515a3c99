"""
Read-only environment probing for the System Info screen.
"""

import logging
import platform
import shutil
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_MANAGERS = ("bun", "pnpm", "npm")


def find_package_manager(candidates: Sequence[str] = DEFAULT_PACKAGE_MANAGERS) -> str | None:
    """Return the first candidate found on PATH, or None."""
    for name in candidates:
        if shutil.which(name):
            return name
    logger.debug(f"No package manager found among {list(candidates)}")
    return None


@dataclass
class SystemInfo:
    """Snapshot shown on the System Info screen."""

    os: str
    arch: str
    package_manager: str | None
    python_version: str
    today: date = field(default_factory=date.today)


def collect_system_info(candidates: Sequence[str] = DEFAULT_PACKAGE_MANAGERS) -> SystemInfo:
    """Probe the running system."""
    return SystemInfo(
        os=sys.platform,
        arch=platform.machine() or "unknown",
        package_manager=find_package_manager(candidates),
        python_version=platform.python_version(),
    )
