"""
Storage utilities for the OCD installer.
"""

from ocd_installer.storage.paths import get_config_path, get_installer_home, get_log_path

__all__ = [
    "get_config_path",
    "get_installer_home",
    "get_log_path",
]
