"""
Path utilities for the OCD installer.

Provides consistent path resolution for configuration and log files.
"""

import os
from pathlib import Path


def get_installer_home() -> Path:
    """
    Get the installer home directory.

    Resolution order:
    1. OCD_INSTALLER_HOME environment variable
    2. Default: ~/.ocd-installer

    Returns:
        Path to the installer home directory.
    """
    env_home = os.environ.get("OCD_INSTALLER_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".ocd-installer"


def get_config_path() -> Path:
    """
    Get the path to the configuration file.

    Returns:
        Path to ~/.ocd-installer/config.yaml
    """
    return get_installer_home() / "config.yaml"


def get_log_path() -> Path:
    """
    Get the default debug log file.

    Returns:
        Path to ~/.ocd-installer/ocd-installer.log
    """
    return get_installer_home() / "ocd-installer.log"
