"""
Environment collaborators used by the wizard screens.
"""

from ocd_installer.system.info import SystemInfo, collect_system_info, find_package_manager

__all__ = ["SystemInfo", "collect_system_info", "find_package_manager"]
