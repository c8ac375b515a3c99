"""
OCD installer TUI (Terminal User Interface).

Built with the Textual framework.
"""

from ocd_installer.tui.app import InstallerApp, InstallerError, run_installer

__all__ = ["InstallerApp", "InstallerError", "run_installer"]
