"""
Command-line entry point for the OCD installer.
"""

from ocd_installer.cli.app import app

__all__ = ["app"]
