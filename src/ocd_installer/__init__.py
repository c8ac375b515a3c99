"""
OCD Installer - OpenChamber Desktop setup wizard

A full-screen terminal wizard for installing, updating and removing
OpenChamber Desktop.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ocd-installer")
except PackageNotFoundError:
    __version__ = "1.0.0"

__all__ = [
    "__version__",
]
