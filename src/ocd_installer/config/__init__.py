"""
Configuration for the OCD installer.
"""

from ocd_installer.config.loader import ConfigurationError, load_config, load_yaml_file
from ocd_installer.config.merger import deep_merge, get_nested_value, set_nested_value
from ocd_installer.config.schema import Config

__all__ = [
    "Config",
    "ConfigurationError",
    "deep_merge",
    "get_nested_value",
    "load_config",
    "load_yaml_file",
    "set_nested_value",
]
