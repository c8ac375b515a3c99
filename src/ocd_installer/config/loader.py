"""
Configuration loader for the OCD installer.

Loads and merges configuration from:
1. Default values
2. User config (~/.ocd-installer/config.yaml)
3. Environment variables (OCD_INSTALLER_<SECTION>_<KEY>)
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from ocd_installer.config.merger import deep_merge, get_nested_value, set_nested_value
from ocd_installer.config.schema import Config
from ocd_installer.storage.paths import get_config_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "OCD_INSTALLER_"


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed configuration dictionary ({} if the file does not exist).

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return content


def apply_env_overrides(
    config: dict[str, Any], environ: dict[str, str] | None = None
) -> dict[str, Any]:
    """
    Apply environment variable overrides.

    ``OCD_INSTALLER_TIMING_CHECK_DELAY=0.5`` sets ``timing.check_delay``:
    the first word after the prefix names the section, the rest the key.
    ``OCD_INSTALLER_HOME`` is a path setting and is skipped.
    """
    environ = os.environ if environ is None else environ

    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX) or name == f"{ENV_PREFIX}HOME":
            continue

        section, _, key = name[len(ENV_PREFIX) :].lower().partition("_")
        if not key:
            continue

        key_path = f"{section}.{key}"
        value = _parse_env_value(raw)
        # A list setting given a single item
        if isinstance(get_nested_value(config, key_path), list) and not isinstance(value, list):
            value = [raw.strip()]

        config = set_nested_value(config, key_path, value)
        logger.debug(f"Config override from {name}")

    return config


def _parse_env_value(value: str) -> Any:
    """Parse an environment value into bool, int, float, list or str."""
    lowered = value.lower()
    if lowered in ("true", "yes", "1", "on"):
        return True
    if lowered in ("false", "no", "0", "off"):
        return False

    if re.match(r"^-?\d+$", value):
        return int(value)

    if re.match(r"^-?\d+\.\d+$", value):
        return float(value)

    if "," in value:
        return [item.strip() for item in value.split(",")]

    return value


def load_config(path: Path | None = None, skip_env: bool = False) -> Config:
    """
    Load and validate configuration.

    Args:
        path: Config file to read. Defaults to ~/.ocd-installer/config.yaml.
        skip_env: Skip environment variable overrides.

    Returns:
        Validated Config object.

    Raises:
        ConfigurationError: If the file or the merged values are invalid.
    """
    config_dict = Config().model_dump()

    config_path = path or get_config_path()
    if config_path.exists():
        config_dict = deep_merge(config_dict, load_yaml_file(config_path))
        logger.debug(f"Loaded config from {config_path}")

    if not skip_env:
        config_dict = apply_env_overrides(config_dict)

    try:
        return Config.model_validate(config_dict)
    except Exception as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e
