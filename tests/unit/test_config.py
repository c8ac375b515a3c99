"""
Unit tests for the configuration system.
"""

from pathlib import Path

import pytest
import yaml

from ocd_installer.config import (
    Config,
    ConfigurationError,
    deep_merge,
    get_nested_value,
    load_config,
    load_yaml_file,
    set_nested_value,
)
from ocd_installer.config.loader import apply_env_overrides
from ocd_installer.storage.paths import get_config_path, get_installer_home, get_log_path

# =============================================================================
# Schema Tests
# =============================================================================


class TestConfigSchema:
    """Tests for the Config Pydantic schema."""

    def test_defaults(self):
        config = Config()
        assert config.timing.tick_interval == 0.2
        assert config.timing.check_delay == 2.0
        assert config.progress.install_step == 0.05
        assert config.progress.uninstall_step == 0.10
        assert config.wizard.text_char_limit == 10
        assert config.system.package_managers == ["bun", "pnpm", "npm"]
        assert config.logging.debug is False

    def test_invalid_values_rejected(self):
        with pytest.raises(Exception):  # Pydantic ValidationError
            Config.model_validate({"progress": {"install_step": 0}})
        with pytest.raises(Exception):
            Config.model_validate({"timing": {"tick_interval": -1}})


# =============================================================================
# Merger Tests
# =============================================================================


class TestMerger:
    """Tests for the dict merge helpers."""

    def test_nested_merge(self):
        base = {"timing": {"tick_interval": 0.2, "check_delay": 2.0}}
        result = deep_merge(base, {"timing": {"check_delay": 0.5}})
        assert result == {"timing": {"tick_interval": 0.2, "check_delay": 0.5}}
        assert base["timing"]["check_delay"] == 2.0

    def test_list_append_and_remove(self):
        base = {"package_managers": ["bun", "pnpm", "npm"]}
        appended = deep_merge(base, {"+package_managers": ["yarn", "npm"]})
        assert appended["package_managers"] == ["bun", "pnpm", "npm", "yarn"]

        removed = deep_merge(base, {"-package_managers": ["bun"]})
        assert removed["package_managers"] == ["pnpm", "npm"]

    def test_none_removes_key(self):
        assert deep_merge({"a": 1, "b": 2}, {"a": None}) == {"b": 2}

    def test_nested_get_and_set(self):
        config: dict = {}
        set_nested_value(config, "logging.debug", True)
        assert config == {"logging": {"debug": True}}
        assert get_nested_value(config, "logging.debug") is True
        assert get_nested_value(config, "logging.file") is None
        assert get_nested_value(config, "missing.key") is None


# =============================================================================
# Loader Tests
# =============================================================================


class TestLoader:
    """Tests for reading config files and environment overrides."""

    def test_missing_file_gives_defaults(self, mock_installer_home: Path):
        config = load_config(skip_env=True)
        assert config == Config()

    def test_user_file_overrides_defaults(self, mock_installer_home: Path):
        get_config_path().write_text(
            yaml.dump({"timing": {"check_delay": 0.5}}),
            encoding="utf-8",
        )
        config = load_config(skip_env=True)
        assert config.timing.check_delay == 0.5
        assert config.timing.tick_interval == 0.2

    def test_invalid_yaml_raises(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("timing: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_yaml_file(path)

    def test_non_mapping_raises(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_yaml_file(path)

    def test_invalid_values_raise_configuration_error(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("progress:\n  uninstall_step: 5\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path=path, skip_env=True)

    def test_env_overrides(self, mock_installer_home: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("OCD_INSTALLER_TIMING_CHECK_DELAY", "0.25")
        monkeypatch.setenv("OCD_INSTALLER_LOGGING_DEBUG", "true")
        monkeypatch.setenv("OCD_INSTALLER_SYSTEM_PACKAGE_MANAGERS", "npm,yarn")

        config = load_config()
        assert config.timing.check_delay == 0.25
        assert config.logging.debug is True
        assert config.system.package_managers == ["npm", "yarn"]

    def test_env_single_item_list(self, mock_installer_home: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("OCD_INSTALLER_SYSTEM_PACKAGE_MANAGERS", "npm")

        config = load_config()
        assert config.system.package_managers == ["npm"]

    def test_env_single_item_list_keeps_raw_text(self):
        result = apply_env_overrides(
            {"system": {"package_managers": ["bun"]}},
            {"OCD_INSTALLER_SYSTEM_PACKAGE_MANAGERS": "1"},
        )
        assert result == {"system": {"package_managers": ["1"]}}

    def test_env_home_is_not_an_override(self):
        result = apply_env_overrides({}, {"OCD_INSTALLER_HOME": "/tmp/x", "PATH": "/bin"})
        assert result == {}


# =============================================================================
# Path Tests
# =============================================================================


def test_paths_follow_installer_home(mock_installer_home: Path):
    assert get_installer_home() == mock_installer_home.resolve()
    assert get_config_path() == mock_installer_home.resolve() / "config.yaml"
    assert get_log_path().name == "ocd-installer.log"
