"""
Tests for configuration loading, validation and deep merge logic.

Uses real TOML files on disk; only OS failures that cannot be staged
portably are patched.
"""

from unittest.mock import patch

import pytest
import toml

from uiauto.utils.helpers import (
    DEFAULT_CONFIG,
    AppBinding,
    ConfigError,
    WindowAction,
    _deep_merge,
    load_or_create_config,
    parse_config,
)


class TestDeepMerge:
    """Test the _deep_merge function directly."""

    def test_override_replaces_flat_key(self):
        result = _deep_merge({"a": 1, "b": 2}, {"b": 99})
        assert result == {"a": 1, "b": 99}

    def test_nested_dicts_are_merged(self):
        base = {"section": {"a": 1, "b": 2}}
        override = {"section": {"b": 99, "c": 3}}
        assert _deep_merge(base, override) == {"section": {"a": 1, "b": 99, "c": 3}}

    def test_base_is_not_mutated(self):
        base = {"a": {"x": 1}}
        _deep_merge(base, {"a": {"x": 2}})
        assert base["a"]["x"] == 1


class TestLoadOrCreate:
    """Test first-run creation and loading from disk."""

    def test_creates_default_file_when_missing(self, tmp_path):
        config_path = tmp_path / "nested" / "uiauto" / "uiauto.conf"
        config = load_or_create_config(config_path)

        assert config_path.read_text() == DEFAULT_CONFIG
        assert config.app_select_prefix == "Control-Mod1"
        assert config.app_select["b"] == AppBinding("firefox", "firefox", "Firefox")
        assert config.window_manage["m"] == WindowAction("center")

    def test_existing_file_is_not_overwritten(self, tmp_config):
        before = tmp_config.read_text()
        load_or_create_config(tmp_config)
        assert tmp_config.read_text() == before

    def test_loads_bindings(self, tmp_config):
        config = load_or_create_config(tmp_config)
        assert set(config.app_select) == {"b", "t"}
        assert config.app_select["t"].command == "kitty --hold"
        assert config.window_manage_prefix == "Mod4-Mod1"

    def test_malformed_toml_is_config_error(self, tmp_path):
        config_path = tmp_path / "uiauto.conf"
        config_path.write_text("[general\napp_select_prefix = ")
        with pytest.raises(ConfigError):
            load_or_create_config(config_path)

    def test_invalid_utf8_is_config_error(self, tmp_path):
        config_path = tmp_path / "uiauto.conf"
        config_path.write_bytes(b'[general]\napp_select_prefix = "\xff\xfe"\n')
        with pytest.raises(ConfigError):
            load_or_create_config(config_path)

    def test_inaccessible_path_is_config_error(self, tmp_path):
        config_path = tmp_path / "uiauto.conf"
        with patch("uiauto.utils.helpers.Path.exists", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigError):
                load_or_create_config(config_path)

    def test_unwritable_directory_is_config_error(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("")
        with pytest.raises(ConfigError):
            load_or_create_config(blocker / "uiauto.conf")

    def test_missing_home_is_config_error(self, monkeypatch):
        def _no_home():
            raise RuntimeError("no home")
        monkeypatch.setattr("uiauto.utils.helpers.Path.home", _no_home)
        with pytest.raises(ConfigError):
            load_or_create_config()

    def test_default_path_under_home(self, tmp_path, monkeypatch):
        monkeypatch.setattr("uiauto.utils.helpers.Path.home", lambda: tmp_path)
        load_or_create_config()
        assert (tmp_path / ".config" / "uiauto" / "uiauto.conf").exists()


class TestParseConfig:
    """Test validation of decoded documents."""

    def test_missing_general_uses_defaults(self):
        config = parse_config({"app_select": {"x": {"command": "xterm"}}})
        assert config.app_select_prefix == "Control-Mod1"
        assert config.window_manage_prefix == "Mod4-Mod1"

    def test_partial_general_is_merged(self):
        config = parse_config({"general": {"app_select_prefix": "Mod4"}})
        assert config.app_select_prefix == "Mod4"
        assert config.window_manage_prefix == "Mod4-Mod1"

    def test_optional_fields_default_to_empty(self):
        config = parse_config({"app_select": {"x": {"command": "xterm"}}})
        assert config.app_select["x"] == AppBinding("xterm", "", "")

    def test_empty_command_rejected(self):
        with pytest.raises(ConfigError):
            parse_config({"app_select": {"x": {"command": "  ", "process_name": "x"}}})

    def test_missing_command_rejected(self):
        with pytest.raises(ConfigError):
            parse_config({"app_select": {"x": {"process_name": "x"}}})

    def test_non_table_app_entry_rejected(self):
        with pytest.raises(ConfigError):
            parse_config({"app_select": {"x": "xterm"}})

    def test_non_string_window_action_rejected(self):
        with pytest.raises(ConfigError):
            parse_config({"window_manage": {"m": 3}})

    def test_non_table_group_rejected(self):
        with pytest.raises(ConfigError):
            parse_config({"app_select": "nope"})

    def test_non_string_prefix_rejected(self):
        with pytest.raises(ConfigError):
            parse_config({"general": {"app_select_prefix": 5}})

    def test_mappings_are_read_only(self):
        config = parse_config(toml.loads(DEFAULT_CONFIG))
        with pytest.raises(TypeError):
            config.app_select["z"] = AppBinding("z")
