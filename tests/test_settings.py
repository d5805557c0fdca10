"""
Tests for settings and metadata loading and deep merge logic.

Uses real TOML/JSON files on disk (no mocking).
"""

from pathlib import Path

import pytest
import toml


class TestDeepMerge:
    """Test the _deep_merge function directly."""

    def test_override_replaces_flat_key(self):
        from utils.helpers import _deep_merge

        base = {"a": 1, "b": 2}
        override = {"b": 99}
        result = _deep_merge(base, override)
        assert result == {"a": 1, "b": 99}

    def test_nested_dicts_are_merged(self):
        from utils.helpers import _deep_merge

        base = {"section": {"a": 1, "b": 2}}
        override = {"section": {"b": 99, "c": 3}}
        result = _deep_merge(base, override)
        assert result == {"section": {"a": 1, "b": 99, "c": 3}}

    def test_base_is_not_mutated(self):
        from utils.helpers import _deep_merge

        base = {"a": {"x": 1}}
        override = {"a": {"x": 2}}
        _deep_merge(base, override)
        assert base["a"]["x"] == 1

    def test_list_values_are_replaced(self):
        from utils.helpers import _deep_merge

        base = {"panel": {"anchor": ["top", "left"]}}
        override = {"panel": {"anchor": ["bottom"]}}
        assert _deep_merge(base, override)["panel"]["anchor"] == ["bottom"]


class TestLoadSettings:
    """Test load_settings with real TOML files."""

    def test_returns_defaults_when_file_missing(self, tmp_path):
        from utils.helpers import load_settings

        settings = load_settings(tmp_path / "nonexistent.toml")
        assert settings["overlay"]["schema"] == "org.gnome.mutter"
        assert settings["overlay"]["key"] == "overlay-key"
        assert settings["modifier"]["remap"] is True
        assert settings["modifier"]["token"] == "altwin:left_meta_win"

    def test_loaded_values_override_defaults(self, tmp_settings):
        from utils.helpers import load_settings

        settings = load_settings(tmp_settings)
        assert settings["modifier"]["remap"] is False
        assert settings["store"]["dry_run"] is True
        assert settings["panel"]["anchor"] == ["top", "right"]
        # untouched keys keep their defaults
        assert settings["modifier"]["schema"] == "org.gnome.desktop.input-sources"
        assert settings["panel"]["icon"] == "view-more-symbolic"

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path):
        from utils.helpers import load_settings

        settings_path = tmp_path / "settings.toml"
        settings_path.write_text("[overlay\nkey = ")
        settings = load_settings(settings_path)
        assert settings["overlay"]["key"] == "overlay-key"

    def test_defaults_are_not_shared_between_calls(self, tmp_path):
        from utils.helpers import load_settings

        first = load_settings(tmp_path / "missing.toml")
        first["panel"]["anchor"].append("right")
        second = load_settings(tmp_path / "missing.toml")
        assert second["panel"]["anchor"] == ["top", "left"]

    def test_shipped_settings_file_parses(self):
        from utils.helpers import CONFIG_DIR

        data = toml.load(CONFIG_DIR / "data" / "settings.toml")
        assert data["overlay"]["schema"] == "org.gnome.mutter"
        assert data["modifier"]["key"] == "xkb-options"


class TestSchemaDir:

    def test_default_is_config_schemas(self):
        from utils.helpers import CONFIG_DIR, resolve_schema_dir

        settings = {"store": {"schema_dir": ""}}
        assert resolve_schema_dir(settings) == CONFIG_DIR / "schemas"

    def test_configured_dir_is_expanded(self):
        from utils.helpers import resolve_schema_dir

        settings = {"store": {"schema_dir": "~/schemas"}}
        assert resolve_schema_dir(settings) == Path.home() / "schemas"


class TestLoadMetadata:

    def test_reads_file_and_fills_defaults(self, tmp_metadata):
        from utils.helpers import load_metadata

        metadata = load_metadata(tmp_metadata)
        assert metadata["name"] == "Test Toggle"
        assert metadata["version"] == 7
        assert metadata["uuid"] == "overlay-key-toggle"

    def test_missing_file_returns_defaults(self, tmp_path):
        from utils.helpers import DEFAULT_METADATA, load_metadata

        assert load_metadata(tmp_path / "metadata.json") == DEFAULT_METADATA

    def test_invalid_json_returns_defaults(self, tmp_path):
        from utils.helpers import DEFAULT_METADATA, load_metadata

        metadata_path = tmp_path / "metadata.json"
        metadata_path.write_text("{not json")
        assert load_metadata(metadata_path) == DEFAULT_METADATA

    @pytest.mark.parametrize("content", ["[]", '"x"', "42", '[["name", "x"]]'])
    def test_non_object_json_returns_defaults(self, tmp_path, content):
        from utils.helpers import DEFAULT_METADATA, load_metadata

        metadata_path = tmp_path / "metadata.json"
        metadata_path.write_text(content)
        assert load_metadata(metadata_path) == DEFAULT_METADATA


class TestShippedConfigDir:
    """The config dir carries the data files config.py and helpers read."""

    @pytest.mark.parametrize("relative", [
        "metadata.json",
        "data/settings.toml",
        "styles/main.css",
        "config.py",
        "extension.py",
    ])
    def test_file_present(self, relative):
        from utils.helpers import CONFIG_DIR

        assert (CONFIG_DIR / relative).is_file()

    def test_shipped_metadata_is_an_object(self):
        from utils.helpers import CONFIG_DIR, load_metadata

        metadata = load_metadata(CONFIG_DIR / "metadata.json")
        assert metadata["name"] == "Overlay Key Toggle"
        assert metadata["uuid"] == "overlay-key-toggle"
