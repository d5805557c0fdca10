"""
Shared test fixtures for the overlay key toggle test suite.

Provides a dict-backed settings handle with the Gio.Settings accessors
used by the toggle, and real settings TOML files on disk.
"""

import json

import pytest
import toml


class FakeSettings:
    """In-memory stand-in for a Gio.Settings object bound to one schema."""

    def __init__(self, schema_id, values=None):
        self.schema_id = schema_id
        self.values = dict(values or {})
        self.writes = []

    def get_string(self, key):
        return self.values[key]

    def set_string(self, key, value):
        self.values[key] = value
        self.writes.append((key, value))
        return True

    def get_strv(self, key):
        return list(self.values[key])

    def set_strv(self, key, value):
        self.values[key] = list(value)
        self.writes.append((key, list(value)))
        return True


@pytest.fixture
def mutter_settings():
    """org.gnome.mutter with the stock Super overlay key."""
    return FakeSettings("org.gnome.mutter", {"overlay-key": "Super_L"})


@pytest.fixture
def input_settings():
    """org.gnome.desktop.input-sources with one existing option."""
    return FakeSettings("org.gnome.desktop.input-sources", {"xkb-options": ["grp:switch"]})


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "overlay": {"schema": "org.gnome.mutter", "key": "overlay-key"},
        "modifier": {"remap": False},
        "store": {"dry_run": True},
        "panel": {"anchor": ["top", "right"]},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path


@pytest.fixture
def tmp_metadata(tmp_path):
    """Create a real metadata.json file."""
    metadata_path = tmp_path / "metadata.json"
    metadata_path.write_text(json.dumps({"name": "Test Toggle", "version": 7}))
    return metadata_path
