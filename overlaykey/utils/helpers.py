"""
Helper utilities for the overlay key toggle.

Provides:
- Settings loading (TOML, merged over defaults)
- Extension metadata loading
"""

from pathlib import Path
import copy
import json
from typing import Dict, Any, Optional

import toml
from loguru import logger


CONFIG_DIR = Path(__file__).parent.parent

DEFAULT_SETTINGS = {
    "overlay": {
        "schema": "org.gnome.mutter",
        "key": "overlay-key",
    },
    "modifier": {
        "remap": True,
        "schema": "org.gnome.desktop.input-sources",
        "key": "xkb-options",
        "token": "altwin:left_meta_win",
    },
    "store": {
        "schema_dir": "",
        "dry_run": False,
    },
    "panel": {
        "icon": "view-more-symbolic",
        "anchor": ["top", "left"],
    },
}

DEFAULT_METADATA = {
    "name": "Overlay Key Toggle",
    "uuid": "overlay-key-toggle",
    "version": 1,
    "description": "Toggle the activities overlay key from the panel",
}


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load toggle settings from TOML file.

    Args:
        settings_path: TOML file to read (default: data/settings.toml)

    Returns:
        Dictionary containing settings with defaults applied

    Example settings file:
        [overlay]
        schema = "org.gnome.mutter"
        key = "overlay-key"

        [modifier]
        remap = false
    """
    defaults = copy.deepcopy(DEFAULT_SETTINGS)

    if settings_path is None:
        settings_path = CONFIG_DIR / "data" / "settings.toml"

    if not settings_path.exists():
        logger.info(f"Settings file not found at {settings_path}, using defaults")
        return defaults

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError):
        logger.exception(f"Could not load settings from {settings_path}, using defaults")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def resolve_schema_dir(settings: Dict[str, Any]) -> Path:
    """Directory searched for compiled schemas before the system source."""
    configured = settings["store"].get("schema_dir") or ""
    if configured:
        return Path(configured).expanduser()
    return CONFIG_DIR / "schemas"


def load_metadata(metadata_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load extension metadata (name, uuid, version, description).

    Missing keys fall back to DEFAULT_METADATA.
    """
    if metadata_path is None:
        metadata_path = CONFIG_DIR / "metadata.json"

    metadata = dict(DEFAULT_METADATA)
    if not metadata_path.exists():
        return metadata

    try:
        with open(metadata_path) as f:
            loaded = json.load(f)
    except (OSError, json.JSONDecodeError):
        logger.exception(f"Could not load metadata from {metadata_path}")
        return metadata

    if not isinstance(loaded, dict):
        logger.warning(f"Ignoring metadata in {metadata_path}: expected an object")
        return metadata

    metadata.update(loaded)
    return metadata
