"""
Settings Store - Acquire Gio.Settings handles with a get-or-create policy.

A schema is first looked up in the extension's own compiled schemas
directory. If it is not registered there, a fresh Gio.Settings bound to the
same schema id is created from the system schema source. A schema that is
installed nowhere raises SchemaNotRegisteredError instead of letting
g_settings_new() abort the process.
"""

from pathlib import Path
from typing import Optional

from gi.repository import Gio, GLib
from loguru import logger


class SchemaNotRegisteredError(LookupError):
    """Schema id is not known to the schema source that was searched."""


def get_settings(
    schema_id: str,
    schema_dir: Optional[Path] = None,
    backend: Optional[Gio.SettingsBackend] = None,
) -> Gio.Settings:
    """
    Get the settings object for a schema, creating one if lookup fails.

    Args:
        schema_id: GSettings schema id (e.g., "org.gnome.mutter")
        schema_dir: Directory holding the extension's gschemas.compiled
        backend: Settings backend to bind to (None = default dconf backend)

    Returns:
        Gio.Settings bound to schema_id

    Raises:
        SchemaNotRegisteredError: schema is not installed in any source
    """
    try:
        return _lookup_registered(schema_id, schema_dir, backend)
    except (SchemaNotRegisteredError, GLib.Error):
        logger.info(f'Unable to retrieve existing "{schema_id}" settings obj. Creating.')

    default_source = Gio.SettingsSchemaSource.get_default()
    if default_source is None or default_source.lookup(schema_id, True) is None:
        raise SchemaNotRegisteredError(f"Settings schema {schema_id} is not installed")

    if backend is None:
        return Gio.Settings.new(schema_id)
    return Gio.Settings.new_with_backend(schema_id, backend)


def _lookup_registered(
    schema_id: str,
    schema_dir: Optional[Path],
    backend: Optional[Gio.SettingsBackend],
) -> Gio.Settings:
    """Look the schema up in the extension's schemas directory only."""
    if schema_dir is None or not Path(schema_dir).is_dir():
        raise SchemaNotRegisteredError(f"No schemas directory for {schema_id}")

    source = Gio.SettingsSchemaSource.new_from_directory(
        str(schema_dir), Gio.SettingsSchemaSource.get_default(), False
    )
    schema = source.lookup(schema_id, False)
    if schema is None:
        raise SchemaNotRegisteredError(f"Schema {schema_id} is not in {schema_dir}")

    return Gio.Settings.new_full(schema, backend, None)


def memory_backend() -> Gio.SettingsBackend:
    """Backend that keeps writes in memory (nothing reaches dconf)."""
    return Gio.memory_settings_backend_new()


def sync() -> None:
    """Flush pending writes to the persistent store."""
    Gio.Settings.sync()
