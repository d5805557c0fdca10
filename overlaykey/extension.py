"""
Extension lifecycle - init/enable/disable for the overlay key toggle.

The live toggle and panel are owned by an Extension instance rather than
module globals. disable() restores the original settings before dropping
them, and is safe to call when nothing is enabled.
"""

from typing import Callable, Optional

from loguru import logger

from panels.toggle_menu import OverlayKeyPanel
from services import settings_store
from services.overlay_key import OverlayKeyToggle
from utils.helpers import load_metadata, load_settings, resolve_schema_dir


class Extension:
    """
    Host-facing lifecycle object.

    Args:
        settings: Parsed settings (default: load_settings())
        metadata: Extension metadata (default: load_metadata())
        settings_factory: Callable(schema_id, schema_dir, backend) returning
            a settings handle (default: settings_store.get_settings)
        panel_factory: Callable(toggle, settings) returning the panel
    """

    def __init__(
        self,
        settings: Optional[dict] = None,
        metadata: Optional[dict] = None,
        settings_factory: Optional[Callable] = None,
        panel_factory: Callable = OverlayKeyPanel,
    ):
        self.settings = settings if settings is not None else load_settings()
        self.metadata = metadata if metadata is not None else load_metadata()
        self._settings_factory = settings_factory
        self._panel_factory = panel_factory

        self.toggle: Optional[OverlayKeyToggle] = None
        self.panel = None

    @property
    def label(self) -> str:
        return f"{self.metadata['name']} version {self.metadata['version']}"

    @property
    def enabled(self) -> bool:
        return self.toggle is not None

    def init(self) -> None:
        logger.info(f"initializing {self.label}")

    def enable(self) -> None:
        """Create the toggle and register its panel window."""
        logger.info(f"enabling {self.label}")

        if self.enabled:
            logger.warning(f"{self.metadata['name']} is already enabled")
            return

        overlay = self.settings["overlay"]
        modifier = self.settings["modifier"]
        schema_dir = resolve_schema_dir(self.settings)
        backend = settings_store.memory_backend() if self.settings["store"]["dry_run"] else None

        factory = self._settings_factory or settings_store.get_settings
        overlay_settings = factory(overlay["schema"], schema_dir, backend)
        modifier_settings = None
        if modifier["remap"]:
            modifier_settings = factory(modifier["schema"], schema_dir, backend)

        toggle = OverlayKeyToggle(
            overlay_settings,
            modifier_settings,
            overlay_key=overlay["key"],
            options_key=modifier["key"],
            remap_token=modifier["token"],
        )

        try:
            panel = self._panel_factory(toggle, self.settings)
            panel.create_window()
        except Exception:
            # Never leave the overlay key modified without an owner
            toggle.destroy()
            raise

        self.toggle = toggle
        self.panel = panel

    def disable(self) -> None:
        """Restore original settings and unregister the panel."""
        logger.info(f"disabling {self.label}")

        if self.toggle is None:
            logger.warning(f"{self.metadata['name']} is not enabled, nothing to disable")
            return

        toggle, panel = self.toggle, self.panel
        self.toggle = None
        self.panel = None

        try:
            toggle.destroy()
            settings_store.sync()
        finally:
            if panel is not None:
                panel.destroy()
