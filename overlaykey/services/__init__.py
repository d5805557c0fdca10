# Overlay Key Services Package
"""
Backend services for the overlay key toggle.

The toggle itself is GTK-free; settings_store (Gio access) is imported
directly where handles are created.
"""

from .overlay_key import OverlayKeyToggle, OriginalValues, ToggleState

__all__ = ["OverlayKeyToggle", "OriginalValues", "ToggleState"]
