# Overlay Key Panels Package
"""
Panel UI for the overlay key toggle.
"""

from .toggle_menu import OverlayKeyPanel

__all__ = ["OverlayKeyPanel"]
