# Overlay Key Utilities Package
"""
Shared utility functions for the overlay key toggle.
"""

from .helpers import load_settings, load_metadata

__all__ = ["load_settings", "load_metadata"]
