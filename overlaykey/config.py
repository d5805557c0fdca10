"""
Overlay Key Toggle - Main Ignis Configuration

This file is the entry point for Ignis. It enables the toggle panel and
restores the original overlay key when the application shuts down.

Usage:
  ignis init -c /path/to/overlaykey/config.py
"""

from ignis.app import IgnisApp
from loguru import logger
import sys
import os

# Add config dir to path dynamically (works from any location/worktree)
# Resolve symlink to get the actual config directory
config_dir = os.path.dirname(os.path.realpath(__file__))
sys.path.insert(0, config_dir)

from extension import Extension

# Get Ignis app instance
app = IgnisApp.get_default()

# Load CSS styling dynamically from current location
styles_dir = os.path.join(config_dir, "styles")
try:
    app.apply_css(os.path.join(styles_dir, "main.css"))
except Exception:
    logger.exception("Could not load main.css")

extension = Extension()
extension.init()
extension.enable()

# Restore the original overlay key before the session goes away
app.connect("shutdown", lambda *args: extension.disable())

logger.info("Overlay key toggle initialized successfully")
