# Overlay Key Toggle Package
"""
Panel toggle for the activities overlay key, as an Ignis config.

Modules:
  - services.overlay_key: On/Off state machine over the overlay key setting
  - services.settings_store: Gio.Settings get-or-create access
  - panels.toggle_menu: Status icon with On/Off menu
  - extension: init/enable/disable lifecycle
"""

__version__ = "0.1.0-dev"
