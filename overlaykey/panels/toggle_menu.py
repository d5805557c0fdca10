"""
Toggle Menu Panel - Status icon with an On/Off menu for the overlay key.

Features:
- Themed icon button in a small layer-shell window
- Popup menu with "Activities Overlay Key On" / "Off" items
- Exactly one item visible at a time, following the toggle state
"""

from ignis import widgets

from services.overlay_key import OverlayKeyToggle, ToggleState


THEMED_ICON_STYLE_CLASS = "system-status-icon"
ON_LABEL = "Activities Overlay Key On"
OFF_LABEL = "Activities Overlay Key Off"


class OverlayKeyPanel:
    """
    Panel widget wired to an OverlayKeyToggle.

    The toggle owns the state; this class only renders it.
    """

    def __init__(self, toggle: OverlayKeyToggle, settings: dict):
        self.toggle = toggle
        self.icon_name = settings["panel"]["icon"]
        self.anchor = settings["panel"]["anchor"]

        # Widgets (created in create_window)
        self.window = None
        self.menu_box = None
        self.on_item = None
        self.off_item = None

        self.toggle.connect(self._on_state_changed)

    def create_window(self):
        """
        Create the panel window.

        Returns:
            widgets.Window anchored per settings (default top-left)
        """
        self.on_item = self._create_menu_item(ON_LABEL, self._on_on_activate)
        self.off_item = self._create_menu_item(OFF_LABEL, self._on_off_activate)

        # Popup menu, hidden until the icon is clicked
        self.menu_box = widgets.Box(
            vertical=True,
            visible=False,
            css_classes=["popup-menu"],
            child=[self.on_item, self.off_item],
        )

        self._sync_items(self.toggle.state)

        self.window = widgets.Window(
            namespace="overlaykey-panel",
            anchor=self.anchor,
            exclusivity="normal",
            kb_mode="none",
            layer="top",
            child=widgets.Box(
                vertical=True,
                css_classes=["panel", "overlaykey-panel"],
                child=[
                    widgets.Button(
                        css_classes=["panel-button"],
                        tooltip_text="Overlay Key",
                        on_click=lambda x: self._toggle_menu(),
                        child=widgets.Icon(
                            image=self.icon_name,
                            pixel_size=16,
                            css_classes=[THEMED_ICON_STYLE_CLASS],
                        ),
                    ),
                    self.menu_box,
                ],
            ),
        )

        return self.window

    def destroy(self):
        """Unregister the panel window."""
        if self.window is not None:
            self.window.set_visible(False)
            self.window.destroy()
        self.window = None
        self.menu_box = None
        self.on_item = None
        self.off_item = None

    def _create_menu_item(self, label, on_activate):
        return widgets.Button(
            css_classes=["menu-item"],
            on_click=lambda x: on_activate(),
            child=widgets.Label(label=label, halign="start"),
        )

    def _toggle_menu(self):
        self.menu_box.set_visible(not self.menu_box.get_visible())

    def _on_off_activate(self):
        self.toggle.turn_off()
        self.menu_box.set_visible(False)

    def _on_on_activate(self):
        self.toggle.turn_on()
        self.menu_box.set_visible(False)

    def _on_state_changed(self, state: ToggleState):
        """Flip menu items when the toggle changes state."""
        if self.on_item is not None:
            self._sync_items(state)

    def _sync_items(self, state: ToggleState):
        self.on_item.set_visible(state is ToggleState.OFF)
        self.off_item.set_visible(state is ToggleState.ON)
