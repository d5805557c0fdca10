"""
Overlay Key Toggle - Switch the activities overlay key off and back on.

Owns the settings handles for the overlay key (and, optionally, the
keyboard-layout options used to remap the left Super key to Meta).
Original values are captured once at construction and always restored
on destroy(), whatever state the toggle is in:

  ON  --turn_off()--> OFF
  OFF --turn_on()-->  ON
  destroy() from either state writes the originals back.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

from loguru import logger


DEFAULT_OVERLAY_KEY = "overlay-key"
DEFAULT_OPTIONS_KEY = "xkb-options"
DEFAULT_REMAP_TOKEN = "altwin:left_meta_win"


class SettingsHandle(Protocol):
    """The subset of Gio.Settings used by the toggle."""

    def get_string(self, key: str) -> str: ...

    def set_string(self, key: str, value: str) -> bool: ...

    def get_strv(self, key: str) -> list[str]: ...

    def set_strv(self, key: str, value: list[str]) -> bool: ...


class ToggleState(Enum):
    ON = "on"
    OFF = "off"


class ToggleDestroyedError(RuntimeError):
    """Raised when a destroyed toggle is asked to change state."""


@dataclass(frozen=True)
class OriginalValues:
    """Settings values as they were before the toggle touched them."""
    overlay_key: str
    modifier_options: Optional[tuple[str, ...]] = None


class OverlayKeyToggle:
    """
    Two-state toggle over the overlay key setting.

    Args:
        overlay_settings: Handle for the overlay key schema (org.gnome.mutter)
        modifier_settings: Handle for the input sources schema. When given,
            turning off also adds the remap token to the layout options.
        overlay_key: Key name of the overlay key string
        options_key: Key name of the layout options string list
        remap_token: Layout option appended while the toggle is off
    """

    def __init__(
        self,
        overlay_settings: SettingsHandle,
        modifier_settings: Optional[SettingsHandle] = None,
        overlay_key: str = DEFAULT_OVERLAY_KEY,
        options_key: str = DEFAULT_OPTIONS_KEY,
        remap_token: str = DEFAULT_REMAP_TOKEN,
    ):
        self._overlay_settings = overlay_settings
        self._modifier_settings = modifier_settings
        self._overlay_key = overlay_key
        self._options_key = options_key
        self._remap_token = remap_token

        modifier_options = None
        if modifier_settings is not None:
            modifier_options = tuple(modifier_settings.get_strv(options_key))

        self.original = OriginalValues(
            overlay_key=overlay_settings.get_string(overlay_key),
            modifier_options=modifier_options,
        )
        logger.debug(f"Overlay key original: {self.original.overlay_key!r}")
        if self.remap_modifier:
            logger.debug(f"Layout options original: {list(self.original.modifier_options)}")
            logger.debug(f"Layout options modified: {self.modified_options()}")

        self.state = ToggleState.ON
        self._destroyed = False
        self._listeners: list[Callable[[ToggleState], None]] = []

    @property
    def remap_modifier(self) -> bool:
        """True when the toggle also remaps the Super key."""
        return self.original.modifier_options is not None

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def modified_options(self) -> list[str]:
        """
        Layout options written while the toggle is off.

        Returns:
            Original options with the remap token appended, duplicates
            removed (first occurrence wins). Empty list when not remapping.
        """
        if not self.remap_modifier:
            return []
        return list(dict.fromkeys([*self.original.modifier_options, self._remap_token]))

    def connect(self, callback: Callable[[ToggleState], None]) -> None:
        """Register a callback invoked with the new state after each transition."""
        self._listeners.append(callback)

    def turn_off(self) -> None:
        """Clear the overlay key (and remap the modifier, if enabled)."""
        self._check_alive()

        self._overlay_settings.set_string(self._overlay_key, "")
        if self.remap_modifier:
            self._modifier_settings.set_strv(self._options_key, self.modified_options())

        self._set_state(ToggleState.OFF)

    def turn_on(self) -> None:
        """Write the original values back."""
        self._check_alive()
        self._restore_originals()
        self._set_state(ToggleState.ON)

    def toggle(self) -> ToggleState:
        """Flip to the other state and return it."""
        if self.state is ToggleState.ON:
            self.turn_off()
        else:
            self.turn_on()
        return self.state

    def destroy(self) -> None:
        """
        Restore the original values and release the handles.

        Restoration happens whatever the current state is. Calling this a
        second time performs no writes.
        """
        if self._destroyed:
            logger.warning("OverlayKeyToggle.destroy() called twice, ignoring")
            return

        self._restore_originals()
        self.state = ToggleState.ON
        self._destroyed = True

        self._listeners.clear()
        self._overlay_settings = None
        self._modifier_settings = None

    def _restore_originals(self) -> None:
        self._overlay_settings.set_string(self._overlay_key, self.original.overlay_key)
        if self.remap_modifier:
            self._modifier_settings.set_strv(self._options_key, list(self.original.modifier_options))
        logger.debug(f"Restored overlay key to {self.original.overlay_key!r}")

    def _set_state(self, state: ToggleState) -> None:
        self.state = state
        logger.debug(f"Overlay key toggle is now {state.value}")
        for callback in list(self._listeners):
            callback(state)

    def _check_alive(self) -> None:
        if self._destroyed:
            raise ToggleDestroyedError("OverlayKeyToggle has already been destroyed")
