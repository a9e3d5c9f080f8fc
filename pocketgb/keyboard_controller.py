"""Translates keyboard events into Game Boy button presses."""

from typing import Protocol

from pocketgb.config import ConfigStorage
from pocketgb.controls import Key


class Joypad(Protocol):
    """The button state that key events are applied to."""

    def push_key(self, key: Key) -> None: ...

    def release_key(self, key: Key) -> None: ...


class KeyboardController:
    """Presses and releases the buttons bound to a key code."""

    def __init__(self, joypad: Joypad, config_storage: ConfigStorage) -> None:
        self.joypad = joypad
        self._config = config_storage.config

    def _keys_for(self, key_code: str) -> list[Key]:
        return list(self._config.controls.keyboard_map.map.get(key_code, ()))

    def push_key(self, key_code: str) -> None:
        """Press every button bound to ``key_code``."""
        for key in self._keys_for(key_code):
            self.joypad.push_key(key)

    def release_key(self, key_code: str) -> None:
        """Release every button bound to ``key_code``."""
        for key in self._keys_for(key_code):
            self.joypad.release_key(key)