"""Game Boy buttons and their keyboard bindings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Key(Enum):
    """A Game Boy button, valued by the name used in the config file."""

    A = "A"
    B = "B"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    START = "Start"
    SELECT = "Select"


class InputType(Enum):
    """The kind of input device used for controls."""

    KEYBOARD = "Keyboard"
    GAMEPAD = "Gamepad"


@dataclass
class KeyboardMap:
    """Maps keyboard key codes to the Game Boy buttons they press."""

    map: dict[str, list[Key]] = field(default_factory=dict)

    def get_key_code_by_key(self, key: Key) -> list[str]:
        """All key codes bound to ``key``."""
        return [code for code, keys in self.map.items() if key in keys]

    def add_key_code_by_key(self, key: Key, key_code: str) -> None:
        """Bind ``key_code`` to ``key`` unless it is already bound."""
        keys = self.map.setdefault(key_code, [])
        if key not in keys:
            keys.append(key)

    def clear_mapping_by_key(self, key: Key) -> None:
        """Remove every binding of ``key``."""
        for keys in self.map.values():
            if key in keys:
                keys.remove(key)

    def to_dict(self) -> dict[str, list[str]]:
        """Serialize as button name to list of key codes."""
        by_key: dict[Key, list[str]] = {}
        for code, keys in self.map.items():
            for key in keys:
                by_key.setdefault(key, []).append(code)
        return {key.value: by_key[key] for key in Key if key in by_key}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KeyboardMap:
        """Build from button name to list of key codes."""
        if not isinstance(data, Mapping):
            raise ValueError("keyboard map must be a table")
        result: dict[str, list[Key]] = {}
        for name, codes in data.items():
            try:
                key = Key(name)
            except ValueError:
                raise ValueError(f"Unknown Game Boy key: {name}") from None
            if not isinstance(codes, list) or not all(
                isinstance(code, str) for code in codes
            ):
                raise ValueError(f"Key codes for {name} must be a list of strings")
            for code in codes:
                result.setdefault(code, []).append(key)
        return cls(result)


def _default_keyboard_map() -> KeyboardMap:
    return KeyboardMap(
        {
            "W": [Key.UP],
            "A": [Key.LEFT],
            "S": [Key.DOWN],
            "D": [Key.RIGHT],
            "LShift": [Key.B],
            "Space": [Key.A],
            "Return": [Key.START],
            "K": [Key.SELECT],
        }
    )


@dataclass
class Controls:
    """Selected input type and the keyboard bindings."""

    selected_type: InputType = InputType.KEYBOARD
    keyboard_map: KeyboardMap = field(default_factory=_default_keyboard_map)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain data."""
        return {
            "selected_type": self.selected_type.value,
            "keyboard_map": self.keyboard_map.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Controls:
        """Build from plain data; both fields are required."""
        if not isinstance(data, Mapping):
            raise ValueError("controls must be a table")
        for name in ("selected_type", "keyboard_map"):
            if name not in data:
                raise ValueError(f"missing field `{name}`")
        try:
            selected_type = InputType(data["selected_type"])
        except ValueError:
            raise ValueError(
                f"Unknown input type: {data['selected_type']}"
            ) from None
        return cls(selected_type, KeyboardMap.from_dict(data["keyboard_map"]))