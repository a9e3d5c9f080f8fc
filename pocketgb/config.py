"""Emulator configuration and its TOML file storage."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from pocketgb.controls import Controls

Color = tuple[int, int, int]

_COLOR_NAMES = ("color1", "color2", "color3", "color4")


class ConfigError(ValueError):
    """Raised when configuration cannot be read, parsed or written."""


@dataclass
class ColorPalette:
    """The four shades used to draw the screen, darkest first."""

    color1: Color = (8, 24, 32)
    color2: Color = (52, 104, 86)
    color3: Color = (136, 192, 112)
    color4: Color = (224, 248, 208)


def _color_from_value(name: str, value: Any) -> Color:
    if (
        not isinstance(value, list)
        or len(value) != 3
        or not all(isinstance(c, int) and 0 <= c <= 255 for c in value)
    ):
        raise ConfigError(f"{name} must be three integers from 0 to 255")
    return (value[0], value[1], value[2])


def _palette_from_dict(data: Any) -> ColorPalette:
    if not isinstance(data, Mapping):
        raise ConfigError("color_palette must be a table")
    colors = {}
    for name in _COLOR_NAMES:
        if name not in data:
            raise ConfigError(f"missing field `{name}`")
        colors[name] = _color_from_value(name, data[name])
    return ColorPalette(**colors)


def _palette_to_dict(palette: ColorPalette) -> dict[str, list[int]]:
    return {name: list(getattr(palette, name)) for name in _COLOR_NAMES}


@dataclass
class Config:
    """All user settings."""

    controls: Controls = field(default_factory=Controls)
    color_palette: ColorPalette = field(default_factory=ColorPalette)

    @classmethod
    def from_toml(cls, text: str) -> Config:
        """Parse a TOML document; a missing palette falls back to the default."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as error:
            raise ConfigError(str(error)) from error
        if "controls" not in data:
            raise ConfigError("missing field `controls`")
        try:
            controls = Controls.from_dict(data["controls"])
        except (ValueError, TypeError, KeyError) as error:
            raise ConfigError(str(error)) from error
        palette = (
            _palette_from_dict(data["color_palette"])
            if "color_palette" in data
            else ColorPalette()
        )
        return cls(controls, palette)

    def to_toml(self) -> str:
        """Serialize to a TOML document."""
        return tomli_w.dumps(
            {
                "controls": self.controls.to_dict(),
                "color_palette": _palette_to_dict(self.color_palette),
            }
        )


class ConfigStorage:
    """A configuration bound to the file it is loaded from and saved to."""

    def __init__(self, config: Config, filename: str) -> None:
        self.config = config
        self.filename = filename

    @classmethod
    def create_empty(cls, filename: str) -> ConfigStorage:
        """Storage holding the default configuration."""
        return cls(Config(), filename)

    @classmethod
    def create_from_file(cls, filename: str) -> ConfigStorage:
        """Load ``filename``, creating it with defaults if it does not exist."""
        try:
            content = Path(filename).read_text(encoding="utf-8")
        except FileNotFoundError:
            storage = cls.create_empty(filename)
            storage.save_to_file()
            return storage
        except OSError as error:
            raise ConfigError(f"Error loading config file: {error}") from error

        try:
            config = Config.from_toml(content)
        except ConfigError as error:
            raise ConfigError(f"Error parsing toml config: {error}") from error
        return cls(config, filename)

    def save_to_file(self) -> None:
        """Write the configuration to its file."""
        text = self.config.to_toml()
        try:
            Path(self.filename).write_text(text, encoding="utf-8")
        except OSError as error:
            raise ConfigError(f"Error saving config to file: {error}") from error