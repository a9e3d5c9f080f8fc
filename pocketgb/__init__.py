"""Game Boy emulation components: sound unit, cartridges, savegames, configuration and helpers."""

__version__ = "0.1.0"