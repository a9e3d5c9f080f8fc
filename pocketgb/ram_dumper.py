"""Stores battery-backed cartridge RAM in a file next to the ROM."""

from pathlib import Path

from pocketgb.cartridge import RamDumper


class FilesystemRamDumper(RamDumper):
    """Keeps save data in ``<rom name>.sav``."""

    def __init__(self, rom_filename: str) -> None:
        rom_name = rom_filename[:-3] if rom_filename.endswith(".gb") else rom_filename
        self.filename = f"{rom_name}.sav"

    def dump(self, data: bytes | bytearray) -> None:
        """Write ``data`` to the save file."""
        Path(self.filename).write_bytes(bytes(data))

    def load(self) -> bytes | None:
        """Read the save file, or None if it cannot be read."""
        try:
            return Path(self.filename).read_bytes()
        except OSError:
            return None