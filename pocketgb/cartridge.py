"""Game cartridges: ROM banking, external RAM and battery-backed saves."""

from abc import ABC, abstractmethod
from enum import Enum

EXT_RAM_SIZE = 8192
EXT_RAM_ADDRESS = 0xA000
CARTRIDGE_TYPE_ADDRESS = 0x147
RAM_SIZE_ADDRESS = 0x149
ROM_BANK_SIZE = 0x4000

_RAM_SIZES = {
    0x01: 2 * 1024,
    0x02: 8 * 1024,
    0x03: 32 * 1024,
    0x04: 128 * 1024,
    0x05: 64 * 1024,
}


class RamDumper(ABC):
    """Persists the contents of battery-backed cartridge RAM."""

    @abstractmethod
    def dump(self, data: bytes | bytearray) -> None:
        """Store ``data``."""

    @abstractmethod
    def load(self) -> bytes | None:
        """Return previously stored data, or None if there is none."""


def get_ram_size(rom: bytes | bytearray) -> int | None:
    """External RAM size declared in the ROM header, or None for no RAM."""
    return _RAM_SIZES.get(rom[RAM_SIZE_ADDRESS])


def create_ram(ram_size: int | None) -> bytearray | None:
    """Zero-filled RAM of ``ram_size`` bytes, or None when there is no size."""
    if ram_size is None:
        return None
    return bytearray(ram_size)


class CartridgeBase:
    """ROM and RAM storage with bank selection shared by all cartridge kinds."""

    def __init__(
        self,
        rom: bytes | bytearray,
        has_ram: bool,
        ram_size: int | None,
        has_battery: bool,
        ram_dumper: RamDumper | None,
    ) -> None:
        self.rom = bytes(rom)
        self.ram = create_ram(ram_size) if has_ram else None
        self.rom_bank = 1
        self.ram_bank = 0
        self.ram_enabled = False
        self.has_battery = has_battery
        self.ram_dumper = ram_dumper
        self.load_savegame()

    def read(self, address: int) -> int:
        """Read a byte from fixed bank 0 or the selected switchable bank."""
        if 0x0 <= address <= 0x3FFF:
            return self.rom[address]
        if 0x4000 <= address <= 0x7FFF:
            offset = ROM_BANK_SIZE * self.rom_bank
            return self.rom[address - 0x4000 + offset]
        raise ValueError(f"Address unknown: 0x{address:X}")

    def write_ram(self, address: int, value: int) -> None:
        """Write to the selected RAM bank if RAM is enabled."""
        if not self.ram_enabled or self.ram is None:
            return
        offset = EXT_RAM_SIZE * self.ram_bank
        self.ram[address - EXT_RAM_ADDRESS + offset] = value

    def read_ram(self, address: int) -> int:
        """Read from the selected RAM bank; disabled or missing RAM reads 0."""
        if not self.ram_enabled or self.ram is None:
            return 0
        offset = EXT_RAM_SIZE * self.ram_bank
        return self.ram[address - EXT_RAM_ADDRESS + offset]

    def dump_savegame(self) -> None:
        """Hand battery-backed RAM to the dumper."""
        if not self.has_battery:
            return
        if self.ram is not None and self.ram_dumper is not None:
            self.ram_dumper.dump(self.ram)

    def load_savegame(self) -> None:
        """Replace battery-backed RAM with what the dumper has stored."""
        if not self.has_battery or self.ram_dumper is None:
            return
        data = self.ram_dumper.load()
        if data is not None and self.ram is not None:
            self.ram = bytearray(data)


class Cartridge(ABC):
    """A cartridge as seen by the memory bus."""

    base: CartridgeBase

    def read(self, address: int) -> int:
        """Read a ROM byte."""
        return self.base.read(address)

    @abstractmethod
    def write(self, address: int, value: int) -> None:
        """Write to the ROM area, which controls the memory bank controller."""

    def write_ram(self, address: int, value: int) -> None:
        """Write to external RAM."""
        self.base.write_ram(address, value)

    def read_ram(self, address: int) -> int:
        """Read from external RAM."""
        return self.base.read_ram(address)

    def dump_savegame(self) -> None:
        """Persist battery-backed RAM."""
        self.base.dump_savegame()

    def load_savegame(self) -> None:
        """Restore battery-backed RAM."""
        self.base.load_savegame()


class RomOnlyCartridge(Cartridge):
    """Cartridge without a bank controller, optionally with RAM."""

    def __init__(self, rom: bytes | bytearray, ram_dumper: RamDumper | None) -> None:
        cartridge_type = rom[CARTRIDGE_TYPE_ADDRESS]
        has_ram = cartridge_type in (0x08, 0x09)
        has_battery = cartridge_type == 0x09
        self.base = CartridgeBase(
            rom, has_ram, get_ram_size(rom), has_battery, ram_dumper
        )

    def write(self, address: int, value: int) -> None:
        """ROM is not writable; writes are ignored."""


class _Mode(Enum):
    ROM_BANKING = 0
    RAM_BANKING = 1


class Mbc1(Cartridge):
    """Cartridge with the MBC1 bank controller."""

    def __init__(self, rom: bytes | bytearray, ram_dumper: RamDumper | None) -> None:
        cartridge_type = rom[CARTRIDGE_TYPE_ADDRESS]
        has_ram = cartridge_type in (0x02, 0x03)
        has_battery = cartridge_type == 0x03
        self.base = CartridgeBase(
            rom, has_ram, get_ram_size(rom), has_battery, ram_dumper
        )
        self._mode = _Mode.ROM_BANKING

    def write(self, address: int, value: int) -> None:
        """Handle RAM enable, bank selection and mode selection."""
        base = self.base
        if 0x0 <= address <= 0x1FFF:
            base.ram_enabled = value == 0x0A
        elif 0x2000 <= address <= 0x3FFF:
            bank_number = value or 1
            base.rom_bank = (base.rom_bank & 0x60) | (bank_number & 0x1F)
        elif 0x4000 <= address <= 0x5FFF:
            if self._mode is _Mode.RAM_BANKING:
                base.ram_bank = value
            else:
                base.rom_bank = base.rom_bank | ((value & 0x03) << 5)
        elif 0x6000 <= address <= 0x7FFF:
            if value == 0:
                self._mode = _Mode.ROM_BANKING
            elif value == 1:
                self._mode = _Mode.RAM_BANKING


class Mbc2(Cartridge):
    """Cartridge with the MBC2 bank controller and its built-in 4-bit RAM."""

    def __init__(self, rom: bytes | bytearray, ram_dumper: RamDumper | None) -> None:
        has_battery = rom[CARTRIDGE_TYPE_ADDRESS] == 0x06
        self.base = CartridgeBase(rom, True, 512, has_battery, ram_dumper)

    def write(self, address: int, value: int) -> None:
        """Handle RAM enable and ROM bank selection, chosen by address bit 8."""
        if 0x0 <= address <= 0x1FFF:
            if address & 0x100 == 0:
                self.base.ram_enabled = value == 0x0A
        elif 0x2000 <= address <= 0x3FFF:
            if address & 0x100 != 0x100:
                return
            bank_number = value or 1
            self.base.rom_bank = bank_number & 0xF

    def write_ram(self, address: int, value: int) -> None:
        """Store the low nibble of ``value``."""
        if 0xA000 <= address <= 0xA1FF:
            self.base.write_ram(address, value & 0xF)

    def read_ram(self, address: int) -> int:
        """Read a 4-bit RAM cell; addresses outside the RAM read 0."""
        if 0xA000 <= address <= 0xA1FF:
            return self.base.read_ram(address) & 0xF
        return 0


def new_cartridge(
    rom: bytes | bytearray, ram_dumper: RamDumper | None
) -> Cartridge:
    """Create the cartridge kind named by the ROM header."""
    cartridge_type = rom[CARTRIDGE_TYPE_ADDRESS]
    if cartridge_type in (0x00, 0x08, 0x09):
        return RomOnlyCartridge(rom, ram_dumper)
    if 0x01 <= cartridge_type <= 0x03:
        return Mbc1(rom, ram_dumper)
    if 0x05 <= cartridge_type <= 0x06:
        return Mbc2(rom, ram_dumper)
    raise ValueError(f"Unknown cartridge type: 0x{cartridge_type:X}")