# pocketgb

Building blocks for a Game Boy emulator, written in pure Python.

- **Sound**: `pocketgb.apu.Apu` drives two square channels (the first with a
  frequency sweep), a wave channel and a noise channel through a frame
  sequencer and a stereo mixer, and hands `(left, right)` samples to any
  `AudioOutput` you provide.
- **Cartridges**: `pocketgb.cartridge.new_cartridge` reads the header of a
  ROM image and returns a `RomOnlyCartridge`, `Mbc1` or `Mbc2` with banked
  ROM and external RAM.
- **Savegames**: `pocketgb.ram_dumper.FilesystemRamDumper` stores
  battery-backed RAM next to the ROM as a `.sav` file.
- **Configuration**: `pocketgb.config.ConfigStorage` loads and saves key
  bindings and the colour palette as a TOML file.
- **Helpers**: `pocketgb.clock.Clock` (cycle accounting per frame),
  `pocketgb.keyboard_controller.KeyboardController`,
  `pocketgb.screen.GameboyScreen` and `pocketgb.fps_checker.FpsChecker`.

## Installation

```
pip install pocketgb
```

## Sound

Subclass `AudioOutput` to receive samples. `Apu` emits one sample every
`4194304 // sample_rate` clock cycles; a sample rate that is not positive
or exceeds the CPU clock raises `ValueError`.

```python
from pocketgb.apu import Apu, AudioOutput

class Collector(AudioOutput):
    def __init__(self):
        self.samples = []

    def output(self, sample):
        self.samples.append(sample)

    def get_sample_rate(self):
        return 44100

sink = Collector()
apu = Apu(sink)
apu.write(0xFF26, 0x80)   # power on
apu.write(0xFF25, 0x11)   # square channel 1 to both speakers
apu.write(0xFF12, 0xF0)   # full volume
apu.write(0xFF14, 0x87)   # trigger
for _ in range(1000):
    apu.step(4)
print(sink.samples[:4])
```

`Apu.read` returns the mixer registers `0xFF24`–`0xFF26`; only the channel
routing register `0xFF25` holds a value, every other register reads as 0.
Wave samples are written through `0xFF30`–`0xFF3F`.

## Cartridges and savegames

```python
from pathlib import Path
from pocketgb.cartridge import new_cartridge
from pocketgb.ram_dumper import FilesystemRamDumper

rom_path = "game.gb"
cartridge = new_cartridge(Path(rom_path).read_bytes(), FilesystemRamDumper(rom_path))
first_byte = cartridge.read(0x0100)
cartridge.dump_savegame()   # writes game.sav for battery-backed carts
```

Cartridge types `0x00`, `0x08`, `0x09` are ROM-only, `0x01`–`0x03` are
MBC1 and `0x05`–`0x06` are MBC2; any other type raises `ValueError`.
Battery-backed cartridges load their save data when they are created.
Implement `pocketgb.cartridge.RamDumper` to keep save data somewhere other
than a file.

## Configuration

```python
from pocketgb.config import ConfigStorage

storage = ConfigStorage.create_from_file("gbemulator.toml")
print(storage.config.color_palette)
storage.save_to_file()
```

A missing file is created with the defaults; a file that cannot be read,
parsed or written raises `ConfigError`. The file looks like this:

```toml
[controls]
selected_type = "Keyboard"

[controls.keyboard_map]
Up = ["W"]
A = ["Space"]

[color_palette]
color1 = [8, 24, 32]
color2 = [52, 104, 86]
color3 = [136, 192, 112]
color4 = [224, 248, 208]
```

The `controls` table is required; `color_palette` falls back to the
default when left out. Key codes are plain strings; the buttons are the
`pocketgb.controls.Key` values `A`, `B`, `Left`, `Right`, `Up`, `Down`,
`Start` and `Select`.

## Input and display

`KeyboardController(joypad, storage)` looks up a key code in the
configured bindings and calls `joypad.push_key(key)` or
`joypad.release_key(key)` for each bound button; the joypad is any object
with those two methods.

`GameboyScreen.draw` takes a 160×144 RGB frame (69120 bytes) into a
double buffer, and `texture_data` returns the latest frame as RGBA bytes
with alpha set to zero. `get_palette` returns the configured shades from
lightest to darkest.

## What this package does not do

It has no CPU, graphics unit, memory bus or joypad, and no loop that runs
a game. It opens no window, plays no sound on a device and has no
command-line program: it supplies the sound unit, cartridges, savegame
storage, configuration and helpers for a program that does.

## Tests

```
pip install "pocketgb[test]"
pytest
```