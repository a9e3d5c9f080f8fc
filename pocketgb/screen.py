"""Double-buffered screen that hands frames to the renderer."""

import threading

from pocketgb.config import Color, Config

SCREEN_WIDTH = 160
SCREEN_HEIGHT = 144
BUFFER_SIZE = SCREEN_WIDTH * SCREEN_HEIGHT * 3
"""Size of an RGB frame in bytes."""

MENU_BAR_HEIGHT = 19


class GameboyScreen:
    """Receives RGB frames and provides the latest one as RGBA texture data."""

    def __init__(self, config: Config) -> None:
        self._buffers = [bytearray(b"\xff" * BUFFER_SIZE) for _ in range(2)]
        self._current = 0
        self._lock = threading.Lock()
        self._config = config

    def draw(self, screen_buffer: bytes | bytearray) -> None:
        """Store a finished RGB frame in the back buffer and make it current."""
        if len(screen_buffer) != BUFFER_SIZE:
            raise ValueError(
                f"screen buffer must be {BUFFER_SIZE} bytes, got {len(screen_buffer)}"
            )
        with self._lock:
            back = 1 - self._current
            self._buffers[back][:] = screen_buffer
            self._current = back

    def get_palette(self) -> tuple[Color, Color, Color, Color]:
        """The palette from lightest to darkest shade."""
        palette = self._config.color_palette
        return (palette.color4, palette.color3, palette.color2, palette.color1)

    def texture_data(self) -> bytes:
        """The current frame as RGBA bytes with the alpha byte set to zero."""
        with self._lock:
            pixels = bytes(self._buffers[self._current])
        texture = bytearray(SCREEN_WIDTH * SCREEN_HEIGHT * 4)
        for channel in range(3):
            texture[channel::4] = pixels[channel::3]
        return bytes(texture)