"""A linear framebuffer over a writable byte buffer."""

from __future__ import annotations

import struct

from d3kit.color import Color

DEFAULT_CHAR_WIDTH = 8
DEFAULT_CHAR_HEIGHT = 16

_SUPPORTED_BPP = (15, 16, 24, 32)


class LinearFrameBuffer:
    """Pixel access to a framebuffer laid out row by row with a fixed pitch."""

    def __init__(self, buffer, pitch: int, width: int, height: int, bpp: int) -> None:
        view = memoryview(buffer).cast("B")
        if view.readonly:
            raise TypeError("framebuffer memory must be writable")
        if len(view) < pitch * height:
            raise ValueError(
                f"buffer holds {len(view)} bytes, need at least {pitch * height}"
            )
        self._buffer = view
        self._pitch = pitch
        self._width = width
        self._height = height
        self._bpp = bpp

    @property
    def buffer(self) -> memoryview:
        return self._buffer

    @property
    def pitch(self) -> int:
        return self._pitch

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def bpp(self) -> int:
        return self._bpp

    def draw_pixel(self, x: int, y: int, color: Color) -> None:
        """Draw a pixel, blending translucent colors; off-screen pixels are ignored."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            return
        if color.alpha == 0:
            return
        if color.alpha < 255:
            color = self.read_pixel(x, y).blend(color)
        self._write_pixel(x, y, color)

    def read_pixel(self, x: int, y: int) -> Color:
        """Decode the pixel at (x, y)."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) is out of bounds")
        bytes_per_pixel = (16 if self._bpp == 15 else self._bpp) // 8
        offset = x * bytes_per_pixel + y * self._pitch
        raw = bytes(self._buffer[offset:offset + 4]).ljust(4, b"\0")
        return Color.from_rgb(int.from_bytes(raw, "little"), self._bpp)

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        """Draw every pixel of a rectangle in one color."""
        for row in range(y, y + height):
            for col in range(x, x + width):
                self.draw_pixel(col, row, color)

    def clear(self) -> None:
        """Set the whole visible area to zero bytes."""
        total = self._pitch * self._height
        self._buffer[:total] = bytes(total)

    def scroll_up(self, lines: int) -> None:
        """Move the content up by ``lines`` rows and clear the rows freed below."""
        if not 0 <= lines <= self._height:
            raise ValueError(f"cannot scroll {lines} lines on a {self._height}-line screen")
        total = self._pitch * self._height
        shift = self._pitch * lines
        self._buffer[:total - shift] = bytes(self._buffer[shift:total])
        self._buffer[total - shift:total] = bytes(shift)

    def _write_pixel(self, x: int, y: int, color: Color) -> None:
        if self._bpp == 15:
            struct.pack_into("<H", self._buffer, 2 * (x + y * (self._pitch // 2)), color.rgb_15())
        elif self._bpp == 16:
            struct.pack_into("<H", self._buffer, 2 * (x + y * (self._pitch // 2)), color.rgb_16())
        elif self._bpp == 24:
            index = x * 3 + y * self._pitch
            self._buffer[index:index + 3] = bytes((color.blue, color.green, color.red))
        elif self._bpp == 32:
            struct.pack_into("<I", self._buffer, 4 * (x + y * (self._pitch // 4)), color.rgb_32())
        else:
            raise RuntimeError(
                f"cannot draw on a framebuffer with {self._bpp} bits per pixel; "
                f"supported: {_SUPPORTED_BPP}"
            )