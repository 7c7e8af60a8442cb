"""ANSI escape sequences for terminal colors and text attributes."""

from __future__ import annotations

from enum import IntEnum

from d3kit.color import Color
from d3kit.palette import COLOR_TABLE_256

ESCAPE_SEQUENCE_START = "\x1b"
RESET = "\x1b[0m"

FOREGROUND_BLACK = "\x1b[30m"
FOREGROUND_RED = "\x1b[31m"
FOREGROUND_GREEN = "\x1b[32m"
FOREGROUND_YELLOW = "\x1b[33m"
FOREGROUND_BLUE = "\x1b[34m"
FOREGROUND_MAGENTA = "\x1b[35m"
FOREGROUND_CYAN = "\x1b[36m"
FOREGROUND_WHITE = "\x1b[37m"
FOREGROUND_DEFAULT = "\x1b[39m"
FOREGROUND_BRIGHT_BLACK = "\x1b[90m"
FOREGROUND_BRIGHT_RED = "\x1b[91m"
FOREGROUND_BRIGHT_GREEN = "\x1b[92m"
FOREGROUND_BRIGHT_YELLOW = "\x1b[93m"
FOREGROUND_BRIGHT_BLUE = "\x1b[94m"
FOREGROUND_BRIGHT_MAGENTA = "\x1b[95m"
FOREGROUND_BRIGHT_CYAN = "\x1b[96m"
FOREGROUND_BRIGHT_WHITE = "\x1b[97m"

BACKGROUND_BLACK = "\x1b[40m"
BACKGROUND_RED = "\x1b[41m"
BACKGROUND_GREEN = "\x1b[42m"
BACKGROUND_YELLOW = "\x1b[43m"
BACKGROUND_BLUE = "\x1b[44m"
BACKGROUND_MAGENTA = "\x1b[45m"
BACKGROUND_CYAN = "\x1b[46m"
BACKGROUND_WHITE = "\x1b[47m"
BACKGROUND_DEFAULT = "\x1b[49m"
BACKGROUND_BRIGHT_BLACK = "\x1b[100m"
BACKGROUND_BRIGHT_RED = "\x1b[101m"
BACKGROUND_BRIGHT_GREEN = "\x1b[102m"
BACKGROUND_BRIGHT_YELLOW = "\x1b[103m"
BACKGROUND_BRIGHT_BLUE = "\x1b[104m"
BACKGROUND_BRIGHT_MAGENTA = "\x1b[105m"
BACKGROUND_BRIGHT_CYAN = "\x1b[106m"
BACKGROUND_BRIGHT_WHITE = "\x1b[107m"

__all__ = [
    "COLOR_TABLE_256",
    "Color8",
    "GraphicRendition",
    "Key",
    "fg_8bit_color",
    "bg_8bit_color",
    "fg_24bit_color",
    "bg_24bit_color",
]


class Color8(IntEnum):
    """The eight basic ANSI colors."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class GraphicRendition(IntEnum):
    """Select Graphic Rendition parameters for text attributes."""

    NORMAL = 0
    BRIGHT = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    SLOW_BLINK = 5
    FAST_BLINK = 6
    INVERT = 7
    RESET_BRIGHT_DIM = 22
    RESET_ITALIC = 23
    RESET_UNDERLINE = 24
    RESET_BLINK = 25
    RESET_INVERT = 27


class Key(IntEnum):
    """Codes for special keys outside the byte range."""

    KEY_UP = 0x0100
    KEY_DOWN = 0x0101
    KEY_RIGHT = 0x0102
    KEY_LEFT = 0x0103


def _check_index(color_index: int) -> int:
    index = int(color_index)
    if not 0 <= index <= 0xFF:
        raise ValueError(f"color index must be in 0..255, got {index}")
    return index


def fg_8bit_color(color_index: int) -> str:
    """Escape sequence selecting a palette color for the foreground."""
    return f"\x1b[38;5;{_check_index(color_index)}m"


def bg_8bit_color(color_index: int) -> str:
    """Escape sequence selecting a palette color for the background."""
    return f"\x1b[48;5;{_check_index(color_index)}m"


def fg_24bit_color(color: Color) -> str:
    """Escape sequence selecting a true color for the foreground."""
    return f"\x1b[38;2;{color.red};{color.green};{color.blue}m"


def bg_24bit_color(color: Color) -> str:
    """Escape sequence selecting a true color for the background."""
    return f"\x1b[48;2;{color.red};{color.green};{color.blue}m"