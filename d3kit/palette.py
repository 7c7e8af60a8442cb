"""The 256-entry ANSI color palette used by 8-bit color escape sequences."""

from __future__ import annotations

from d3kit.color import BLACK, BLUE, CYAN, GREEN, MAGENTA, RED, WHITE, YELLOW, Color

_BASIC = (BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE)
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def _build_table() -> tuple[Color, ...]:
    basic = _BASIC + tuple(color.bright() for color in _BASIC)
    cube = tuple(
        Color(red, green, blue, 255)
        for red in _CUBE_LEVELS
        for green in _CUBE_LEVELS
        for blue in _CUBE_LEVELS
    )
    grays = tuple(Color(level, level, level, 255) for level in range(8, 239, 10))
    return basic + cube + grays


COLOR_TABLE_256: tuple[Color, ...] = _build_table()


def color_from_index(index: int) -> Color:
    """Return the palette color for an 8-bit ANSI color index."""
    if not 0 <= index < len(COLOR_TABLE_256):
        raise IndexError(f"color index {index} out of range 0..255")
    return COLOR_TABLE_256[index]