import re

import pytest

from d3kit.ansi import (
    COLOR_TABLE_256,
    Color8,
    Key,
    bg_24bit_color,
    bg_8bit_color,
    fg_24bit_color,
    fg_8bit_color,
)
from d3kit.color import Color


def test_fg_8bit_color_format():
    assert fg_8bit_color(196) == "\x1b[38;5;196m"


def test_bg_8bit_color_format():
    assert bg_8bit_color(21) == "\x1b[48;5;21m"


def test_8bit_accepts_enum_member_as_number():
    assert fg_8bit_color(Color8.RED) == fg_8bit_color(1)
    assert bg_8bit_color(Color8.WHITE) == bg_8bit_color(7)


@pytest.mark.parametrize("index", [-1, 256, 1000])
def test_8bit_rejects_out_of_range(index):
    with pytest.raises(ValueError):
        fg_8bit_color(index)
    with pytest.raises(ValueError):
        bg_8bit_color(index)


@pytest.mark.parametrize("index", [0, 17, 128, 255])
def test_24bit_sequences_carry_channels(index):
    color = COLOR_TABLE_256[index]
    fg = re.fullmatch(r"\x1b\[38;2;(\d+);(\d+);(\d+)m", fg_24bit_color(color))
    bg = re.fullmatch(r"\x1b\[48;2;(\d+);(\d+);(\d+)m", bg_24bit_color(color))
    assert fg is not None and bg is not None
    expected = (color.red, color.green, color.blue)
    assert tuple(int(v) for v in fg.groups()) == expected
    assert tuple(int(v) for v in bg.groups()) == expected


def test_24bit_ignores_alpha():
    color = Color(10, 20, 30, 255)
    assert fg_24bit_color(color) == fg_24bit_color(color.with_alpha(0))


def test_key_lookup_by_code():
    assert Key(0x0100) is Key.KEY_UP
    assert sorted(Key) == [Key.KEY_UP, Key.KEY_DOWN, Key.KEY_RIGHT, Key.KEY_LEFT]