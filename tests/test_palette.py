import pytest

from d3kit.color import BLACK, BLUE, CYAN, GREEN, MAGENTA, RED, WHITE, YELLOW, Color
from d3kit.palette import COLOR_TABLE_256, color_from_index

BASIC = [BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE]
CUBE_LEVELS = {0, 95, 135, 175, 215, 255}


def test_table_has_256_entries():
    assert len(COLOR_TABLE_256) == 256
    assert color_from_index(255) == COLOR_TABLE_256[-1]


@pytest.mark.parametrize("index", [-1, 256, 1000])
def test_out_of_range_index_raises(index):
    with pytest.raises(IndexError):
        color_from_index(index)


@pytest.mark.parametrize("index", range(8))
def test_first_eight_are_basic_colors(index):
    assert color_from_index(index) == BASIC[index]


@pytest.mark.parametrize("index", range(8))
def test_next_eight_are_bright_variants(index):
    assert color_from_index(index + 8) == BASIC[index].bright()


def test_cube_boundaries():
    assert color_from_index(16) == Color(0, 0, 0, 255)
    assert color_from_index(21) == Color(0, 0, 255, 255)
    assert color_from_index(231) == Color(255, 255, 255, 255)


def test_cube_channels_use_fixed_levels():
    cube = [color_from_index(i) for i in range(16, 232)]
    assert len(set(cube)) == 216
    assert all({c.red, c.green, c.blue} <= CUBE_LEVELS for c in cube)


def test_grayscale_ramp():
    grays = [color_from_index(i) for i in range(232, 256)]
    assert grays[0] == Color(8, 8, 8, 255)
    assert grays[-1] == Color(238, 238, 238, 255)
    assert all(c.red == c.green == c.blue for c in grays)
    assert all(a.red < b.red for a, b in zip(grays, grays[1:]))


def test_all_entries_opaque():
    assert all(color_from_index(i).alpha == 255 for i in range(256))