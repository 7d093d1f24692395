import pytest
from hypothesis import given
from hypothesis import strategies as st

from x68game.bits import xsp_info
from x68game.sprites import (
    SpritePattern,
    rotate_palette,
    rotate_palette_keep_zero,
    sprite_layout,
)

words = st.integers(min_value=0, max_value=0xFFFF)
palettes = st.lists(st.integers(min_value=0, max_value=0xFFFF), min_size=16, max_size=16)


@given(st.lists(words, min_size=1, max_size=8), st.integers(min_value=0, max_value=0xFF))
def test_set_priority_keeps_high_byte(codes, pri):
    pattern = SpritePattern(codes=list(codes))
    pattern.set_priority(pri)
    for old, new in zip(codes, pattern.codes):
        assert new & 0xFF00 == old & 0xFF00
        assert new & 0xFF == pri & 0x3F


@given(st.lists(words, min_size=1, max_size=8), st.integers(min_value=0, max_value=15))
def test_set_palette_round_trip(codes, pal):
    pattern = SpritePattern(codes=list(codes))
    pattern.set_palette(pal)
    assert pattern.palette() == pal
    for old, new in zip(codes, pattern.codes):
        assert new & 0xF0FF == old & 0xF0FF


def test_set_palette_at_changes_one_cell():
    pattern = SpritePattern(codes=[0x0100, 0x0200, 0x0300])
    pattern.set_palette_at(9, 1)
    assert pattern.codes[0] == 0x0100
    assert pattern.codes[2] == 0x0300
    assert (pattern.codes[1] & 0xF00) >> 8 == 9


def test_set_palette_at_rejects_large_palette():
    pattern = SpritePattern(codes=[0x0100])
    with pytest.raises(ValueError):
        pattern.set_palette_at(16, 0)


def test_set_palette_at_rejects_bad_index():
    pattern = SpritePattern(codes=[0x0100])
    with pytest.raises(IndexError):
        pattern.set_palette_at(3, 1)


def test_palette_of_empty_pattern_raises():
    with pytest.raises(ValueError):
        SpritePattern().palette()


@given(
    st.lists(words, min_size=1, max_size=8),
    st.integers(min_value=0, max_value=1),
    st.integers(min_value=0, max_value=1),
    st.integers(min_value=0, max_value=15),
    st.integers(min_value=0, max_value=63),
)
def test_set_info_non_negative_overwrites(codes, v, h, pal, pri):
    pattern = SpritePattern(codes=list(codes))
    pattern.set_info(v, h, pal, pri)
    assert pattern.codes == [xsp_info(v, h, pal, pri)] * len(codes)


@given(st.lists(words, min_size=1, max_size=8))
def test_set_info_negative_priority_keeps_upper_priority_bits(codes):
    pattern = SpritePattern(codes=list(codes))
    pattern.set_info(0, 0, 2, -1)
    for old, new in zip(codes, pattern.codes):
        assert new & 0xC0 == old & 0xC0
        assert new & 0x3F == 0x3F
        assert (new & 0xF00) >> 8 == 2


def test_set_anime_remembers_previous():
    pattern = SpritePattern(codes=[0])
    pattern.set_anime(3)
    pattern.set_anime(7)
    assert pattern.anime == 7
    assert pattern.anime_old == 3


@given(palettes, st.integers(min_value=0, max_value=16))
def test_rotate_palette_inverse(colors, count):
    rotated = rotate_palette(colors, count)
    assert rotate_palette(rotated, 16 - count) == colors
    assert sorted(rotated) == sorted(colors)


@given(palettes)
def test_rotate_palette_by_one(colors):
    rotated = rotate_palette(colors, 1)
    assert rotated[1] == colors[0]
    assert rotated[0] == colors[15]


def test_rotate_palette_wrong_length():
    with pytest.raises(ValueError):
        rotate_palette([0] * 15, 1)


@given(palettes, st.integers(min_value=1, max_value=16))
def test_rotate_keep_zero_invariants(colors, count):
    rotated = rotate_palette_keep_zero(colors, count)
    assert rotated[0] == colors[0]
    assert sorted(rotated) == sorted(colors)
    if count < 16:
        assert rotated[1] == colors[count]


@given(palettes)
def test_rotate_keep_zero_identity_cases(colors):
    assert rotate_palette_keep_zero(colors, 1) == colors
    assert rotate_palette_keep_zero(colors, 16) == colors


@pytest.mark.parametrize("count", [0, 17, -1])
def test_rotate_keep_zero_bad_count(count):
    with pytest.raises(ValueError):
        rotate_palette_keep_zero(list(range(16)), count)


def test_layout_2x1_matches_source_offsets():
    assert sprite_layout(100, 50, 10, "2x1") == [(92, 50, 10), (108, 50, 11)]


@pytest.mark.parametrize("size,cells", [("1x1", 1), ("2x1", 2), ("2x2", 4), ("3x3", 9)])
def test_layout_patterns_are_consecutive(size, cells):
    layout = sprite_layout(0, 0, 20, size)
    assert len(layout) == cells
    assert [pt for _, _, pt in layout] == list(range(20, 20 + cells))
    assert len({(x, y) for x, y, _ in layout}) == cells


def test_layout_3x3_first_and_last_cells():
    layout = sprite_layout(100, 100, 0, "3x3")
    assert layout[0] == (76, 76, 0)
    assert layout[-1] == (108, 108, 8)


def test_layout_unknown_size():
    with pytest.raises(ValueError):
        sprite_layout(0, 0, 0, "4x4")