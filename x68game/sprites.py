"""Sprite pattern attribute editing, palette rotation and multi-cell sprite layouts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from x68game.bits import xsp_info

PRI_HIGH = 0x3F
PRI_MID = 0x2F
PRI_LOW = 0x1F
PRI_HIDDEN = 0x00

PALETTE_SIZE = 16
_U16 = 0xFFFF

_CELL = 8
_LAYOUTS: dict[str, tuple[tuple[int, int], ...]] = {
    "1x1": ((0, 0),),
    "2x1": ((-_CELL, 0), (_CELL, 0)),
    "2x2": ((-_CELL, -_CELL), (_CELL, -_CELL), (-_CELL, _CELL), (_CELL, _CELL)),
    "3x3": tuple(
        (dx, dy)
        for dy in (-3 * _CELL, -_CELL, _CELL)
        for dx in (-3 * _CELL, -_CELL, _CELL)
    ),
}


@dataclass
class SpritePattern:
    """A sprite made of several cells, each with its own 16-bit info word."""

    codes: list[int] = field(default_factory=list)
    anime: int = 0
    anime_old: int = 0

    def set_priority(self, pri: int) -> None:
        """Replace the priority byte of every cell, keeping flips and palette."""
        self.codes = [((code & 0xFF00) | (pri & 0x3F)) & _U16 for code in self.codes]

    def set_palette(self, pal: int) -> None:
        """Replace the palette field of every cell."""
        self.codes = [((code & 0xF0FF) | (pal << 8)) & _U16 for code in self.codes]

    def set_palette_at(self, pal: int, index: int) -> None:
        """Replace the palette field of one cell."""
        if pal > 15:
            raise ValueError(f"palette must be at most 15, got {pal}")
        if not 0 <= index < len(self.codes):
            raise IndexError(f"cell index {index} out of range for {len(self.codes)} cells")
        self.codes[index] = ((self.codes[index] & 0xF0FF) | (pal << 8)) & _U16

    def palette(self) -> int:
        """Palette number of the first cell."""
        if not self.codes:
            raise ValueError("pattern has no cells")
        return (self.codes[0] & 0xF00) >> 8

    def set_info(self, v: int, h: int, pal: int, pri: int) -> None:
        """Rewrite flips, palette and priority; a negative field keeps its old bits."""
        mask = 0
        if v < 0:
            mask |= 0x8000
        if h < 0:
            mask |= 0x4000
        if pal < 0:
            mask |= 0x0F00
        if pri < 0:
            mask |= 0x00FF
        info = xsp_info(v, h, pal, pri)
        self.codes = [((code & mask) | info) & _U16 for code in self.codes]

    def set_anime(self, anime: int) -> None:
        """Switch to another animation frame, remembering the previous one."""
        self.anime_old = self.anime
        self.anime = anime


def _check_palette(colors: Sequence[int]) -> list[int]:
    if len(colors) != PALETTE_SIZE:
        raise ValueError(f"a palette holds {PALETTE_SIZE} colours, got {len(colors)}")
    return list(colors)


def rotate_palette(colors: Sequence[int], count: int) -> list[int]:
    """Rotate all sixteen colours so that colour i moves to slot (i + count) % 16."""
    source = _check_palette(colors)
    result = [0] * PALETTE_SIZE
    for i, color in enumerate(source):
        result[(i + count) % PALETTE_SIZE] = color
    return result


def rotate_palette_keep_zero(colors: Sequence[int], count: int) -> list[int]:
    """Rotate colours 1..15 so that colour `count` comes first; colour 0 stays put."""
    source = _check_palette(colors)
    if not 1 <= count <= PALETTE_SIZE:
        raise ValueError(f"count must be in 1..{PALETTE_SIZE}, got {count}")
    return [source[0], *source[count:], *source[1:count]]


def sprite_layout(x: int, y: int, pt: int, size: str) -> list[tuple[int, int, int]]:
    """Cell positions and pattern numbers for a 1x1, 2x1, 2x2 or 3x3 sprite at (x, y)."""
    try:
        offsets = _LAYOUTS[size]
    except KeyError:
        raise ValueError(f"unknown sprite size {size!r}") from None
    return [(x + dx, y + dy, pt + i) for i, (dx, dy) in enumerate(offsets)]