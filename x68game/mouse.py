"""Decoding of the packed words returned by the mouse position and data calls."""

from __future__ import annotations

from dataclasses import dataclass


def _s8(byte: int) -> int:
    byte &= 0xFF
    return byte - 0x100 if byte & 0x80 else byte


@dataclass(frozen=True)
class MouseData:
    """Relative movement and button states, each a signed byte."""

    dx: int
    dy: int
    left: int
    right: int


def decode_position(word: int) -> tuple[int, int]:
    """Split a cursor position word into (x, y): x in the high half, y in the low half."""
    return (word >> 16) & 0xFFFF, word & 0xFFFF


def decode_data(word: int) -> MouseData:
    """Split a mouse data word into movement and buttons, high byte first."""
    return MouseData(
        dx=_s8(word >> 24),
        dy=_s8(word >> 16),
        left=_s8(word >> 8),
        right=_s8(word),
    )