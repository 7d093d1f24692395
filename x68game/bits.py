"""Bit-level helpers: saturating counters, fixed shifts, colour words and sprite codes."""

from __future__ import annotations

_RASTER_PERIOD = 224

# Each factor is approximated by adding and subtracting right-shifted copies of x.
# The first tuple holds shifts that are added, the second shifts that are subtracted.
_SHIFT_TERMS: dict[float, tuple[tuple[int, ...], tuple[int, ...]]] = {
    1.90: ((0, 1, 2, 3, 4), (5, 7)),
    1.80: ((0, 1, 2, 5, 6, 8), ()),
    1.75: ((0, 1, 2), ()),
    1.70: ((0, 1, 3, 4, 6), (8,)),
    1.60: ((0, 1, 3), (6, 7)),
    1.50: ((0, 1), ()),
    1.40: ((0, 2, 3, 6, 7), ()),
    1.30: ((0, 2, 4), (7, 8)),
    1.25: ((0, 2), ()),
    1.20: ((0, 3, 4, 6), (8,)),
    1.10: ((0, 3, 6), (5, 7)),
    1.00: ((0,), ()),
    0.91: ((1, 2, 3, 5, 8), ()),
    0.90: ((1, 2, 3, 4), (5, 7)),
    0.83: ((1, 2, 3, 6, 8), (5,)),
    0.80: ((1, 2, 5, 6, 8), ()),
    0.77: ((1, 2, 6, 8), ()),
    0.75: ((1, 2), ()),
    0.71: ((1, 3, 4, 5), ()),
    0.70: ((1, 3, 4, 6), (8,)),
    0.66: ((1, 3, 5, 7), ()),
    0.62: ((1, 3), ()),
    0.60: ((1, 3), (6, 7)),
    0.58: ((1, 4, 5), (7,)),
    0.54: ((1, 4, 6, 7), ()),
    0.52: ((1, 5, 7), (6,)),
    0.50: ((1,), ()),
    0.40: ((2, 3, 6, 7), ()),
    0.30: ((2, 4), (7, 8)),
    0.20: ((3, 4, 6), (8,)),
    0.10: ((3, 6), (5, 7)),
}


def _check_bits(bits: int) -> None:
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def clamp(value: int, low: int, high: int) -> int:
    """Limit value to the range spanned by low and high, in either order."""
    if low < high:
        if value < low:
            return low
        return high if value > high else value
    if value < high:
        return high
    return low if value > low else value


def dec_clip(x: int, y: int, bits: int = 16, signed: bool = False) -> int:
    """Subtract y from a fixed-width counter, saturating at the type's minimum."""
    _check_bits(bits)
    result = _wrap(x - y, bits, signed)
    if result <= x:
        return result
    return -(1 << (bits - 1)) if signed else 0


def inc_clip(x: int, y: int, bits: int = 16, signed: bool = False) -> int:
    """Add y to a fixed-width counter, saturating at the type's maximum."""
    _check_bits(bits)
    result = _wrap(x + y, bits, signed)
    if result >= x:
        return result
    return (1 << (bits - 1)) - 1 if signed else (1 << bits) - 1


def ras_roll(x: int) -> int:
    """Fold a raster line number into the 0..224 display range."""
    if x < 0:
        return (-x) % _RASTER_PERIOD
    if x > _RASTER_PERIOD:
        return x % _RASTER_PERIOD
    return x


def u10_to_s8(x: int) -> int:
    """Read the low byte of a 10-bit value, signed by bit 9."""
    low = x & 0xFF
    return low - 0x100 if x & 0x200 else low


def u10_to_s9(x: int) -> int:
    """Read the low 9 bits of a 10-bit value as a signed 16-bit number, signed by bit 9."""
    low = x & 0x1FF
    return low - 0x200 if x & 0x200 else low


def div10(x: int) -> int:
    """Divide by ten with a 32-bit multiply and shift; exact for 0..65535."""
    return ((x * 0xCCCD) & 0xFFFFFFFF) >> 19


def div256s(x: int) -> int:
    """Divide by 256 with an arithmetic shift (rounds toward minus infinity)."""
    return x >> 8


def shift_mul(x: int, factor: float) -> int:
    """Approximate x * factor with shifts; factor must be one of the supported steps."""
    try:
        added, subtracted = _SHIFT_TERMS[factor]
    except KeyError:
        raise ValueError(f"unsupported factor {factor!r}") from None
    return sum(x >> s for s in added) - sum(x >> s for s in subtracted)


def set_rgb(r: int, g: int, b: int) -> int:
    """Pack 5-bit red, green and blue into a GRB palette word."""
    return (g << 11) + (r << 6) + (b << 1)


def get_r(color: int) -> int:
    """Red component of a palette word."""
    return (color >> 6) & 0x1F


def get_g(color: int) -> int:
    """Green component of a palette word."""
    return (color >> 11) & 0x1F


def get_b(color: int) -> int:
    """Blue component of a palette word."""
    return (color >> 1) & 0x1F


def rgb24_to_16(value: int) -> int:
    """Convert a 0xRRGGBB colour into a palette word."""
    blue = ((value & 0xFF) << 5) >> 8
    red = (((value >> 16) & 0xFF) << 5) >> 8
    green = (((value >> 8) & 0xFF) << 5) >> 8
    return (blue << 1) | (red << 6) | (green << 11)


def _flip_bits(v: int, h: int, pal: int) -> int:
    return ((v & 0x01) << 15) | ((h & 0x01) << 14) | ((pal & 0xF) << 8)


def xsp_info(v: int, h: int, pal: int, pri: int) -> int:
    """Sprite info word: flips, palette and priority."""
    return 0xCFFF & (_flip_bits(v, h, pal) | (pri & 0x3F))


def bg_code(v: int, h: int, pal: int, pcg: int) -> int:
    """BG text cell code: flips, palette and pattern number."""
    return 0xCFFF & (_flip_bits(v, h, pal) | (pcg & 0xFF))


def bg_code_ex(v: int, h: int, bank: int, pal: int, pcg: int) -> int:
    """BG text cell code with a pattern bank in bits 12-15."""
    return 0xFFFF & (_flip_bits(v, h, pal) | ((bank & 0xF) << 12) | (pcg & 0xFF))


def bg_code_attr(v: int, h: int, pal: int) -> int:
    """Attribute half of a BG cell code, without a pattern number."""
    return 0xCF00 & _flip_bits(v, h, pal)


def sprite_palette(code: int) -> int:
    """Palette field of a sprite or BG code, left in place."""
    return code & 0xF00