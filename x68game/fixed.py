"""Integer arithmetic helpers: saturating division, shift multiplies, CRC, BCD and bit shuffles."""

from __future__ import annotations

from collections.abc import Sequence

from x68game.bits import shift_mul

INT_MAX = 0x7FFFFFFF
INT_MIN = -0x80000000
_U32 = 0xFFFFFFFF
_U16 = 0xFFFF
_CRC_POLYNOMIAL = 0x04C11DB7

# Factors offered as 16-bit shift multiplies.
MUL16_FACTORS: frozenset[float] = frozenset(
    {
        1.90, 1.80, 1.75, 1.70, 1.60, 1.50, 1.40, 1.30, 1.25, 1.20, 1.10, 1.00,
        0.91, 0.83, 0.77, 0.71, 0.66, 0.62, 0.58, 0.54, 0.52, 0.50,
    }
)


def _s16(value: int) -> int:
    value &= _U16
    return value - 0x10000 if value & 0x8000 else value


def _s32(value: int) -> int:
    value &= _U32
    return value - 0x100000000 if value & 0x80000000 else value


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def abs_diff16(a: int, b: int) -> int:
    """Absolute difference of two unsigned 16-bit values."""
    a &= _U16
    b &= _U16
    return a - b if a >= b else b - a


def udiv(dividend: int, divisor: int) -> int:
    """Unsigned 32-bit division through an 8-bit fixed-point step.

    A zero divisor saturates to 0xFFFFFFFF; a zero dividend gives 0.
    """
    dividend &= _U32
    divisor &= _U32
    if divisor == 0:
        return _U32
    if dividend == 0:
        return 0
    return (((dividend << 8) & _U32) // divisor) >> 8


def sdiv(dividend: int, divisor: int) -> int:
    """Signed 32-bit division truncating toward zero, saturating on a zero divisor."""
    dividend = _s32(dividend)
    divisor = _s32(divisor)
    if divisor == 0:
        return INT_MAX if dividend > 0 else INT_MIN
    if dividend == 0:
        return 0
    return _s32(_tdiv(dividend, divisor))


def mul16(x: int, factor: float) -> int:
    """Approximate x * factor for a signed 16-bit x with shifts, wrapped to 16 bits."""
    if factor not in MUL16_FACTORS:
        raise ValueError(f"unsupported factor {factor!r}")
    return _s16(shift_mul(_s16(x), factor))


def crc32_mpeg(data: bytes | bytearray | memoryview) -> int:
    """MSB-first CRC-32 with initial value 0xFFFFFFFF and no final XOR."""
    crc = _U32
    for byte in bytes(data):
        crc ^= byte << 24
        for _ in range(8):
            if crc & 0x80000000:
                crc = ((crc << 1) ^ _CRC_POLYNOMIAL) & _U32
            else:
                crc = (crc << 1) & _U32
    return crc


def fixed_sqrt(x: int) -> int:
    """Bit-by-bit square root estimate of an unsigned 32-bit value (never above the true root)."""
    remainder = x & _U32
    root = 0
    for shift in range(15, -1, -1):
        bit = 1 << shift
        trial = root + bit
        square = (trial * trial) & _U32
        if square <= remainder:
            root += bit
            remainder -= square
    return root


def bcd_to_decimal(bcd: int) -> int:
    """Convert a 16-bit packed BCD value to its decimal number."""
    bcd &= _U16
    decimal = 0
    multiplier = 1
    while bcd > 0:
        decimal += (bcd & 0xF) * multiplier
        bcd >>= 4
        multiplier = (multiplier * 10) & _U16
    return decimal & _U16


def decimal_to_bcd(decimal: int) -> int:
    """Convert a 16-bit number to packed BCD; digits beyond the fourth are dropped."""
    decimal &= _U16
    bcd = 0
    shift = 0
    while decimal > 0:
        decimal, digit = divmod(decimal, 10)
        bcd |= digit << (shift * 4)
        shift += 1
    return bcd & _U16


def reorder_bits(value: int, order: Sequence[int]) -> int:
    """Build a 16-bit word whose bit i is bit order[i] of value."""
    if len(order) != 16:
        raise ValueError(f"order must list 16 bit positions, got {len(order)}")
    value &= _U16
    output = 0
    for i, source in enumerate(order):
        output |= ((value >> source) & 1) << i
    return output & _U16


def swap_bytes(word: int) -> int:
    """Swap the high and low bytes of a 16-bit word."""
    word &= _U16
    return ((word << 8) | (word >> 8)) & _U16


def swap_nibbles(byte: int) -> int:
    """Swap the high and low nibbles of a byte."""
    byte &= 0xFF
    return ((byte << 4) | (byte >> 4)) & 0xFF