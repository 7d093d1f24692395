"""MML strings for the engine-sound track."""

from __future__ import annotations

MML_BUFFER = 128


def _s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _cmod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    r = abs(a) % b
    return -r if a < 0 else r


def engine_mml(num: int, key: int) -> str:
    """MML text for engine sound variant num, pitched by key (a signed 16-bit value)."""
    key = _s16(key)
    if num == 0:
        mml = f"@137v15o2l4q1@k{key >> 3} d+&"
    elif num == 1:
        mml = "@137v15o5(g>g2)"
    elif num == 2:
        mml = "@137v15o4(g2<g)"
    elif num == 3:
        mml = f"@137v15o1k {_cmod(key, 80)} d+1"
    elif num == 4:
        mml = "@137v15(o3d*96,e),48"
    elif num == 5:
        mml = "@137v15o4(g2<g)"
    else:
        mml = f"@29v15o5l4q1@k{key} C+&"
    if len(mml) >= MML_BUFFER:
        raise ValueError(f"MML text longer than {MML_BUFFER - 1} characters")
    return mml