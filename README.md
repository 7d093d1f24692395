# x68game

Building blocks for games in the style of the Sharp X68000. The package has
no runtime dependencies and does not touch any hardware. It models the parts
of such a game that are plain logic:

- `x68game.bits`: colour and code packing (`set_rgb`, `get_r`, `get_g`,
  `get_b`, `rgb24_to_16`, `xsp_info`, `bg_code`, `bg_code_ex`,
  `bg_code_attr`, `sprite_palette`) and saturating and shifting arithmetic
  (`clamp`, `inc_clip`, `dec_clip`, `div10`, `div256s`, `shift_mul`,
  `ras_roll`, `u10_to_s8`, `u10_to_s9`).
- `x68game.fixed`: integer helpers (`udiv`, `sdiv`, `mul16`, `fixed_sqrt`,
  `crc32_mpeg`, `bcd_to_decimal`, `decimal_to_bcd`, `reorder_bits`,
  `swap_bytes`, `swap_nibbles`, `abs_diff16`).
- `x68game.tasks`: `TaskManager`, which raises 8/16/32/96/496 ms task flags
  from a millisecond clock you supply, reports them as `TaskFlags` and tracks
  the current `Scene`.
- `x68game.mouse`: `decode_position` and `decode_data`, which unpack the
  packed words of the mouse calls, the latter giving a `MouseData`.
- `x68game.sprites`: `SpritePattern` attribute editing (priority, palette,
  flips, animation frame), palette rotation (`rotate_palette`,
  `rotate_palette_keep_zero`) and `sprite_layout` for 1x1, 2x1, 2x2 and 3x3
  sprite groups.
- `x68game.bgplane`: `BGPlane`, an in-memory 64x64 BG text page addressed in
  pixels, with single cells, strings, right-aligned numbers, maps given as
  rows of pattern numbers, rectangle clearing and a scroll position.
- `x68game.mml`: `engine_mml` builds the MML strings for engine sounds.

## Installing

```
pip install .
```

## A short example

```python
from x68game.bits import bg_code, set_rgb
from x68game.bgplane import BGPlane
from x68game.fixed import crc32_mpeg
from x68game.mouse import decode_data

print(hex(set_rgb(31, 31, 31)))          # 0xfffe
print(hex(bg_code(0, 0, 1, 0x41)))       # 0x141

plane = BGPlane()
plane.put_number(0, 0, 1, 1234)
print(plane.get(56, 0))                  # 44: digit 4 drawn with pattern 40 + 4

print(hex(crc32_mpeg(b"123456789")))     # 0x376e6e7
print(decode_data(0x01FF0000))           # MouseData(dx=1, dy=-1, left=0, right=0)
```

## What it does not do

The package only computes values and keeps state in memory. It does not draw
to a screen, drive sprites or BG hardware, play music or sound effects, load
files, or offer trigonometry and distance helpers; `engine_mml` returns text
for a sound driver to play, and `BGPlane` is a model of a page, not a display.

## Running the tests

```
pip install .[test]
pytest
```