"""A 64x64 BG text plane: cell codes placed by pixel position, text, numbers and maps."""

from __future__ import annotations

from collections.abc import Sequence

from x68game.bits import bg_code

PLANE_CELLS = 64
MAP_LIMIT = 32
DIGIT_BASE = 40
NUMBER_DIGITS = 8
_U32 = 0xFFFFFFFF


def _cell(pixel: int) -> int:
    return pixel >> 3


class BGPlane:
    """Cell codes of one BG text page, addressed in pixels (8 pixels per cell)."""

    def __init__(self) -> None:
        self.cells: list[list[int]] = [[0] * PLANE_CELLS for _ in range(PLANE_CELLS)]
        self.scroll_x = 0
        self.scroll_y = 0

    def _set(self, col: int, row: int, code: int) -> None:
        if not (0 <= col < PLANE_CELLS and 0 <= row < PLANE_CELLS):
            raise IndexError(f"cell ({col}, {row}) is outside the {PLANE_CELLS}x{PLANE_CELLS} plane")
        self.cells[row][col] = code

    def put(self, x: int, y: int, pal: int, pat: int) -> None:
        """Place pattern pat with palette pal in the cell holding pixel (x, y)."""
        self._set(_cell(x), _cell(y), bg_code(0, 0, pal, pat))

    def clear_rect(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Blank the cells from (x1, y1) up to, but not including, (x2, y2)."""
        blank = bg_code(0, 0, 0, 0)
        for row in range(_cell(y1), _cell(y2)):
            for col in range(_cell(x1), _cell(x2)):
                self._set(col, row, blank)

    def put_string(self, x: int, y: int, pal: int, text: str | bytes) -> None:
        """Write one pattern per character, left to right, starting at pixel (x, y)."""
        data = text.encode("latin-1") if isinstance(text, str) else bytes(text)
        col, row = _cell(x), _cell(y)
        for i, char in enumerate(data):
            self._set(col + i, row, bg_code(0, 0, pal, char))

    def put_number(self, x: int, y: int, pal: int, value: int) -> None:
        """Write value right-aligned in eight cells; leading positions stay blank."""
        value &= _U32
        col, row = _cell(x), _cell(y)
        for i in range(NUMBER_DIGITS):
            place = 10**i
            pat = DIGIT_BASE + (value // place) % 10 if value // place else 0
            self._set(col + NUMBER_DIGITS - 1 - i, row, bg_code(0, 0, pal, pat))

    def load_map(
        self, rows: Sequence[Sequence[int]], pal: int, x_offset: int, y_offset: int
    ) -> None:
        """Lay a map of pattern numbers onto the plane, offset by pixels.

        The area drawn is the map size plus the offset in cells, capped at 32 cells
        each way; positions past the map's own edge are drawn as pattern 0.
        """
        col_ofs, row_ofs = _cell(x_offset), _cell(y_offset)
        width = max((len(row) for row in rows), default=0)
        x_max = min(width + col_ofs, MAP_LIMIT)
        y_max = min(len(rows) + row_ofs, MAP_LIMIT)
        for y in range(y_max):
            source = rows[y] if y < len(rows) else ()
            for x in range(x_max):
                pat = source[x] if x < len(source) else 0
                self._set(x + col_ofs, y + row_ofs, bg_code(0, 0, pal, pat))

    def get(self, x: int, y: int) -> int:
        """Pattern number in the cell holding pixel (x, y)."""
        col, row = _cell(x), _cell(y)
        if not (0 <= col < PLANE_CELLS and 0 <= row < PLANE_CELLS):
            raise IndexError(f"cell ({col}, {row}) is outside the {PLANE_CELLS}x{PLANE_CELLS} plane")
        code = self.cells[row][col] & 0xFFFF
        signed = code - 0x10000 if code & 0x8000 else code
        return signed & 0xFF if signed > 0 else signed

    def scroll(self, x: int, y: int) -> None:
        """Set the scroll position of the plane."""
        self.scroll_x = x
        self.scroll_y = y