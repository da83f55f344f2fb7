"""Line-drawing glyph selection for chart cells."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence


class Glyph(Enum):
    """Characters a chart cell can hold."""

    HORIZONTAL = "─"
    OPENING = "╭"
    CLOSING = "╰"
    TOP_RIGHT = "╮"
    BOTTOM_RIGHT = "╯"
    VERTICAL = "│"
    BLANK = " "

    def __str__(self) -> str:
        return self.value


def _compare(a: int, b: int) -> int:
    return (a > b) - (a < b)


# (compare(row, h), compare(row, p)) -> glyph, for columns with a predecessor.
# Row indices grow downwards, so a smaller index is a higher value.
_CASES: dict[tuple[int, int], Glyph] = {
    # On the current value's row
    (0, 0): Glyph.HORIZONTAL,  # p == h
    (0, -1): Glyph.OPENING,  # p > h: rising into this row from below
    (0, 1): Glyph.CLOSING,  # p < h: falling into this row from above
    # Above the current value
    (-1, 0): Glyph.TOP_RIGHT,
    (-1, 1): Glyph.VERTICAL,
    # Below the current value
    (1, 0): Glyph.BOTTOM_RIGHT,
    (1, -1): Glyph.VERTICAL,
}


def select_glyph(row: int, height: int, previous: Optional[int]) -> Glyph:
    """Pick the glyph for one series in one cell.

    ``height`` is the series' row in this column and ``previous`` its row in
    the column to the left, or None for the leftmost column.
    """
    if previous is None:
        return Glyph.HORIZONTAL if row == height else Glyph.BLANK
    return _CASES.get((_compare(row, height), _compare(row, previous)), Glyph.BLANK)


def select_cell(
    row: int,
    heights: Sequence[int],
    previous_heights: Optional[Sequence[int]],
) -> tuple[Glyph, Optional[int]]:
    """Resolve overlapping series for one cell.

    Series are consulted in index order and the first non-blank glyph wins,
    so lower indices draw on top. Returns the glyph and the index of the
    series that drew it (None when the cell is blank).
    """
    for i, height in enumerate(heights):
        previous = previous_heights[i] if previous_heights is not None else None
        glyph = select_glyph(row, height, previous)
        if glyph is not Glyph.BLANK:
            return glyph, i
    return Glyph.BLANK, None


class Palette:
    """Series colors as ANSI foreground codes, cycled by series index."""

    def __init__(self, codes: Sequence[str]) -> None:
        if not codes:
            raise ValueError("Palette needs at least one color")
        self._codes = tuple(codes)

    def __len__(self) -> int:
        return len(self._codes)

    def color(self, series: int) -> str:
        """Get the escape sequence for a series."""
        return self._codes[series % len(self._codes)]


# Console colors 1..15 in their conventional order (black is skipped since it
# is the background)
DEFAULT_PALETTE = Palette((
    "\033[34m",  # dark blue
    "\033[32m",  # dark green
    "\033[36m",  # dark cyan
    "\033[31m",  # dark red
    "\033[35m",  # dark magenta
    "\033[33m",  # dark yellow
    "\033[37m",  # gray
    "\033[90m",  # dark gray
    "\033[94m",  # blue
    "\033[92m",  # green
    "\033[96m",  # cyan
    "\033[91m",  # red
    "\033[95m",  # magenta
    "\033[93m",  # yellow
    "\033[97m",  # white
))
