"""Frame rendering: header, line chart, timeline and legend."""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence, TextIO

from . import __version__
from .glyphs import DEFAULT_PALETTE, Glyph, Palette, select_cell
from .i18n import t
from .projection import project_window, window_scale
from .terminal import CLEAR_TO_EOL, CURSOR_HOME, DIM, RESET
from .window import SampleWindow

logger = logging.getLogger(__name__)

PROGRAM_NAME = "ttytemp"

# Width of the scale label in front of every chart row: "{:6.2f}   "
LABEL_WIDTH = 9
# "HH:MM:SS" plus one space
CLOCK_WIDTH = 9

_ANSI_RE = re.compile(r"\033\[[0-9;?]*[A-Za-z]")


def visible_len(s: str) -> int:
    """Length of a string as displayed, ignoring ANSI escapes."""
    return len(_ANSI_RE.sub("", s))


class FrameRenderer:
    """Turns a SampleWindow into the text of one screen.

    ``rows`` is the highest row index of the chart, so ``rows + 1`` chart
    lines are produced.
    """

    def __init__(
        self,
        rows: int,
        hostname: str,
        color: bool = True,
        palette: Palette = DEFAULT_PALETTE,
        zone_labels: Sequence[str] = (),
        width: Optional[int] = None,
        tag: str = "",
        screen_width: Optional[int] = None,
    ) -> None:
        if rows < 1:
            raise ValueError(f"Chart needs at least one row, got {rows}")
        self._rows = rows
        self._hostname = hostname
        self._color = color
        self._palette = palette
        self._zone_labels = list(zone_labels)
        self._width = width
        self._tag = tag
        self._screen_width = screen_width

    @property
    def rows(self) -> int:
        return self._rows

    def _clip(self, text: str) -> str:
        """Cut plain text to the screen width so a line never wraps."""
        if self._screen_width is None:
            return text
        return text[: self._screen_width]

    # ── Header ────────────────────────────────────────────────────────

    def render_header(self, window: SampleWindow) -> str:
        """Window-wide min, average and max plus the newest sample's time."""
        title = f"{PROGRAM_NAME}, v{__version__}"
        if self._tag:
            title = f"{title} ({self._tag})"

        summary = window.summary()
        if summary is None:
            return self._clip(f"{self._hostname}       {title}")

        return self._clip(
            f"{self._hostname}   "
            f"{summary.min_value:.2f}, {summary.avg_value:.2f}, {summary.max_value:.2f}   "
            f"{summary.latest:%H:%M:%S}       {title}"
        )

    # ── Chart ─────────────────────────────────────────────────────────

    def row_label(self, row: int, max_scale: int) -> str:
        """Scale value printed in front of a chart row."""
        value = max_scale * (self._rows - row) // self._rows
        return f"{value:6.2f}   "

    def render_chart(self, window: SampleWindow) -> list[str]:
        """Render rows + 1 chart lines, top row first."""
        samples = window.snapshot()
        max_scale = window_scale(samples)
        projected = project_window(samples, self._rows)
        logger.debug("Rendering %d columns at scale %d", len(samples), max_scale)

        lines = []
        for row in range(self._rows + 1):
            cells: list[str] = []
            current_color: Optional[str] = None
            previous_heights: Optional[Sequence[int]] = None
            for column in projected:
                glyph, series = select_cell(row, column.heights, previous_heights)
                previous_heights = column.heights

                if self._color:
                    color = self._palette.color(series) if series is not None else None
                    if color != current_color:
                        cells.append(color or RESET)
                        current_color = color
                cells.append(glyph.value)

            if current_color is not None:
                cells.append(RESET)
            lines.append(self.row_label(row, max_scale) + "".join(cells))
        return lines

    # ── Timeline ──────────────────────────────────────────────────────

    def render_timeline(self, window: SampleWindow) -> str:
        """Clock labels under the chart, taken from the sample in each slot."""
        samples = window.snapshot()
        width = self._width or window.capacity
        clocks = max(1, width // CLOCK_WIDTH)
        stride = max(CLOCK_WIDTH, width // clocks)

        slots: list[str] = []
        for column in range(0, min(len(samples), width), stride):
            if column + CLOCK_WIDTH - 1 > width:
                break
            slots.append(f"{samples[column].timestamp:%H:%M:%S}".ljust(stride))
        return " " * LABEL_WIDTH + "".join(slots).rstrip()

    # ── Legend ────────────────────────────────────────────────────────

    def render_legend(self) -> str:
        """Series colors with zone names, followed by the quit hint."""
        hint = self._clip(t("tui_quit_hint"))
        if not self._color or not self._zone_labels:
            return f"{DIM}{hint}{RESET}" if self._color else hint

        line_width = self._screen_width
        if line_width is None and self._width is not None:
            line_width = self._width + LABEL_WIDTH
        items: list[str] = []
        used = 0
        for i, label in enumerate(self._zone_labels):
            item = f"{self._palette.color(i)}{Glyph.HORIZONTAL.value}{RESET} {label}"
            needed = visible_len(item) + (2 if items else 0)
            if line_width is not None and used + needed > line_width - len(hint) - 2:
                break
            items.append(item)
            used += needed

        legend = "  ".join(items)
        return f"{legend}  {DIM}{hint}{RESET}" if legend else f"{DIM}{hint}{RESET}"

    # ── Whole frame ───────────────────────────────────────────────────

    def render_frame(self, window: SampleWindow) -> str:
        """Build a full frame that overwrites the previous one in place."""
        lines = [self.render_header(window), ""]
        lines.extend(self.render_chart(window))
        lines.append(self.render_timeline(window))
        lines.append(self.render_legend())
        return CURSOR_HOME + "".join(line + CLEAR_TO_EOL + "\n" for line in lines)

    def draw(self, window: SampleWindow, stream: TextIO) -> None:
        """Write one frame to the terminal."""
        stream.write(self.render_frame(window))
        stream.flush()

