"""Live chart dashboard: sample, render, wait, repeat."""

from __future__ import annotations

import asyncio
import logging
import os
import re
import select
import sys
import time
from typing import Callable, Optional, TextIO

from .models import Sample
from .render import FrameRenderer
from .sensors import SampleSource
from .terminal import Terminal
from .window import SampleWindow

logger = logging.getLogger(__name__)

# Keys that quit instantly in cbreak mode
_QUIT_KEYS = frozenset({"q", "Q"})
ESC = "\x1b"

# CSI (ESC [ ... final byte), SS3 (ESC O x) and Alt+key (ESC x)
_ESCAPE_SEQUENCE_RE = re.compile(r"\x1b(?:\[[0-?]*[ -/]*[@-~]|O.|.)", re.DOTALL)

_KEY_READ_SIZE = 64


def _input_pending(fd: int) -> bool:
    ready, _, _ = select.select([fd], [], [], 0)
    return bool(ready)


def read_pending_keys(stream: TextIO) -> str:
    """Read every key byte already waiting on a cbreak stream.

    Arrow and function keys arrive as one burst starting with ESC, so the
    whole burst is drained here; a chunk that is just ESC is a real Escape.
    """
    fd = stream.fileno()
    data = os.read(fd, _KEY_READ_SIZE)
    while data and _input_pending(fd):
        more = os.read(fd, _KEY_READ_SIZE)
        if not more:
            break
        data += more
    return data.decode("utf-8", errors="replace")


def is_quit_input(chunk: str) -> bool:
    """True for a lone Escape or a q keypress outside an escape sequence."""
    if chunk == ESC:
        return True
    keys = _ESCAPE_SEQUENCE_RE.sub("", chunk)
    return any(ch in _QUIT_KEYS or ch == ESC for ch in keys)


def next_deadline(previous: float, now: float, interval: float) -> float:
    """Start time of the next cycle on a fixed interval grid.

    A cycle that overran its slot starts the next one immediately and the
    grid continues from there, so missed slots are never replayed.
    """
    deadline = previous + interval
    if deadline <= now:
        return now
    return deadline


class ChartDashboard:
    """Drives the poll-render-sleep cycle on the event loop.

    Each cycle runs to completion before the next one starts; quit requests
    (keypress or signal) are only observed while waiting between cycles.
    """

    def __init__(
        self,
        source: SampleSource,
        window: SampleWindow,
        renderer: FrameRenderer,
        terminal: Terminal,
        interval: float,
        clock: Callable[[], float] = time.monotonic,
        keyboard: bool = True,
    ) -> None:
        self._source = source
        self._window = window
        self._renderer = renderer
        self._terminal = terminal
        self._interval = interval
        self._clock = clock
        self._keyboard = keyboard
        self._quit_event: Optional[asyncio.Event] = None
        self._quit_requested = False
        self._cycles = 0

    @property
    def window(self) -> SampleWindow:
        return self._window

    @property
    def cycles(self) -> int:
        return self._cycles

    def request_quit(self) -> None:
        """Stop after the current cycle (or right away if waiting)."""
        self._quit_requested = True
        if self._quit_event is not None:
            self._quit_event.set()

    def cycle(self) -> Sample:
        """Take one sample, admit it and redraw the screen.

        SensorReadError propagates: a failed read ends the dashboard.
        """
        sample = self._source.read()
        self._window.admit(sample)
        self._renderer.draw(self._window, self._terminal.stream)
        self._cycles += 1
        return sample

    async def run(self) -> None:
        """Main loop. Returns once a quit was requested."""
        self._quit_event = asyncio.Event()
        if self._quit_requested:
            self._quit_event.set()

        self._terminal.enter()
        reader_added = self._add_key_reader()
        logger.info("Dashboard started (interval %ss, %d columns)", self._interval, self._window.capacity)

        deadline = self._clock()
        try:
            while not self._quit_event.is_set():
                self.cycle()
                deadline = next_deadline(deadline, self._clock(), self._interval)
                timeout = max(0.0, deadline - self._clock())
                try:
                    await asyncio.wait_for(self._quit_event.wait(), timeout=timeout)
                except asyncio.TimeoutError:
                    continue
        finally:
            if reader_added:
                self._remove_key_reader()
            self._terminal.restore()
            logger.info("Dashboard stopped after %d cycles", self._cycles)

    # ── Keyboard ──────────────────────────────────────────────────────

    def _add_key_reader(self) -> bool:
        if not self._keyboard:
            return False

        if self._terminal.cbreak:
            on_stdin = self._on_key_input
        else:
            # Fallback: line input (no cbreak support)
            def on_stdin() -> None:
                line = sys.stdin.readline()
                if not line or line.strip().lower() in ("q", "quit"):
                    self.request_quit()

        try:
            asyncio.get_running_loop().add_reader(sys.stdin, on_stdin)
        except (NotImplementedError, ValueError, OSError) as e:
            logger.debug("Keyboard input not available: %s", e)
            return False
        return True

    def _on_key_input(self) -> None:
        """Read the keys waiting on stdin in cbreak mode and quit on q or Esc."""
        try:
            chunk = read_pending_keys(sys.stdin)
        except OSError as e:
            logger.warning("Keyboard read failed: %s", e)
            return
        if not chunk or is_quit_input(chunk):
            self.request_quit()

    def _remove_key_reader(self) -> None:
        try:
            asyncio.get_running_loop().remove_reader(sys.stdin)
        except (ValueError, NotImplementedError):
            pass
