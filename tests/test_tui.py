import asyncio
import io
import itertools
import os
import sys

import pytest

from ttytemp.models import Sample, ZoneInfo
from ttytemp.render import FrameRenderer
from ttytemp.sensors import SensorReadError
from ttytemp.terminal import CURSOR_HOME, SHOW_CURSOR, Terminal
from ttytemp.tui import ESC, ChartDashboard, is_quit_input, next_deadline, read_pending_keys
from ttytemp.window import SampleWindow


class ScriptedSource:
    """Returns the given readings in order, running a hook after each read."""

    def __init__(self, readings, on_read=None):
        self._readings = list(readings)
        self._on_read = on_read
        self.reads = 0

    def zones(self):
        return [ZoneInfo(name="thermal_zone0", label="acpitz", path=None)]

    def read(self):
        value = self._readings[self.reads]
        self.reads += 1
        if self._on_read:
            self._on_read(self.reads)
        if isinstance(value, Exception):
            raise value
        return Sample(values=value)


def fast_clock():
    # Every call is 10 s later, so each wait times out immediately
    counter = itertools.count(step=10)
    return lambda: float(next(counter))


def make_dashboard(source, capacity=3, stream=None):
    stream = stream or io.StringIO()
    return ChartDashboard(
        source=source,
        window=SampleWindow(capacity),
        renderer=FrameRenderer(rows=4, hostname="box", color=False),
        terminal=Terminal(stream, color=False),
        interval=1,
        clock=fast_clock(),
        keyboard=False,
    ), stream


def test_next_deadline_stays_on_grid():
    assert next_deadline(100.0, 100.3, 4) == 104.0


def test_next_deadline_after_overrun_starts_now():
    assert next_deadline(100.0, 107.5, 4) == 107.5


def test_next_deadline_exactly_on_boundary():
    assert next_deadline(100.0, 104.0, 4) == 104.0


def test_cycle_admits_and_draws():
    dashboard, stream = make_dashboard(ScriptedSource([(40,), (50,)]))
    sample = dashboard.cycle()
    assert sample.values == (40,)
    assert len(dashboard.window) == 1
    assert stream.getvalue().startswith(CURSOR_HOME)
    assert dashboard.cycles == 1


def test_run_until_quit_requested():
    holder = {}

    def quit_on_fifth(reads):
        if reads == 5:
            holder["dashboard"].request_quit()

    source = ScriptedSource([(i,) for i in range(10, 20)], on_read=quit_on_fifth)
    dashboard, stream = make_dashboard(source, capacity=3)
    holder["dashboard"] = dashboard

    asyncio.run(dashboard.run())

    assert source.reads == 5
    assert dashboard.cycles == 5
    assert [s.values for s in dashboard.window.snapshot()] == [(12,), (13,), (14,)]
    assert stream.getvalue().count(CURSOR_HOME) >= 5
    assert stream.getvalue().endswith(SHOW_CURSOR + "\n")


def test_quit_before_first_cycle_draws_nothing():
    source = ScriptedSource([(1,), (2,)])
    dashboard, stream = make_dashboard(source)
    dashboard.request_quit()
    asyncio.run(dashboard.run())
    assert source.reads == 0
    assert stream.getvalue().endswith(SHOW_CURSOR + "\n")


def test_sensor_error_stops_loop_and_restores_terminal():
    source = ScriptedSource([(40,), (41,), SensorReadError("zone gone")])
    dashboard, stream = make_dashboard(source)

    with pytest.raises(SensorReadError, match="zone gone"):
        asyncio.run(dashboard.run())

    assert dashboard.cycles == 2
    assert len(dashboard.window) == 2
    assert stream.getvalue().endswith(SHOW_CURSOR + "\n")


@pytest.mark.parametrize("chunk", ["q", "Q", ESC, "x" + ESC, "\x1b[Aq"])
def test_quit_input(chunk):
    assert is_quit_input(chunk)


@pytest.mark.parametrize("chunk", [
    "\x1b[A",    # Up
    "\x1b[1;5C",  # Ctrl+Right
    "\x1b[15~",  # F5
    "\x1bOQ",    # F2 in SS3 form
    "\x1bq",     # Alt+q
    "a",
])
def test_escape_sequences_and_other_keys_do_not_quit(chunk):
    assert not is_quit_input(chunk)


@pytest.fixture
def stdin_pipe(monkeypatch):
    """Replace stdin with a pipe; returns a function that types bytes into it."""
    read_fd, write_fd = os.pipe()
    reader = os.fdopen(read_fd, "r")
    monkeypatch.setattr(sys, "stdin", reader)
    yield lambda data: os.write(write_fd, data)
    os.close(write_fd)
    reader.close()


def test_read_pending_keys_drains_whole_sequence(stdin_pipe):
    stdin_pipe(b"\x1b[A\x1b[B")
    assert read_pending_keys(sys.stdin) == "\x1b[A\x1b[B"


def test_arrow_key_keeps_dashboard_running(stdin_pipe):
    dashboard, _ = make_dashboard(ScriptedSource([]))
    stdin_pipe(b"\x1b[A")
    dashboard._on_key_input()
    assert not dashboard._quit_requested


def test_lone_escape_quits(stdin_pipe):
    dashboard, _ = make_dashboard(ScriptedSource([]))
    stdin_pipe(b"\x1b")
    dashboard._on_key_input()
    assert dashboard._quit_requested


def test_q_after_arrow_key_quits(stdin_pipe):
    dashboard, _ = make_dashboard(ScriptedSource([]))
    stdin_pipe(b"\x1b[A")
    dashboard._on_key_input()
    stdin_pipe(b"q")
    dashboard._on_key_input()
    assert dashboard._quit_requested
