"""Terminal control: escape sequences, size detection and cbreak input."""

from __future__ import annotations

import logging
import shutil
import sys
from typing import Optional, TextIO

try:
    import termios
    import tty
    _HAS_TERMIOS = True
except ImportError:
    _HAS_TERMIOS = False

logger = logging.getLogger(__name__)

# ANSI escape codes
CURSOR_HOME = "\033[H"
CLEAR_SCREEN = "\033[2J\033[H"
CLEAR_TO_EOL = "\033[K"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
RESET = "\033[0m"
DIM = "\033[2m"
BOLD = "\033[1m"


def get_terminal_size(
    rows: Optional[int] = None,
    columns: Optional[int] = None,
) -> tuple[int, int]:
    """Get (rows, columns), with explicit overrides taking precedence."""
    size = shutil.get_terminal_size()
    return (
        rows if rows is not None else size.lines,
        columns if columns is not None else size.columns,
    )


class Terminal:
    """Owns the output stream and the keyboard while the chart is shown."""

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True) -> None:
        self._stream = stream or sys.stdout
        self._color = color
        self._old_term_settings = None

    @property
    def stream(self) -> TextIO:
        return self._stream

    def enter(self) -> None:
        """Clear the screen, hide the cursor and switch stdin to cbreak mode."""
        # Clear with the terminal's default colors
        prefix = RESET if self._color else ""
        self.write(prefix + CLEAR_SCREEN + HIDE_CURSOR)
        self._set_cbreak()

    def restore(self) -> None:
        """Undo everything enter() did. Safe to call more than once."""
        self._restore_cbreak()
        suffix = RESET if self._color else ""
        self.write(suffix + SHOW_CURSOR + "\n")

    def write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    @property
    def cbreak(self) -> bool:
        return self._old_term_settings is not None

    def _set_cbreak(self) -> None:
        if not _HAS_TERMIOS or not sys.stdin.isatty():
            return
        try:
            self._old_term_settings = termios.tcgetattr(sys.stdin)
            tty.setcbreak(sys.stdin.fileno())
        except (termios.error, OSError) as e:
            logger.debug("cbreak mode not available: %s", e)
            self._old_term_settings = None

    def _restore_cbreak(self) -> None:
        """Restore terminal settings from cbreak mode."""
        if self._old_term_settings is not None:
            try:
                termios.tcsetattr(sys.stdin, termios.TCSADRAIN, self._old_term_settings)
            except (termios.error, OSError) as e:
                logger.warning("Could not restore terminal settings: %s", e)
            self._old_term_settings = None
