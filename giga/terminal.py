"""Terminal device access: byte I/O through Blessed and raw mode through termios."""

import logging
import os
import select
import sys
import termios
from typing import List, Optional

import blessed

from .constants import Ansi
from .errors import TerminalError, TerminalIOError

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles byte-level terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None,
                 input_fd: Optional[int] = None, output_fd: Optional[int] = None):
        """Initialize with a terminal instance (or create one)."""
        # Without styling, Blessed sends no capability or cursor queries of its own
        self.term = terminal or blessed.Terminal(force_styling=None)
        self.input_fd = sys.stdin.fileno() if input_fd is None else input_fd
        self.output_fd = sys.stdout.fileno() if output_fd is None else output_fd

    @property
    def is_a_tty(self) -> bool:
        """Whether the input descriptor is a terminal."""
        return os.isatty(self.input_fd)

    def read_byte(self, timeout: Optional[float] = None) -> Optional[bytes]:
        """Read a single byte from the terminal.

        Args:
            timeout: Seconds to wait for input (None blocks until a byte arrives)

        Returns:
            One byte, b"" at end of input, or None if the timeout elapsed.
        """
        try:
            if timeout is not None:
                ready, _, _ = select.select([self.input_fd], [], [], timeout)
                if not ready:
                    return None
            return os.read(self.input_fd, 1)
        except OSError as e:
            raise TerminalIOError(f"read from terminal failed: {e}") from e

    def write(self, data: bytes) -> None:
        """Write all of data to the terminal before returning."""
        view = memoryview(data)
        try:
            while view:
                written = os.write(self.output_fd, view)
                view = view[written:]
        except OSError as e:
            raise TerminalIOError(f"write to terminal failed: {e}") from e

    def query_winsize(self):
        """Ask the device for its size.

        Returns:
            Blessed's WINSZ tuple (ws_row, ws_col, ws_xpixel, ws_ypixel).

        Raises:
            OSError: the output descriptor does not support the ioctl.
        """
        # pylint: disable=protected-access
        return self.term._winsize(self.output_fd)


def make_raw(mode: List) -> List:
    """Return a copy of a tcgetattr() mode list with raw-mode flags applied."""
    new = list(mode)
    # Input: no break signal, no CR->NL, no parity check, no 8th-bit strip, no Ctrl-S/Ctrl-Q
    new[0] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
    # Output: no post-processing, "\n" is a bare line feed
    new[1] &= ~termios.OPOST
    new[2] |= termios.CS8
    # Local: no echo, no line buffering, no Ctrl-V, no Ctrl-C/Ctrl-Z signals
    new[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
    cc = list(new[6])
    cc[termios.VMIN] = 1
    cc[termios.VTIME] = 0
    new[6] = cc
    return new


class RawModeController:
    """Owns the terminal's cooked-mode settings while raw mode is active.

    The saved mode is captured by enable() and consumed by disable(); it is
    never handed out. `with controller:` gives a bare scoped release; the
    editor and the key test go through editor.run_in_raw_mode, which also
    reports enable and restore failures.
    """

    def __init__(self, terminal: TerminalInterface):
        self.terminal = terminal
        self._saved_mode: Optional[List] = None

    @property
    def active(self) -> bool:
        return self._saved_mode is not None

    def enable(self) -> None:
        """Switch the terminal to raw mode, remembering the current mode."""
        if self._saved_mode is not None:
            raise TerminalError("raw mode is already enabled")
        if not self.terminal.is_a_tty:
            raise TerminalError("standard input is not a terminal")
        fd = self.terminal.input_fd
        try:
            saved = termios.tcgetattr(fd)
        except (termios.error, OSError) as e:
            raise TerminalError(f"cannot read terminal attributes: {e}") from e
        try:
            termios.tcsetattr(fd, termios.TCSAFLUSH, make_raw(saved))
        except (termios.error, OSError) as e:
            raise TerminalError(f"cannot enter raw mode: {e}") from e
        self._saved_mode = saved
        logger.debug("Entered raw mode")

    def disable(self) -> None:
        """Clear the screen and restore the mode saved by enable()."""
        if self._saved_mode is None:
            raise TerminalError("raw mode was never enabled")
        saved, self._saved_mode = self._saved_mode, None
        try:
            self.terminal.write(Ansi.CLEAR_SCREEN + Ansi.CURSOR_HOME)
        except TerminalIOError as e:
            logger.warning(f"Could not clear screen before restoring terminal: {e}")
        try:
            termios.tcsetattr(self.terminal.input_fd, termios.TCSAFLUSH, saved)
        except (termios.error, OSError) as e:
            raise TerminalError(f"cannot restore terminal mode: {e}") from e
        logger.debug("Left raw mode")

    def __enter__(self) -> "RawModeController":
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disable()
