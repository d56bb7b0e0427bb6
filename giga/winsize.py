"""Window size discovery.

The device is asked for its size with the TIOCGWINSZ ioctl. Terminals (or
pseudo-terminals) that cannot answer it are measured instead: the cursor is
pushed towards the bottom-right corner, where the terminal clamps it, and
the terminal is then asked to report where the cursor ended up.
"""

import logging
import re
from dataclasses import dataclass
from typing import Tuple

from .constants import Ansi, EditorConstants
from .errors import ProbeError, TerminalIOError

logger = logging.getLogger(__name__)

_CURSOR_REPLY_RE = re.compile(rb"\x1b\[(\d+);(\d+)R")


@dataclass(frozen=True)
class WindowSize:
    rows: int
    cols: int


def parse_cursor_position_reply(reply: bytes) -> Tuple[int, int]:
    """Parse a cursor position report of the form ESC [ row ; col R.

    Returns:
        (row, col), both 1-indexed as reported by the terminal.

    Raises:
        ProbeError: the reply is not exactly one well-formed report.
    """
    match = _CURSOR_REPLY_RE.fullmatch(reply)
    if match is None:
        raise ProbeError(f"malformed cursor position reply: {reply!r}")
    row, col = int(match.group(1)), int(match.group(2))
    if row < 1 or col < 1:
        raise ProbeError(f"cursor position reply out of range: {reply!r}")
    return row, col


class WindowSizeProbe:
    """Determines the terminal dimensions once per session."""

    def __init__(self, terminal, reply_timeout: float = EditorConstants.CURSOR_REPLY_TIMEOUT):
        self.terminal = terminal
        self.reply_timeout = reply_timeout

    def probe(self) -> WindowSize:
        """Return the window size, preferring the ioctl over the cursor report."""
        try:
            winsz = self.terminal.query_winsize()
        except (OSError, ValueError) as e:
            logger.info(f"Window size ioctl failed ({e}), measuring with cursor report")
        else:
            if winsz.ws_row > 0 and winsz.ws_col > 0:
                logger.debug(f"Window size from ioctl: {winsz.ws_row}x{winsz.ws_col}")
                return WindowSize(rows=winsz.ws_row, cols=winsz.ws_col)
            logger.info("Window size ioctl reported zero size, measuring with cursor report")
        return self._probe_cursor_position()

    def _probe_cursor_position(self) -> WindowSize:
        overshoot = EditorConstants.PROBE_OVERSHOOT
        try:
            self.terminal.write(Ansi.cursor_forward(overshoot) + Ansi.cursor_down(overshoot))
            self.terminal.write(Ansi.REQUEST_CURSOR_POSITION)
            reply = self._read_reply()
        except TerminalIOError as e:
            raise ProbeError(f"cursor position query failed: {e}") from e
        rows, cols = parse_cursor_position_reply(reply)
        logger.debug(f"Window size from cursor report: {rows}x{cols}")
        return WindowSize(rows=rows, cols=cols)

    def _read_reply(self) -> bytes:
        """Collect reply bytes up to and including the R terminator.

        Stops early when the terminal goes quiet, the input ends or the reply
        grows past the size cap; the parser rejects what is left.
        """
        reply = bytearray()
        while len(reply) < EditorConstants.CURSOR_REPLY_MAX_BYTES:
            byte = self.terminal.read_byte(self.reply_timeout)
            if not byte:
                break
            reply += byte
            if byte == b"R":
                break
        return bytes(reply)
