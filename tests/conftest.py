"""Shared fakes for terminal tests."""

from collections import deque

import pytest
from blessed.terminal import WINSZ


class FakeTerminal:
    """In-memory stand-in for TerminalInterface.

    Input is given as byte chunks; a None chunk is a pause that makes the
    next bounded read time out. When the script runs dry, blocking reads
    report end of input and bounded reads time out.
    """

    def __init__(self, *chunks, winsize=None):
        self._input = deque()
        for chunk in chunks:
            if chunk is None:
                self._input.append(None)
            else:
                self._input.extend(bytes([b]) for b in chunk)
        self.consumed = 0
        self.read_timeouts = []
        self.writes = []
        self.winsize = winsize if winsize is not None else WINSZ(24, 80, 0, 0)
        self.input_fd = 0
        self.is_a_tty = True

    def read_byte(self, timeout=None):
        self.read_timeouts.append(timeout)
        while self._input:
            item = self._input.popleft()
            if item is not None:
                self.consumed += 1
                return item
            if timeout is not None:
                return None
        return b"" if timeout is None else None

    @property
    def remaining(self) -> bytes:
        return b"".join(item for item in self._input if item is not None)

    def write(self, data):
        self.writes.append(bytes(data))

    @property
    def output(self) -> bytes:
        return b"".join(self.writes)

    def query_winsize(self):
        if isinstance(self.winsize, Exception):
            raise self.winsize
        return self.winsize


@pytest.fixture
def make_terminal():
    return FakeTerminal
