"""Session state for one editing run.

The session is built explicitly by the editor and handed to every command,
so tests can construct one around a fake terminal and a fixed window size.
"""

from enum import Enum
from typing import Optional

from .model import CursorModel
from .terminal import RawModeController
from .winsize import WindowSize


class EditorState(Enum):
    RUNNING = "running"
    QUITTING = "quitting"


class EditorSession:
    """Mutable state shared by the editor loop and its commands."""

    def __init__(self, terminal, window_size: Optional[WindowSize] = None,
                 raw_mode: Optional[RawModeController] = None):
        self.terminal = terminal
        self.raw_mode = raw_mode or RawModeController(terminal)
        # Filled in by the size probe once raw mode is active
        self.window_size = window_size
        self.cursor = CursorModel()
        self.state = EditorState.RUNNING

    @property
    def running(self) -> bool:
        return self.state == EditorState.RUNNING

    def request_quit(self) -> None:
        self.state = EditorState.QUITTING
