"""Cursor position model, clamped to the window."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .winsize import WindowSize


class Direction(Enum):
    """Cursor movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class CursorPosition:
    row: int = 0
    col: int = 0


class CursorModel:
    """Cursor coordinates kept inside the window bounds."""

    def __init__(self, position: Optional[CursorPosition] = None):
        self.position = position or CursorPosition()

    def move(self, direction: Direction, bounds: WindowSize) -> None:
        """Move one cell; a move past an edge leaves that axis unchanged."""
        pos = self.position
        if direction == Direction.UP:
            pos.row = max(pos.row - 1, 0)
        elif direction == Direction.DOWN:
            pos.row = min(pos.row + 1, bounds.rows - 1)
        elif direction == Direction.LEFT:
            pos.col = max(pos.col - 1, 0)
        elif direction == Direction.RIGHT:
            pos.col = min(pos.col + 1, bounds.cols - 1)

    def home(self) -> None:
        self.position.col = 0

    def end(self, bounds: WindowSize) -> None:
        self.position.col = bounds.cols - 1

    def page_move(self, direction: Direction, bounds: WindowSize) -> None:
        """Move a full window height up or down.

        Same result as bounds.rows single moves: the row saturates at the
        window edge and the column is untouched.
        """
        if direction not in (Direction.UP, Direction.DOWN):
            raise ValueError(f"page moves are vertical, got {direction}")
        for _ in range(bounds.rows):
            self.move(direction, bounds)
