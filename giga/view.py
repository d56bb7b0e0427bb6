"""Screen rendering.

Each refresh builds the whole screen into a FrameBuffer and sends it to the
terminal in one write, so the terminal never shows a half-drawn frame.
"""

from typing import Callable, Optional

from .constants import Ansi, EditorConstants
from .model import CursorPosition
from .version import get_version
from .winsize import WindowSize

RowContent = Callable[[int], Optional[bytes]]


class FrameBuffer:
    """Append-only byte buffer for one frame."""

    def __init__(self):
        self._data = bytearray()

    def append(self, data: bytes) -> None:
        self._data += data

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)


class ScreenRenderer:
    """Draws rows of content plus the cursor onto the terminal."""

    def __init__(self, terminal, banner: Optional[str] = None):
        self.terminal = terminal
        if banner is None:
            banner = EditorConstants.BANNER_TEMPLATE.format(get_version())
        self.banner = banner.encode('ascii', 'replace')

    def render_frame(self, bounds: WindowSize, cursor: CursorPosition,
                     content_for_row: Optional[RowContent] = None) -> None:
        """Build a frame and flush it with a single write."""
        self.terminal.write(self.build_frame(bounds, cursor, content_for_row))

    def build_frame(self, bounds: WindowSize, cursor: CursorPosition,
                    content_for_row: Optional[RowContent] = None) -> bytes:
        """Return the bytes of one complete frame.

        Args:
            bounds: Window size; one row segment is emitted per window row
            cursor: 0-based cursor position, sent 1-based on the wire
            content_for_row: Returns the bytes for a row, or None for an
                empty row (drawn as a placeholder)
        """
        frame = FrameBuffer()
        frame.append(Ansi.HIDE_CURSOR)
        frame.append(Ansi.CURSOR_HOME)
        for row in range(bounds.rows):
            content = content_for_row(row) if content_for_row else None
            if content is None:
                content = self._empty_row(row, bounds)
            frame.append(content[:bounds.cols])
            frame.append(Ansi.ERASE_LINE_END)
            if row < bounds.rows - 1:
                frame.append(Ansi.ROW_SEPARATOR)
        frame.append(Ansi.move_to(cursor.row + 1, cursor.col + 1))
        frame.append(Ansi.SHOW_CURSOR)
        return bytes(frame)

    def _empty_row(self, row: int, bounds: WindowSize) -> bytes:
        if row != bounds.rows // 3:
            return EditorConstants.PLACEHOLDER_ROW
        # Welcome banner, centered, with the placeholder in the left padding
        banner = self.banner[:bounds.cols]
        padding = (bounds.cols - len(banner)) // 2
        if not padding:
            return banner
        return EditorConstants.PLACEHOLDER_ROW + b" " * (padding - 1) + banner
