"""Constants and configuration for the giga editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Keyboard timing
    ESCAPE_SEQUENCE_TIMEOUT = 0.05  # Wait for the next byte of an escape sequence (seconds)
    CURSOR_REPLY_TIMEOUT = 1.0  # Wait for each byte of a cursor position report (seconds)
    CURSOR_REPLY_MAX_BYTES = 32  # Longest cursor position report we will collect

    # Key bindings
    QUIT_KEY = 0x11  # Ctrl-Q
    KEYTEST_QUIT_KEY = ord('q')

    # Window size fallback: push the cursor this far right/down; the terminal clamps it
    PROBE_OVERSHOOT = 999

    # Screen contents
    PLACEHOLDER_ROW = b"~"
    BANNER_TEMPLATE = "Giga editor -- version {}"

    # Logging
    LOG_LEVEL_ENV = "GIGA_LOG_LEVEL"
    LOG_FILENAME = "giga.log"


class Ansi:
    """VT100 escape sequences written to the terminal."""

    ESC = 0x1b

    CLEAR_SCREEN = b"\x1b[2J"
    CURSOR_HOME = b"\x1b[H"
    ERASE_LINE_END = b"\x1b[K"
    HIDE_CURSOR = b"\x1b[?25l"
    SHOW_CURSOR = b"\x1b[?25h"
    REQUEST_CURSOR_POSITION = b"\x1b[6n"
    ROW_SEPARATOR = b"\r\n"

    @staticmethod
    def move_to(row: int, col: int) -> bytes:
        """Absolute cursor move; row and col are 1-indexed."""
        return b"\x1b[%d;%dH" % (row, col)

    @staticmethod
    def cursor_forward(n: int) -> bytes:
        return b"\x1b[%dC" % n

    @staticmethod
    def cursor_down(n: int) -> bytes:
        return b"\x1b[%dB" % n
