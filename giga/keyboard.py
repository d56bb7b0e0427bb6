"""Keyboard input decoding: raw terminal bytes to key events.

Special keys arrive as VT100 escape sequences. A lone ESC and the start of
a sequence look the same until either more bytes arrive or a short wait
expires, so every byte after the ESC is read with a bounded wait; running
out of bytes mid-sequence produces an Escape event.

Sequences understood:

    ESC [ A/B/C/D       arrows up/down/right/left
    ESC [ H, ESC O H    home
    ESC [ F, ESC O F    end
    ESC [ <d> ~         1/7 home, 3 delete, 4/8 end, 5 page up, 6 page down
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

from .constants import Ansi, EditorConstants
from .model import Direction

logger = logging.getLogger(__name__)


class KeyType(Enum):
    """Types of key events."""
    PRINTABLE = "printable"
    CONTROL = "control"
    ARROW = "arrow"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    DELETE = "delete"
    ESCAPE = "escape"
    EOF = "eof"


@dataclass(frozen=True)
class KeyEvent:
    """A decoded keypress.

    value is the byte for PRINTABLE and CONTROL events and the Direction for
    ARROW events; it is None for everything else. raw holds every byte the
    decoder consumed to produce the event.
    """
    key_type: KeyType
    value: Optional[Union[int, Direction]] = None
    raw: bytes = b""


class _State(Enum):
    """Decoder states after the leading ESC has been read."""
    SEQ_START = "seq_start"
    BRACKET = "bracket"
    BRACKET_DIGIT = "bracket_digit"
    SS3 = "ss3"


# ESC [ <final>
_BRACKET_FINALS = {
    ord('A'): (KeyType.ARROW, Direction.UP),
    ord('B'): (KeyType.ARROW, Direction.DOWN),
    ord('C'): (KeyType.ARROW, Direction.RIGHT),
    ord('D'): (KeyType.ARROW, Direction.LEFT),
    ord('H'): (KeyType.HOME, None),
    ord('F'): (KeyType.END, None),
}

# ESC O <final>
_SS3_FINALS = {
    ord('H'): (KeyType.HOME, None),
    ord('F'): (KeyType.END, None),
}

# ESC [ <digit> ~
_TILDE_DIGITS = {
    ord('1'): KeyType.HOME,
    ord('7'): KeyType.HOME,
    ord('3'): KeyType.DELETE,
    ord('4'): KeyType.END,
    ord('8'): KeyType.END,
    ord('5'): KeyType.PAGE_UP,
    ord('6'): KeyType.PAGE_DOWN,
}


def is_control_byte(byte: int) -> bool:
    return byte < 0x20 or byte == 0x7f


def classify_byte(byte: int) -> KeyEvent:
    """Event for a single byte that does not start an escape sequence."""
    key_type = KeyType.CONTROL if is_control_byte(byte) else KeyType.PRINTABLE
    return KeyEvent(key_type, byte, bytes([byte]))


class KeyDecoder:
    """Turns a byte source into key events, one event per call.

    The source must provide read_byte(timeout) returning one byte, b"" at
    end of input, or None when the timeout expires (see
    TerminalInterface.read_byte).
    """

    def __init__(self, escape_timeout: float = EditorConstants.ESCAPE_SEQUENCE_TIMEOUT):
        self.escape_timeout = escape_timeout
        # Each handler gets the newest byte and the bytes consumed so far, and
        # returns either the next state or the finished event.
        self._transitions = {
            _State.SEQ_START: self._after_escape,
            _State.BRACKET: self._after_bracket,
            _State.BRACKET_DIGIT: self._after_digit,
            _State.SS3: self._after_ss3,
        }

    def next_key(self, source) -> KeyEvent:
        """Block until one complete key event has been read."""
        first = source.read_byte(None)
        if not first:
            return KeyEvent(KeyType.EOF)
        if first[0] != Ansi.ESC:
            return classify_byte(first[0])

        raw = bytearray(first)
        state = _State.SEQ_START
        while True:
            byte = source.read_byte(self.escape_timeout)
            if not byte:
                return self._escape(raw)
            raw += byte
            result = self._transitions[state](byte[0], raw)
            if isinstance(result, KeyEvent):
                return result
            state = result

    def iter_keys(self, source) -> Iterator[KeyEvent]:
        """Lazily decode events until the source is exhausted.

        The final event yielded is EOF. A new iterator over the same source
        picks up wherever the previous one stopped.
        """
        while True:
            event = self.next_key(source)
            yield event
            if event.key_type == KeyType.EOF:
                return

    def _after_escape(self, byte: int, raw: bytearray):
        if byte == ord('['):
            return _State.BRACKET
        if byte == ord('O'):
            return _State.SS3
        return self._escape(raw)

    def _after_bracket(self, byte: int, raw: bytearray):
        if byte in _BRACKET_FINALS:
            key_type, value = _BRACKET_FINALS[byte]
            return KeyEvent(key_type, value, bytes(raw))
        if ord('0') <= byte <= ord('9'):
            return _State.BRACKET_DIGIT
        return self._escape(raw)

    def _after_digit(self, byte: int, raw: bytearray):
        digit = raw[2]
        if byte == ord('~') and digit in _TILDE_DIGITS:
            return KeyEvent(_TILDE_DIGITS[digit], None, bytes(raw))
        return self._escape(raw)

    def _after_ss3(self, byte: int, raw: bytearray):
        if byte in _SS3_FINALS:
            key_type, value = _SS3_FINALS[byte]
            return KeyEvent(key_type, value, bytes(raw))
        return self._escape(raw)

    @staticmethod
    def _escape(raw: bytearray) -> KeyEvent:
        if len(raw) > 1:
            logger.debug(f"Unrecognized escape sequence {bytes(raw)!r}")
        return KeyEvent(KeyType.ESCAPE, None, bytes(raw))
