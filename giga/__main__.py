"""Giga CLI entry point.

Allows running via `python -m giga` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys
from typing import Optional

from .constants import EditorConstants
from .editor import Editor, run_in_raw_mode
from .keyboard import KeyDecoder, KeyType
from .logconfig import configure_logging
from .terminal import RawModeController, TerminalInterface
from .version import get_version_string


def describe_event(event) -> str:
    """Return a printable line for a decoded key event."""
    if event.key_type == KeyType.EOF:
        return "Read: end of input"
    codes = ' '.join(str(b) for b in event.raw)
    if event.key_type == KeyType.PRINTABLE:
        return f"Read: {codes} ('{chr(event.value)}')"
    if event.key_type == KeyType.CONTROL:
        return f"Read: {codes}"
    if event.key_type == KeyType.ARROW:
        return f"Read: {codes} (arrow {event.value.value})"
    return f"Read: {codes} ({event.key_type.value})"


def run_keyboard_test(terminal=None) -> int:
    """Run an interactive keyboard test using the editor's input stack.

    Puts the terminal in raw mode and prints every decoded key event with
    the bytes it came from. Quit with q.
    """
    term = terminal or TerminalInterface()
    decoder = KeyDecoder()

    def echo_keys():
        # OPOST is off in raw mode, so every line needs an explicit \r
        term.write(b"Keyboard test mode - press keys to see decoded events.\r\n")
        term.write(b"Quit with q.\r\n")
        for event in decoder.iter_keys(term):
            term.write(describe_event(event).encode('utf-8', 'replace') + b"\r\n")
            if event.key_type == KeyType.PRINTABLE and event.value == EditorConstants.KEYTEST_QUIT_KEY:
                break

    return run_in_raw_mode(RawModeController(term), echo_keys)


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing to support keyboard test mode and version
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0

    configure_logging()

    if args and args[0] in ('--keytest', '--keyboard-test'):
        return run_keyboard_test()
    if args:
        print(f"giga: unknown argument {args[0]!r}", file=sys.stderr)
        return 2

    return Editor().run()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
