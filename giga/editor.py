"""Main editor controller: refresh the screen, read a key, dispatch it."""

import logging
import sys
from typing import Callable, Optional

from .commands import CommandRegistry
from .errors import GigaError, TerminalError, TerminalIOError
from .keyboard import KeyDecoder, KeyEvent, KeyType
from .session import EditorSession
from .terminal import RawModeController, TerminalInterface
from .view import RowContent, ScreenRenderer
from .winsize import WindowSizeProbe

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def report_error(error: Exception) -> None:
    """Print the one-line diagnostic for a fatal error."""
    print(f"giga: {error}", file=sys.stderr)


def run_in_raw_mode(raw_mode: RawModeController, body: Callable[[], None]) -> int:
    """Run body with the terminal in raw mode and return the exit status.

    Raw mode is released on every way out of body. Any GigaError, from body
    or from the release itself, is logged, reported on stderr once the
    terminal is back in cooked mode, and turns the status into a failure.
    If raw mode cannot be entered, body never runs and no release is
    attempted.
    """
    try:
        raw_mode.enable()
    except TerminalError as e:
        logger.error(f"Could not enter raw mode: {e}")
        report_error(e)
        return EXIT_FAILURE

    errors = []
    try:
        body()
    except GigaError as e:
        logger.error(f"Fatal error: {e}")
        errors.append(e)
    finally:
        try:
            raw_mode.disable()
        except TerminalError as e:
            logger.error(f"Could not restore terminal: {e}")
            errors.append(e)
        # Also runs when an unexpected exception is on its way out
        for error in errors:
            report_error(error)
    return EXIT_FAILURE if errors else EXIT_OK


class Editor:
    """Main editor application controller."""

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 raw_mode: Optional[RawModeController] = None,
                 probe: Optional[WindowSizeProbe] = None,
                 decoder: Optional[KeyDecoder] = None,
                 renderer: Optional[ScreenRenderer] = None):
        """Initialize the editor components."""
        self.terminal = terminal or TerminalInterface()
        self.session = EditorSession(self.terminal, raw_mode=raw_mode)
        self.probe = probe or WindowSizeProbe(self.terminal)
        self.decoder = decoder or KeyDecoder()
        self.renderer = renderer or ScreenRenderer(self.terminal)
        self.command_registry = CommandRegistry()  # Command pattern for key handling
        # Row source for a text buffer layered on top; None draws placeholders
        self.content_for_row: Optional[RowContent] = None

    def run(self) -> int:
        """Run the editor until quit or a fatal error; return the exit status."""
        return run_in_raw_mode(self.session.raw_mode, self._main_loop)

    def _main_loop(self):
        self.session.window_size = self.probe.probe()
        while self.session.running:
            self._draw()
            key_event = self.decoder.next_key(self.terminal)
            self._handle_key_event(key_event)

    def _draw(self):
        """Draw the current editor state to terminal."""
        self.renderer.render_frame(
            self.session.window_size,
            self.session.cursor.position,
            self.content_for_row,
        )

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        if key_event.key_type == KeyType.EOF:
            # The quit key can never arrive on a closed input stream
            raise TerminalIOError("end of input from terminal")
        self.command_registry.execute(self.session, key_event)
