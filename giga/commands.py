"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Hashable, Optional, Tuple, TYPE_CHECKING

from .constants import EditorConstants
from .keyboard import KeyType
from .model import Direction

if TYPE_CHECKING:
    from .keyboard import KeyEvent
    from .session import EditorSession


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, session: 'EditorSession', key_event: 'KeyEvent') -> None:
        """Execute the command.

        Args:
            session: Current editor session
            key_event: The key event that triggered this command
        """
        pass


class MoveCursorCommand(EditorCommand):
    """Single-cell move in the arrow key's direction."""

    def execute(self, session, key_event):
        session.cursor.move(key_event.value, session.window_size)


class PageCommand(EditorCommand):
    def __init__(self, direction: Direction):
        self.direction = direction

    def execute(self, session, key_event):
        session.cursor.page_move(self.direction, session.window_size)


class HomeCommand(EditorCommand):
    def execute(self, session, key_event):
        session.cursor.home()


class EndCommand(EditorCommand):
    def execute(self, session, key_event):
        session.cursor.end(session.window_size)


class QuitCommand(EditorCommand):
    def execute(self, session, key_event):
        session.request_quit()


class CommandRegistry:
    """Registry for mapping key events to commands.

    Keys are (KeyType, value) pairs; ARROW events are looked up by type
    alone, so one command serves all four directions. Events with no
    registered command are ignored.
    """

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, Hashable], EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        self.register((KeyType.ARROW, None), MoveCursorCommand())
        self.register((KeyType.HOME, None), HomeCommand())
        self.register((KeyType.END, None), EndCommand())
        self.register((KeyType.PAGE_UP, None), PageCommand(Direction.UP))
        self.register((KeyType.PAGE_DOWN, None), PageCommand(Direction.DOWN))

        self.register((KeyType.CONTROL, EditorConstants.QUIT_KEY), QuitCommand())

    def register(self, key: Tuple[KeyType, Hashable], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: Hashable = None) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        if key_type == KeyType.ARROW:
            value = None
        return self._commands.get((key_type, value))

    def execute(self, session: 'EditorSession', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if a command handled the event
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None:
            return False
        command.execute(session, key_event)
        return True
