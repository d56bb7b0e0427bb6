"""Giga - a minimal terminal screen editor front end."""

import logging

from .editor import Editor
from .errors import GigaError, ProbeError, TerminalError, TerminalIOError
from .keyboard import KeyDecoder, KeyEvent, KeyType
from .model import CursorModel, CursorPosition, Direction
from .winsize import WindowSize, WindowSizeProbe

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Editor',
    'GigaError',
    'ProbeError',
    'TerminalError',
    'TerminalIOError',
    'KeyDecoder',
    'KeyEvent',
    'KeyType',
    'CursorModel',
    'CursorPosition',
    'Direction',
    'WindowSize',
    'WindowSizeProbe',
]
