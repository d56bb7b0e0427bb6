"""Exception types raised by the terminal layer.

Every error here is fatal to the editor: the top-level loop reacts to any of
them with the same shutdown sequence (clear screen, restore terminal mode,
print a diagnostic, exit non-zero).
"""


class GigaError(Exception):
    """Base class for editor errors."""


class TerminalError(GigaError):
    """Raw mode could not be entered or left."""


class ProbeError(GigaError):
    """The window size could not be determined."""


class TerminalIOError(GigaError):
    """Reading from or writing to the terminal failed."""
