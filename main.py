#!/usr/bin/env python3
"""Giga - a minimal terminal screen editor.

Usage:
    python main.py [--keytest | --version]

Controls:
    Arrow keys: Move the cursor
    Home/End: Start/end of row
    Page Up/Page Down: Move a screen height
    Ctrl-Q: Quit
"""

import sys
from giga.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
