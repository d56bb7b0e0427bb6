"""Opt-in file logging.

The editor owns the terminal while it runs, so log records can't go to
stderr. Setting GIGA_LOG_LEVEL writes them to a file in the user's log
directory instead.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional

import platformdirs

from .constants import EditorConstants

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_file_path() -> Path:
    return Path(platformdirs.user_log_dir("giga")) / EditorConstants.LOG_FILENAME


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Attach a file handler to the giga logger if GIGA_LOG_LEVEL is set.

    Returns:
        The log file path, or None when logging stays off.
    """
    environ = os.environ if environ is None else environ
    level_name = environ.get(EditorConstants.LOG_LEVEL_ENV, "").strip().upper()
    if not level_name:
        return None
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        print(f"giga: ignoring unknown log level {level_name!r}", file=sys.stderr)
        return None

    path = log_file_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as e:
        print(f"giga: logging disabled, cannot open {path}: {e}", file=sys.stderr)
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger = logging.getLogger("giga")
    logger.addHandler(handler)
    logger.setLevel(level)
    return path
