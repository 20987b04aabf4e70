"""Package logger.

Library code only emits records; nothing is printed until
:func:`configure_logging` attaches a handler.  Output goes to a file because
Textual owns the terminal while the app is running.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger("bookmarker")
logger.addHandler(logging.NullHandler())

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None, path: Path | None = None) -> None:
    """Attach a file handler to the package logger.

    *level* falls back to ``$BOOKMARKER_LOG_LEVEL`` and then ``WARNING``.
    """
    from .constants import LOG_PATH

    if level is None:
        level = os.environ.get("BOOKMARKER_LOG_LEVEL", "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    path = path or LOG_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        # Unwritable log location: keep running without a log file
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))

    for existing in list(logger.handlers):
        if not isinstance(existing, logging.NullHandler):
            logger.removeHandler(existing)
            existing.close()
    logger.addHandler(handler)
    logger.setLevel(level)
