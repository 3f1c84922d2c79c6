"""Diagnostic logging setup.

The terminal belongs to the reader frame, so records go to a file under the
per-user log directory. When that directory cannot be created, logging is
silenced instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "moyu"
LOG_FILENAME = "moyu.log"
LOG_DIR = Path(user_log_dir(APP_NAME, appauthor=False))
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> Path | None:
    """Attach one handler to the ``moyu`` logger and return the log file path."""
    root = logging.getLogger(APP_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level.strip().upper())
    root.propagate = False

    log_path = LOG_DIR / LOG_FILENAME
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        root.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return log_path
