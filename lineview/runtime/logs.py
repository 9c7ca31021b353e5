"""File-only logging setup.

Stdout belongs to the raw terminal, so records go to a log file under the
platform user log directory and nowhere else.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = f"{APP_NAME}.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(level: str = "WARNING", log_path: Path | None = None) -> logging.Logger:
    """Attach one delayed-open file handler to the package logger.

    The file is only created when a record at or above ``level`` is emitted.
    Calling again replaces the previous handler instead of stacking another.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        if getattr(handler, "_lineview_handler", False):
            logger.removeHandler(handler)
            handler.close()

    path = log_path or default_log_path()
    handler: logging.Handler
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        # Unwritable log dir: keep the session running without a log.
        handler = logging.NullHandler()
    else:
        handler = logging.FileHandler(path, encoding="utf-8", delay=True)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._lineview_handler = True
    logger.addHandler(handler)
    return logger
