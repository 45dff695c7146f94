from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "dotwizard"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_LOG_FILE = Path(user_log_dir(APP_NAME, appauthor=False)) / "dotwizard.log"
BACKUP_COUNT = 7


def resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = str(level or "INFO").upper().strip()
    value = getattr(logging, name, logging.INFO)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str | int | None = "INFO", log_path: Path | None = None) -> Path:
    """Send all logging to a rotating file and return its path.

    Rotation:
      - Daily rotation at midnight.
      - Keep the last ``BACKUP_COUNT`` rotated files.

    There is no console handler: the wizard owns the terminal. Calling this
    again replaces the handlers installed by the previous call.
    """
    log_file = log_path if log_path is not None else DEFAULT_LOG_FILE
    log_file.parent.mkdir(parents=True, exist_ok=True)
    numeric = resolve_level(level)

    file_handler = TimedRotatingFileHandler(
        filename=str(log_file),
        when="midnight",
        interval=1,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
        utc=False,
    )
    file_handler.setLevel(numeric)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for handler in root.handlers:
        handler.close()
    root.handlers = []
    root.setLevel(numeric)
    root.addHandler(file_handler)

    logging.getLogger("dotwizard").info(
        "logging enabled (file=%s, level=%s)",
        os.fspath(log_file),
        logging.getLevelName(numeric),
    )
    return log_file


__all__ = ["DEFAULT_LOG_FILE", "LOG_FORMAT", "resolve_level", "setup_logging"]
