"""
TODO HISTORY - Activity Log
===========================
Append-only activity file with one ``[YYYY-MM-DD HH:MM:SS] message`` line per
record written to the ``todo_history`` logger.

The file is attached with ``open()`` and detached with ``close()`` (or by
using the log as a context manager). Problems writing the file never reach
the caller.
"""

import logging
from pathlib import Path
from typing import Optional, Union

LINE_FORMAT = "[%(asctime)s] %(message)s"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_FILE = "app_log.txt"


class _QuietFileHandler(logging.FileHandler):
    """File handler that drops records it cannot write"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            super().emit(record)
        except OSError:
            self.handleError(record)

    def handleError(self, record: logging.LogRecord) -> None:
        pass


class ActivityLog:
    """Attaches the activity file to a logger for the lifetime of a session"""

    def __init__(
        self,
        path: Union[str, Path] = DEFAULT_LOG_FILE,
        logger_name: str = "todo_history",
        level: int = logging.INFO
    ):
        self.path = Path(path)
        self.level = level
        self.logger = logging.getLogger(logger_name)
        self._handler: Optional[logging.Handler] = None

    @property
    def is_open(self) -> bool:
        return self._handler is not None

    def open(self) -> logging.Logger:
        if self._handler is None:
            handler = _QuietFileHandler(self.path, mode="a", encoding="utf-8", delay=True)
            handler.setLevel(self.level)
            handler.setFormatter(logging.Formatter(LINE_FORMAT, datefmt=TIMESTAMP_FORMAT))
            self.logger.addHandler(handler)
            if self.logger.getEffectiveLevel() > self.level:
                self.logger.setLevel(self.level)
            self._handler = handler
        return self.logger

    def close(self) -> None:
        if self._handler is None:
            return
        self.logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = None

    def __enter__(self) -> logging.Logger:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
