"""Debug log sink with an explicit open/close lifecycle.

The application logs through module-level ``logging.getLogger(__name__)``
loggers. ``DebugLog`` attaches a file handler to the package logger when
``--debug`` is passed and detaches it again at shutdown.

Usage:
    with DebugLog(enabled=debug) as debug_log:
        logger.debug("Config loaded, current context: %s", name)
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType

from k4a.constants.defaults import DEBUG_LOG_PATH_DEFAULT

_LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class DebugLog:
    """File-backed debug logging for the ``k4a`` logger hierarchy."""

    def __init__(
        self,
        enabled: bool = False,
        path: Path | None = None,
        logger_name: str = "k4a",
    ) -> None:
        self.enabled = enabled
        self.path = path or DEBUG_LOG_PATH_DEFAULT
        self._logger = logging.getLogger(logger_name)
        self._handler: logging.FileHandler | None = None
        self._previous_level = self._logger.level

    @property
    def is_open(self) -> bool:
        return self._handler is not None

    def open(self) -> None:
        """Create the log directory and attach an append-mode file handler.

        Does nothing when debug logging is disabled or already open.

        Raises:
            OSError: If the directory or file cannot be created.
        """
        if not self.enabled or self._handler is not None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(self.path, mode="a", encoding="utf-8")
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        self._previous_level = self._logger.level
        self._logger.setLevel(logging.DEBUG)
        self._logger.addHandler(handler)
        self._handler = handler
        self._logger.debug("=== k4a debug session started ===")
        self._logger.debug("Log file: %s", self.path)

    def close(self) -> None:
        """Flush, detach and close the file handler."""
        handler = self._handler
        if handler is None:
            return
        self._logger.debug("=== k4a debug session ended ===")
        self._logger.removeHandler(handler)
        self._logger.setLevel(self._previous_level)
        handler.flush()
        handler.close()
        self._handler = None

    def __enter__(self) -> DebugLog:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["DebugLog"]
