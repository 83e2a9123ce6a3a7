"""
Diagnostics logger for filehash.

FilehashLogger writes through a stdlib logger to stderr and/or a rotating
file, as selected by the [logging] config section. NullLogger is what
library code gets before bootstrap().
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger
from ..core.models.config import DEFAULT_LOG_FILE, LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class FilehashLogger(ILogger):
    """stdlib-backed logger with optional stderr and rotating-file output."""

    MAX_FILE_SIZE = 10 * 1024 * 1024
    BACKUP_COUNT = 3

    LEVELS: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "filehash",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = True,
        log_file: Path | None = None,
    ) -> None:
        self._log_file = log_file or DEFAULT_LOG_FILE
        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        if console_enabled:
            self._logger.addHandler(logging.StreamHandler(sys.stderr))
        if file_enabled:
            self._log_file.parent.mkdir(parents=True, exist_ok=True)
            self._logger.addHandler(
                RotatingFileHandler(
                    self._log_file,
                    maxBytes=self.MAX_FILE_SIZE,
                    backupCount=self.BACKUP_COUNT,
                )
            )

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        for handler in self._logger.handlers:
            handler.setFormatter(formatter)
        self.set_level(level)

    @classmethod
    def from_config(cls, config: LoggingConfig, name: str = "filehash") -> "FilehashLogger":
        """Build the logger described by a [logging] config section."""
        return cls(
            name=name,
            level=config.level,
            console_enabled=config.console,
            file_enabled=config.file,
            log_file=config.path,
        )

    @property
    def log_file(self) -> Path:
        """Path of the rotating log file (whether or not it is enabled)."""
        return self._log_file

    def log(self, level: str, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.log(self._level_number(level), message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        # The handlers share one threshold, so it lives on the logger itself
        self._logger.setLevel(self._level_number(level))

    def _level_number(self, level: str) -> int:
        return self.LEVELS.get(level.lower(), logging.WARNING)


class NullLogger(ILogger):
    """Logger that discards everything."""

    def log(self, level: str, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
