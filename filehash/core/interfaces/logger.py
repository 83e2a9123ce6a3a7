"""
Logger interface for filehash diagnostics.

Digest results and errors reach callers as return values and exceptions;
the logger only records what happened along the way.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """
    Diagnostic logger.

    Implementations provide log() and set_level(); the level helpers
    forward to log() with the level name.
    """

    @abstractmethod
    def log(self, level: str, message: str, *args: Any, **kwargs: Any) -> None:
        """
        Record a %-style message at level ('debug', 'info', 'warning', 'error').
        """

    @abstractmethod
    def set_level(self, level: str) -> None:
        """Change the threshold below which messages are dropped."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log("debug", message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log("info", message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log("warning", message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log("error", message, *args, **kwargs)
