"""Supporting services: logging, shutdown hooks and public address discovery."""

from .interrupt import ShutdownHooks
from .logging import FilehashLogger, NullLogger
from .realip import get_real_ip

__all__ = [
    "FilehashLogger",
    "NullLogger",
    "ShutdownHooks",
    "get_real_ip",
]
