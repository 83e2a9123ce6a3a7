"""
Dependency injection helpers for filehash.

Lazy resolution patterns that fall back to default implementations when
the container has not been bootstrapped (library use without the CLI).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def resolve_or_default(
    interface: type[T],
    default_factory: Callable[[], T],
) -> T:
    """Resolve a service from the container or create a default.

    Args:
        interface: The interface/protocol type to resolve
        default_factory: Callable that creates the default implementation

    Returns:
        Resolved service instance or default

    Example:
        >>> from filehash.core.interfaces.logger import ILogger
        >>> from filehash.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    from .container import get_container

    instance = get_container().try_resolve(interface)
    if instance is not None:
        return instance
    return default_factory()


def get_logger():
    """Resolve the configured ILogger, or a NullLogger before bootstrap."""
    from ..services.logging import NullLogger
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)
