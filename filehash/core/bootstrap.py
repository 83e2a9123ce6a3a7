"""
Application bootstrap for filehash.

Initializes the DI container with the configured services. Library callers
that never bootstrap get NullLogger and the default registry instead.
"""

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger

_initialized = False


def bootstrap(config_path: Path | None = None, start_dir: str | None = None) -> ServiceContainer:
    """
    Bootstrap the filehash application.

    Registers settings, logger, algorithm registry and hasher. Calling it
    again is a no-op until reset().

    Args:
        config_path: Explicit path to a config file
        start_dir: Directory to start the config file search from

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container, config_path, start_dir)

    _initialized = True
    return container


def _register_core_services(
    container: ServiceContainer, config_path: Path | None, start_dir: str | None
) -> None:
    """Register core application services."""
    from ..hashing.hasher import Hasher
    from ..hashing.registry import HashAlgorithmRegistry, build_registry
    from ..services.interrupt import ShutdownHooks
    from ..services.logging import FilehashLogger
    from .settings import FilehashSettings, load_settings

    settings = load_settings(config_path=config_path, start_dir=start_dir)
    container.register_singleton(FilehashSettings, implementation=settings)

    container.register_singleton(
        ILogger,  # type: ignore[type-abstract]
        factory=lambda: FilehashLogger.from_config(settings.logging),
    )

    container.register_singleton(
        HashAlgorithmRegistry,
        factory=lambda: build_registry(settings.hash.extra_algorithms),
    )
    container.register_singleton(
        Hasher,
        factory=lambda: Hasher(
            registry=container.resolve(HashAlgorithmRegistry),
            buffer_size=settings.hash.buffer_size,
            logger=container.resolve(ILogger),  # type: ignore[type-abstract]
        ),
    )
    container.register_singleton(ShutdownHooks, factory=ShutdownHooks)


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
