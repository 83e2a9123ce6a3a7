"""
Service container for filehash.

A process-wide table from service type to a dependency-injector provider.
bootstrap() fills it; library code reads it through resolve_or_default().
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Singleton services keyed by the type callers ask for."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget every registration; the next get_instance() starts empty."""
        cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Bind interface to one shared instance.

        Args:
            interface: Type used as the lookup key
            implementation: Ready-made instance
            factory: Builds the instance on first resolve (used when no
                implementation is given)
        """
        if implementation is not None:
            provider: providers.Provider = providers.Object(implementation)
        elif factory is not None:
            provider = providers.Singleton(factory)
        else:
            raise ValueError(f"{interface.__name__}: need an implementation or a factory")
        self._providers[interface] = provider

    def resolve(self, interface: type[T]) -> T:
        """
        Return the instance bound to interface.

        Raises:
            KeyError: If bootstrap() did not register interface
        """
        instance = self.try_resolve(interface)
        if instance is None:
            raise KeyError(f"No provider registered for: {interface}")
        return instance

    def try_resolve(self, interface: type[T]) -> T | None:
        provider = self._providers.get(interface)
        return None if provider is None else provider()


def get_container() -> ServiceContainer:
    """Get the global service container instance."""
    return ServiceContainer.get_instance()
