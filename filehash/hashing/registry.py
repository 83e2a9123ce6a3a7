"""
Hash algorithm registry.

Maps algorithm names to strategies. New algorithms are added by registering
new strategies; once frozen, a registry is read-only and can be shared
between threads without coordination.
"""

from collections.abc import Iterable, Iterator
from functools import lru_cache

from ..core.exceptions import AlgorithmNotSupportedError, RegistryFrozenError
from .strategies import EXTRA_STRATEGIES, HashStrategy, default_strategies


class HashAlgorithmRegistry:
    """
    Registry for hash algorithm strategies.

    Example:
        registry = HashAlgorithmRegistry()

        # Use default algorithms
        strategy = registry.lookup("sha256")

        # Register custom algorithm, then lock the table
        registry.register(MyCustomStrategy())
        registry.freeze()
    """

    def __init__(
        self,
        strategies: Iterable[HashStrategy] | None = None,
        register_defaults: bool = True,
    ):
        """
        Initialize the registry.

        Args:
            strategies: Additional strategies to register after the defaults
            register_defaults: If True, register md5, sha1, sha224, sha256,
                sha384 and sha512
        """
        self._strategies: dict[str, HashStrategy] = {}
        self._frozen = False
        if register_defaults:
            for strategy in default_strategies():
                self.register(strategy)
        for strategy in strategies or ():
            self.register(strategy)

    def register(self, strategy: HashStrategy) -> None:
        """
        Register a hash strategy, replacing any with the same name.

        Raises:
            RegistryFrozenError: If the registry has been frozen
        """
        if self._frozen:
            raise RegistryFrozenError(
                "Cannot register into a frozen hash algorithm registry",
                algorithm=strategy.algorithm_name,
            )
        self._strategies[strategy.algorithm_name] = strategy

    def freeze(self) -> "HashAlgorithmRegistry":
        """Make the registry read-only. Returns self for chaining."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def get(self, algorithm: str) -> HashStrategy | None:
        """Get strategy by algorithm name, or None if not registered."""
        return self._strategies.get(algorithm)

    def lookup(self, algorithm: str) -> HashStrategy:
        """
        Get strategy by algorithm name.

        Names match exactly; 'SHA256' is not 'sha256'.

        Raises:
            AlgorithmNotSupportedError: If the name is not registered. The
                error lists every registered name.
        """
        strategy = self.get(algorithm)
        if strategy is None:
            raise AlgorithmNotSupportedError(algorithm, self._strategies.keys())
        return strategy

    @property
    def available_algorithms(self) -> list[str]:
        """List available algorithm names."""
        return list(self._strategies.keys())

    def __contains__(self, algorithm: object) -> bool:
        return algorithm in self._strategies

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._strategies))

    def __len__(self) -> int:
        return len(self._strategies)


def build_registry(extra_algorithms: Iterable[str] = ()) -> HashAlgorithmRegistry:
    """
    Build a frozen registry with the defaults plus opt-in algorithms.

    Args:
        extra_algorithms: Names from EXTRA_STRATEGIES (e.g. 'blake3')

    Raises:
        AlgorithmNotSupportedError: If an extra name is unknown
    """
    extras = []
    for name in extra_algorithms:
        strategy_cls = EXTRA_STRATEGIES.get(name)
        if strategy_cls is None:
            raise AlgorithmNotSupportedError(name, EXTRA_STRATEGIES.keys())
        extras.append(strategy_cls())
    return HashAlgorithmRegistry(strategies=extras).freeze()


@lru_cache(maxsize=1)
def default_registry() -> HashAlgorithmRegistry:
    """The process-wide, read-only registry of the default algorithms."""
    return build_registry()
