"""
Hash algorithm strategy implementations.

Each strategy encapsulates the logic for a specific hash algorithm,
following the Strategy pattern for extensibility. A strategy is itself a
digest function: calling it returns a fresh accumulator.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Any

try:
    import blake3 as _blake3

    blake3: Any | None = _blake3
except ImportError:
    blake3 = None


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm_name: Unique identifier for the algorithm
    - create_hasher(): Factory method for accumulator instances
    """

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return algorithm identifier (e.g., 'sha1', 'sha256')."""
        pass

    @abstractmethod
    def create_hasher(self) -> Any:
        """Create a new, independent accumulator."""
        pass

    @property
    def digest_size(self) -> int:
        """Length in bytes of the digests this algorithm produces."""
        return self.create_hasher().digest_size

    def __call__(self) -> Any:
        return self.create_hasher()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.algorithm_name!r})"


class MD5Strategy(HashStrategy):
    """MD5 hashing strategy - for legacy compatibility only."""

    @property
    def algorithm_name(self) -> str:
        return "md5"

    def create_hasher(self) -> Any:
        return hashlib.md5()


class SHA1Strategy(HashStrategy):
    """SHA-1 hashing strategy - the default for whole-file content ids."""

    @property
    def algorithm_name(self) -> str:
        return "sha1"

    def create_hasher(self) -> Any:
        return hashlib.sha1()


class SHA224Strategy(HashStrategy):
    """SHA-224 hashing strategy - truncated SHA-256."""

    @property
    def algorithm_name(self) -> str:
        return "sha224"

    def create_hasher(self) -> Any:
        return hashlib.sha224()


class SHA256Strategy(HashStrategy):
    """SHA-256 hashing strategy - widely compatible."""

    @property
    def algorithm_name(self) -> str:
        return "sha256"

    def create_hasher(self) -> Any:
        return hashlib.sha256()


class SHA384Strategy(HashStrategy):
    """SHA-384 hashing strategy - truncated SHA-512."""

    @property
    def algorithm_name(self) -> str:
        return "sha384"

    def create_hasher(self) -> Any:
        return hashlib.sha384()


class SHA512Strategy(HashStrategy):
    """SHA-512 hashing strategy - stronger variant of SHA-2."""

    @property
    def algorithm_name(self) -> str:
        return "sha512"

    def create_hasher(self) -> Any:
        return hashlib.sha512()


class Blake3Strategy(HashStrategy):
    """BLAKE3 hashing strategy - fast cryptographic hash, opt-in."""

    @property
    def algorithm_name(self) -> str:
        return "blake3"

    def create_hasher(self) -> Any:
        if blake3 is None:
            raise ImportError("blake3 package not installed")
        return blake3.blake3()

    @property
    def digest_size(self) -> int:
        return 32


def default_strategies() -> list[HashStrategy]:
    """Strategies registered in every default registry."""
    return [
        MD5Strategy(),
        SHA1Strategy(),
        SHA224Strategy(),
        SHA256Strategy(),
        SHA384Strategy(),
        SHA512Strategy(),
    ]


# Opt-in strategies, keyed by the name accepted in hash.extra_algorithms
EXTRA_STRATEGIES: dict[str, type[HashStrategy]] = {
    "blake3": Blake3Strategy,
}
