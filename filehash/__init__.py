"""
filehash - digests over byte ranges of random-access sources.

Example:
    import filehash

    with filehash.FileSource("image.iso") as source:
        head = filehash.compute_by_name("sha256", source, 0, 4096)
        whole = filehash.compute_whole_source("md5", source)
"""

from __future__ import annotations

from typing import Any

from .core.di import resolve_or_default
from .core.exceptions import (
    AlgorithmNotSupportedError,
    FilehashException,
    InvalidRangeError,
    SourceReadError,
)
from .hashing import (
    WHOLE_SOURCE,
    BoundedRange,
    BoundedStream,
    BytesSource,
    FileSource,
    HashAlgorithmRegistry,
    Hasher,
    HashStrategy,
    OpenRange,
    default_registry,
)
from .hashing.hasher import Algorithm
from .hashing.ranges import make_range

__version__ = "0.3.0"


def _hasher() -> Hasher:
    return resolve_or_default(Hasher, Hasher)


def lookup(name: str) -> HashStrategy:
    """Resolve a registered algorithm name to its digest function."""
    return _hasher().lookup(name)


def compute(fn: Algorithm, source: Any, begin: int = 0, end: int | None = None) -> bytes:
    """Digest source[begin:end]; end=None reads to the end of the source."""
    return _hasher().compute(fn, source, make_range(begin, end))


def compute_by_name(name: str, source: Any, begin: int = 0, end: int | None = None) -> bytes:
    """Like compute(), selecting the algorithm by registered name."""
    return _hasher().compute_by_name(name, source, make_range(begin, end))


def compute_whole_source(algorithm: Algorithm, source: Any) -> bytes:
    """Digest the whole source with an algorithm or algorithm name."""
    return _hasher().compute_whole_source(algorithm, source)


def _default_algorithm() -> str:
    from .core.container import get_container
    from .core.settings import FilehashSettings

    settings = get_container().try_resolve(FilehashSettings)
    return settings.hash.default if settings is not None else "sha1"


def hash_file(source: Any, begin: int, end: int) -> bytes:
    """
    Digest source[begin:end] with the default algorithm.

    The default is hash.default once bootstrap() has run, SHA-1 otherwise.
    """
    return compute_by_name(_default_algorithm(), source, begin, end)


def hash_all_file(source: Any) -> bytes:
    """Digest the whole source with the default algorithm (see hash_file)."""
    return compute_whole_source(_default_algorithm(), source)


__all__ = [
    "WHOLE_SOURCE",
    "AlgorithmNotSupportedError",
    "BoundedRange",
    "BoundedStream",
    "BytesSource",
    "FileSource",
    "FilehashException",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "Hasher",
    "InvalidRangeError",
    "OpenRange",
    "SourceReadError",
    "__version__",
    "compute",
    "compute_by_name",
    "compute_whole_source",
    "default_registry",
    "hash_all_file",
    "hash_file",
    "lookup",
]
