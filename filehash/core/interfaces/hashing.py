"""
Protocols for the hashing core.

A RandomAccessSource hands out bytes at absolute offsets; a DigestAccumulator
consumes them in order. Neither is tied to a concrete class, so open files,
in-memory buffers, hashlib objects and blake3 objects all fit.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomAccessSource(Protocol):
    """Data source readable at arbitrary offsets."""

    def read_at(self, size: int, offset: int) -> bytes:
        """
        Read up to size bytes starting at offset.

        May return fewer bytes than requested. Returns b"" when no byte
        exists at or after offset. May raise OSError.
        """
        ...


@runtime_checkable
class DigestAccumulator(Protocol):
    """Incremental, single-use digest state."""

    def update(self, data: bytes, /) -> None:
        """Feed the next bytes."""
        ...

    def digest(self) -> bytes:
        """Return the fixed-length digest of everything fed so far."""
        ...


# Any zero-argument callable producing a fresh accumulator (e.g. hashlib.sha1)
DigestFunction = Callable[[], DigestAccumulator]
