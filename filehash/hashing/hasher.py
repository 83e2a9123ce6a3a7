"""
Ranged, streaming digest computation.

The Hasher pumps bytes from a BoundedStream into a fresh accumulator and
returns the raw digest. Every call allocates its own accumulator, stream and
transfer buffer, so one Hasher can serve many threads at once.
"""

from __future__ import annotations

from typing import Any, Union

from ..core.interfaces.hashing import DigestFunction
from ..core.interfaces.logger import ILogger
from ..core.models.config import DEFAULT_BUFFER_SIZE
from .ranges import WHOLE_SOURCE, ByteRange
from .registry import HashAlgorithmRegistry, default_registry
from .sources import as_source
from .strategies import HashStrategy
from .stream import BoundedStream

# A registered name, a strategy, or any zero-argument accumulator factory
Algorithm = Union[str, HashStrategy, DigestFunction]


class Hasher:
    """
    Computes digests over byte ranges of random-access sources.

    Example:
        hasher = Hasher()
        with FileSource("disk.img") as source:
            digest = hasher.compute_by_name("sha256", source, BoundedRange(0, 4096))
    """

    def __init__(
        self,
        registry: HashAlgorithmRegistry | None = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize the hasher.

        Args:
            registry: Algorithm registry for name lookups (defaults to the
                frozen default registry)
            buffer_size: Size of the per-call transfer buffer in bytes
            logger: Logger for internal diagnostics
        """
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._registry = registry if registry is not None else default_registry()
        self._buffer_size = buffer_size
        self._logger = logger

    @property
    def registry(self) -> HashAlgorithmRegistry:
        return self._registry

    @property
    def buffer_size(self) -> int:
        return self._buffer_size

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ..core.di import get_logger

            self._logger = get_logger()
        return self._logger

    def lookup(self, name: str) -> HashStrategy:
        """Resolve an algorithm name through the registry."""
        return self._registry.lookup(name)

    def compute(self, algorithm: Algorithm, source: Any, byte_range: ByteRange) -> bytes:
        """
        Digest the bytes of source within byte_range.

        Args:
            algorithm: Strategy, accumulator factory (e.g. hashlib.sha1) or
                registered name
            source: RandomAccessSource, bytes-like object or binary file
            byte_range: BoundedRange or OpenRange

        Returns:
            Raw digest bytes

        Raises:
            AlgorithmNotSupportedError: If a name is given and not registered
            SourceReadError: If the source fails or ends inside a bounded range
        """
        if isinstance(algorithm, str):
            return self.compute_by_name(algorithm, source, byte_range)
        if not callable(algorithm):
            raise TypeError(f"Not a digest function: {algorithm!r}")
        return self._transfer(algorithm, source, byte_range)

    def compute_by_name(self, name: str, source: Any, byte_range: ByteRange) -> bytes:
        """Look the algorithm up by name, then compute()."""
        strategy = self.lookup(name)
        return self._transfer(strategy, source, byte_range)

    def compute_whole_source(self, algorithm: Algorithm, source: Any) -> bytes:
        """Digest everything from offset 0 to the source's own end of data."""
        return self.compute(algorithm, source, WHOLE_SOURCE)

    def _transfer(self, digest_function: DigestFunction, source: Any, byte_range: ByteRange) -> bytes:
        stream = BoundedStream(as_source(source), byte_range)
        hasher = digest_function()
        buffer = memoryview(bytearray(self._buffer_size))
        total = 0
        end_of_stream = False
        while not end_of_stream:
            delivered, end_of_stream = stream.read_next(buffer)
            if delivered:
                hasher.update(buffer[:delivered])
                total += delivered
        self.logger.debug(
            "Digest %s over %s: %d bytes",
            getattr(digest_function, "algorithm_name", digest_function),
            byte_range,
            total,
        )
        return hasher.digest()
