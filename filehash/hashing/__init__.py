"""
Ranged, streaming digests.

Strategies and registry resolve algorithm names, BoundedStream confines
reads to a byte range, and Hasher ties them together.
"""

from .hasher import Algorithm, Hasher
from .ranges import WHOLE_SOURCE, BoundedRange, ByteRange, OpenRange, make_range
from .registry import HashAlgorithmRegistry, build_registry, default_registry
from .sources import BytesSource, FileSource, as_source
from .strategies import (
    Blake3Strategy,
    HashStrategy,
    MD5Strategy,
    SHA1Strategy,
    SHA224Strategy,
    SHA256Strategy,
    SHA384Strategy,
    SHA512Strategy,
)
from .stream import BoundedStream

__all__ = [
    "WHOLE_SOURCE",
    "Algorithm",
    "Blake3Strategy",
    "BoundedRange",
    "BoundedStream",
    "ByteRange",
    "BytesSource",
    "FileSource",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "Hasher",
    "MD5Strategy",
    "OpenRange",
    "SHA1Strategy",
    "SHA224Strategy",
    "SHA256Strategy",
    "SHA384Strategy",
    "SHA512Strategy",
    "as_source",
    "build_registry",
    "default_registry",
    "make_range",
]
