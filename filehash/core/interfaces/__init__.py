"""
Protocol definitions for filehash's service interfaces.

These protocols define the contracts that implementations must follow,
enabling dependency inversion and loose coupling throughout the codebase.
"""

from .hashing import DigestAccumulator, DigestFunction, RandomAccessSource
from .logger import ILogger

__all__ = [
    "DigestAccumulator",
    "DigestFunction",
    "ILogger",
    "RandomAccessSource",
]
