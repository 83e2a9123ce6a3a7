"""
Byte ranges over a random-access source.

A range is either bounded, [begin, end), or open, [begin, end-of-source).
Keeping the two apart means bounded ranges are always clamped and checked,
while open ranges stop wherever the source itself runs out of data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.exceptions import InvalidRangeError


@dataclass(frozen=True)
class BoundedRange:
    """Half-open range [begin, end).

    Attributes:
        begin: First offset included
        end: First offset excluded; begin == end is the empty range
    """

    begin: int
    end: int

    def __post_init__(self) -> None:
        if self.begin < 0:
            raise InvalidRangeError("Range begin must not be negative", begin=self.begin)
        if self.end < self.begin:
            raise InvalidRangeError(
                "Range end must not precede its begin", begin=self.begin, end=self.end
            )

    @property
    def length(self) -> int:
        return self.end - self.begin

    @property
    def is_empty(self) -> bool:
        return self.begin == self.end

    def __str__(self) -> str:
        return f"[{self.begin}, {self.end})"


@dataclass(frozen=True)
class OpenRange:
    """Range from begin to wherever the source ends."""

    begin: int = 0

    def __post_init__(self) -> None:
        if self.begin < 0:
            raise InvalidRangeError("Range begin must not be negative", begin=self.begin)

    def __str__(self) -> str:
        return f"[{self.begin}, EOF)"


ByteRange = Union[BoundedRange, OpenRange]

WHOLE_SOURCE = OpenRange(0)


def make_range(begin: int = 0, end: int | None = None) -> ByteRange:
    """Build a bounded range, or an open one when end is None."""
    if end is None:
        return OpenRange(begin)
    return BoundedRange(begin, end)
