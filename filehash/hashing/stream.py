"""
Bounded sequential stream over a random-access source.
"""

from __future__ import annotations

from ..core.exceptions import SourceReadError
from ..core.interfaces.hashing import RandomAccessSource
from .ranges import BoundedRange, ByteRange


class BoundedStream:
    """
    Sequential reader confined to one byte range of a source.

    The cursor starts at the range's begin and only moves forward. For a
    bounded range the source is never asked for bytes at or past end, and
    the stream is exhausted exactly when the cursor reaches end, however
    much data the source has beyond it. For an open range the stream ends
    when the source reports end of data.
    """

    def __init__(self, source: RandomAccessSource, byte_range: ByteRange) -> None:
        self._source = source
        self._range = byte_range
        self._position = byte_range.begin
        self._end: int | None = byte_range.end if isinstance(byte_range, BoundedRange) else None
        self._exhausted = self._end is not None and self._position == self._end

    @property
    def byte_range(self) -> ByteRange:
        return self._range

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int | None:
        """Bytes left before end, or None for an open range."""
        if self._end is None:
            return None
        return self._end - self._position

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def read_next(self, buffer: bytearray | memoryview) -> tuple[int, bool]:
        """
        Read the next chunk of the range into buffer.

        Args:
            buffer: Writable buffer; at most len(buffer) bytes are delivered

        Returns:
            (delivered, end_of_stream): bytes written to the front of buffer,
            and whether the stream is now exhausted

        Raises:
            SourceReadError: If the source fails, or ends before a bounded
                range does
            ValueError: If buffer is empty
        """
        if self._exhausted:
            return 0, True

        capacity = len(buffer)
        if capacity == 0:
            raise ValueError("read buffer must not be empty")

        want = capacity if self._end is None else min(capacity, self._end - self._position)
        offset = self._position
        try:
            data = self._source.read_at(want, offset)
        except (OSError, ValueError) as e:
            raise SourceReadError(f"Read from source failed: {e}", offset=offset, cause=e) from e

        if not data:
            if self._end is None:
                self._exhausted = True
                return 0, True
            raise SourceReadError(
                "Source ended before the end of the requested range",
                offset=offset,
                context={"end": self._end},
                cause=EOFError(f"no data at offset {offset}"),
            )

        delivered = min(len(data), want)
        buffer[:delivered] = data[:delivered]
        self._position += delivered
        self._exhausted = self._end is not None and self._position == self._end
        return delivered, self._exhausted
