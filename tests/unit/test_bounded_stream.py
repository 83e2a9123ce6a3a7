"""
Unit tests for BoundedStream and byte ranges.

Tests verify:
- Reads are clamped to the range and never ask the source past its end
- Short reads advance the cursor by what was delivered
- End of stream is signalled exactly at the range end
- Open ranges end at the source's end of data; bounded ones fail there
"""

import io

import pytest

from filehash.core.exceptions import InvalidRangeError, SourceReadError
from filehash.hashing.ranges import BoundedRange, OpenRange, make_range
from filehash.hashing.sources import FileSource
from filehash.hashing.stream import BoundedStream


def drain(stream: BoundedStream, buffer_size: int) -> bytes:
    """Read a stream to the end, returning everything delivered."""
    buffer = bytearray(buffer_size)
    out = bytearray()
    end = False
    while not end:
        n, end = stream.read_next(buffer)
        out += buffer[:n]
    return bytes(out)


class TestByteRanges:
    """Tests for range construction."""

    def test_bounded_range_length(self):
        assert BoundedRange(3, 10).length == 7

    def test_empty_range(self):
        assert BoundedRange(5, 5).is_empty

    def test_end_before_begin_rejected(self):
        """end < begin is invalid."""
        with pytest.raises(InvalidRangeError):
            BoundedRange(6, 5)

    def test_negative_begin_rejected(self):
        with pytest.raises(InvalidRangeError):
            BoundedRange(-1, 5)
        with pytest.raises(InvalidRangeError):
            OpenRange(-1)

    def test_invalid_range_is_value_error(self):
        """InvalidRangeError also satisfies except ValueError."""
        with pytest.raises(ValueError):
            BoundedRange(2, 1)

    def test_make_range(self):
        """make_range() gives an open range when end is None."""
        assert make_range(4) == OpenRange(4)
        assert make_range(0, 11) == BoundedRange(0, 11)

    def test_ranges_are_immutable(self):
        r = BoundedRange(0, 1)
        with pytest.raises(AttributeError):
            r.end = 2  # type: ignore[misc]


class TestBoundedReads:
    """Tests for bounded ranges."""

    def test_reads_exact_range(self, make_recording_source):
        """Only bytes in [begin, end) are delivered."""
        source = make_recording_source(b"hello world")
        stream = BoundedStream(source, BoundedRange(6, 11))

        assert drain(stream, 64) == b"world"
        assert stream.position == 11
        assert stream.exhausted

    def test_request_clamped_to_range_end(self, make_recording_source):
        """The source is never asked for bytes past end."""
        source = make_recording_source(b"hello world")
        stream = BoundedStream(source, BoundedRange(0, 5))

        n, end = stream.read_next(bytearray(64))

        assert (n, end) == (5, True)
        assert source.reads == [(5, 0)]

    def test_small_buffer_needs_several_reads(self, make_recording_source):
        """A buffer smaller than the range yields consecutive chunks."""
        source = make_recording_source(b"hello world")
        stream = BoundedStream(source, BoundedRange(0, 11))
        buffer = bytearray(4)

        assert stream.read_next(buffer) == (4, False)
        assert bytes(buffer) == b"hell"
        assert stream.read_next(buffer) == (4, False)
        assert bytes(buffer) == b"o wo"
        assert stream.read_next(buffer) == (3, True)
        assert bytes(buffer[:3]) == b"rld"
        assert source.reads == [(4, 0), (4, 4), (3, 8)]

    def test_short_reads_advance_by_delivered(self, make_recording_source):
        """Short reads deliver what was read and move the cursor that far."""
        source = make_recording_source(b"hello world", max_chunk=2)
        stream = BoundedStream(source, BoundedRange(1, 8))

        n, end = stream.read_next(bytearray(64))

        assert (n, end) == (2, False)
        assert stream.position == 3
        assert drain(stream, 64) == b"lo wo"
        assert [offset for _, offset in source.reads] == [1, 3, 5, 7]

    def test_position_never_exceeds_end(self, make_recording_source):
        """Sources returning more than asked cannot push past end."""

        class OverlongSource:
            def read_at(self, size, offset):
                return b"x" * (size + 10)

        stream = BoundedStream(OverlongSource(), BoundedRange(0, 5))
        buffer = bytearray(3)

        assert stream.read_next(buffer) == (3, False)
        assert stream.read_next(buffer) == (2, True)
        assert stream.position == 5

    def test_empty_range_issues_no_read(self, make_recording_source):
        """begin == end finishes immediately without touching the source."""
        source = make_recording_source(b"hello world")
        stream = BoundedStream(source, BoundedRange(5, 5))

        assert stream.read_next(bytearray(8)) == (0, True)
        assert source.reads == []

    def test_reads_after_exhaustion(self, make_recording_source):
        """An exhausted stream keeps reporting end of stream."""
        source = make_recording_source(b"hello world")
        stream = BoundedStream(source, BoundedRange(0, 2))
        drain(stream, 8)

        assert stream.read_next(bytearray(8)) == (0, True)
        assert len(source.reads) == 1

    def test_source_shorter_than_range(self, make_recording_source):
        """Running out of data inside a bounded range is an error."""
        source = make_recording_source(b"hello world")
        stream = BoundedStream(source, BoundedRange(6, 20))

        with pytest.raises(SourceReadError) as exc_info:
            drain(stream, 64)

        assert exc_info.value.offset == 11
        assert isinstance(exc_info.value.__cause__, EOFError)

    def test_range_entirely_past_source(self, make_recording_source):
        source = make_recording_source(b"abc")
        stream = BoundedStream(source, BoundedRange(10, 12))

        with pytest.raises(SourceReadError) as exc_info:
            stream.read_next(bytearray(8))
        assert exc_info.value.offset == 10

    def test_os_error_wrapped(self):
        """I/O failures surface as SourceReadError with the failing offset."""

        class BrokenSource:
            def read_at(self, size, offset):
                raise OSError(5, "Input/output error")

        stream = BoundedStream(BrokenSource(), BoundedRange(7, 9))

        with pytest.raises(SourceReadError) as exc_info:
            stream.read_next(bytearray(8))

        assert exc_info.value.offset == 7
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_closed_file_object_wrapped(self):
        """ValueError from reading a closed file object is a source error too."""
        data = io.BytesIO(b"hello world")
        data.close()
        stream = BoundedStream(FileSource(data), OpenRange(3))

        with pytest.raises(SourceReadError) as exc_info:
            stream.read_next(bytearray(8))

        assert exc_info.value.offset == 3

    def test_empty_buffer_rejected(self, make_recording_source):
        stream = BoundedStream(make_recording_source(b"abc"), BoundedRange(0, 3))
        with pytest.raises(ValueError):
            stream.read_next(bytearray(0))

    def test_remaining(self, make_recording_source):
        stream = BoundedStream(make_recording_source(b"hello world"), BoundedRange(2, 9))
        assert stream.remaining == 7
        stream.read_next(bytearray(4))
        assert stream.remaining == 3


class TestOpenReads:
    """Tests for open ranges."""

    def test_reads_to_source_end(self, make_recording_source):
        """The source's end of data ends the stream normally."""
        source = make_recording_source(b"hello world")
        stream = BoundedStream(source, OpenRange(6))

        assert drain(stream, 4) == b"world"
        assert stream.exhausted
        assert stream.remaining is None

    def test_end_signalled_by_empty_read(self, make_recording_source):
        """An open stream only ends once the source returns no data."""
        source = make_recording_source(b"abc")
        stream = BoundedStream(source, OpenRange(0))

        assert stream.read_next(bytearray(8)) == (3, False)
        assert stream.read_next(bytearray(8)) == (0, True)

    def test_begin_past_end_is_empty(self, make_recording_source):
        """An open range starting past the data is simply empty."""
        stream = BoundedStream(make_recording_source(b"abc"), OpenRange(50))
        assert drain(stream, 8) == b""
