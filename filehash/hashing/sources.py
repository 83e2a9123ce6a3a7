"""
Random-access source adapters.

FileSource reads with os.pread so that concurrent callers never share a file
position; BytesSource serves in-memory data.
"""

from __future__ import annotations

import io
import os
import threading
from pathlib import Path
from typing import Any, BinaryIO

from ..core.interfaces.hashing import RandomAccessSource


class FileSource:
    """
    Random-access view of a file on disk or an open binary file.

    When given a path the file is opened here and closed by close() (or by
    leaving the ``with`` block). When given a file object the caller keeps
    ownership of it. Reads after close(), or after the caller closed the
    file object, raise ValueError.
    """

    def __init__(self, file: str | os.PathLike | BinaryIO) -> None:
        self._lock = threading.Lock()
        self._closed = False
        if isinstance(file, (str, os.PathLike)):
            self.name = os.fspath(file)
            self._file: BinaryIO = open(file, "rb")  # noqa: SIM115 - closed in close()
            self._owned = True
        else:
            self.name = getattr(file, "name", repr(file))
            self._file = file
            self._owned = False
        self._fileno = self._try_fileno()

    def _try_fileno(self) -> int | None:
        if not hasattr(os, "pread"):
            return None
        try:
            return self._file.fileno()
        except (AttributeError, OSError, ValueError):
            return None

    def _check_open(self) -> None:
        # A closed descriptor number can be reused by another open file
        if self._closed or getattr(self._file, "closed", False):
            self._fileno = None
            raise ValueError(f"I/O operation on closed file: {self.name}")

    def read_at(self, size: int, offset: int) -> bytes:
        """Read up to size bytes at offset; b"" at end of file."""
        self._check_open()
        if self._fileno is not None:
            return os.pread(self._fileno, size, offset)
        with self._lock:
            self._file.seek(offset)
            return self._file.read(size)

    def size(self) -> int:
        """Current length of the file in bytes."""
        self._check_open()
        if self._fileno is not None:
            return os.fstat(self._fileno).st_size
        with self._lock:
            return self._file.seek(0, io.SEEK_END)

    def close(self) -> None:
        self._closed = True
        self._fileno = None
        if self._owned:
            self._file.close()

    def __enter__(self) -> FileSource:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FileSource({self.name!r})"


class BytesSource:
    """Random-access view of an in-memory buffer."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = memoryview(data).cast("B")

    def read_at(self, size: int, offset: int) -> bytes:
        return self._data[offset : offset + size].tobytes()

    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)


def as_source(source: Any) -> RandomAccessSource:
    """
    Coerce common inputs into a RandomAccessSource.

    Accepts objects that already implement read_at, bytes-like objects,
    and seekable binary file objects. Paths are deliberately not accepted
    here; use FileSource so the caller controls when the file is closed.

    Raises:
        TypeError: If the object cannot serve reads at arbitrary offsets
    """
    if isinstance(source, RandomAccessSource):
        return source
    if isinstance(source, (bytes, bytearray, memoryview)):
        return BytesSource(source)
    if isinstance(source, (str, Path)):
        raise TypeError("Pass FileSource(path) instead of a bare path")
    if hasattr(source, "read") and hasattr(source, "seek"):
        return FileSource(source)
    raise TypeError(f"Unsupported source type: {type(source).__name__}")
