"""
Shared pytest fixtures for filehash tests.

- isolate_environment: fresh DI container, no log file, no stray config
- hello_source: the 11-byte "hello world" source
- sample_file: a file with a few hundred KiB of patterned data
- recording_source: source wrapper that records every read issued
"""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from filehash.core.bootstrap import reset
from filehash.hashing.sources import BytesSource

HELLO_WORLD = b"hello world"


class RecordingSource:
    """Source that serves data in chunks of at most max_chunk bytes and logs reads."""

    def __init__(self, data: bytes, max_chunk: int | None = None) -> None:
        self.data = data
        self.max_chunk = max_chunk
        self.reads: list[tuple[int, int]] = []

    def read_at(self, size: int, offset: int) -> bytes:
        self.reads.append((size, offset))
        if self.max_chunk is not None:
            size = min(size, self.max_chunk)
        return self.data[offset : offset + size]


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset bootstrap state and keep tests away from ~/.filehash."""
    for name in list(os.environ):
        if name.startswith("FILEHASH_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("FILEHASH_LOGGING__FILE", "false")
    monkeypatch.chdir(tmp_path)
    reset()
    yield
    reset()


@pytest.fixture
def hello_source() -> BytesSource:
    return BytesSource(HELLO_WORLD)


@pytest.fixture
def sample_bytes() -> bytes:
    return bytes(i * 7 % 251 for i in range(300_000))


@pytest.fixture
def sample_file(tmp_path: Path, sample_bytes: bytes) -> Path:
    path = tmp_path / "sample.bin"
    path.write_bytes(sample_bytes)
    return path


@pytest.fixture
def recording_source() -> RecordingSource:
    return RecordingSource(HELLO_WORLD)


@pytest.fixture
def make_recording_source() -> type[RecordingSource]:
    """The RecordingSource class, for tests that need custom data or chunking."""
    return RecordingSource
