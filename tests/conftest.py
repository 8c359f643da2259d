"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import csview' works without an
install, and provides in-memory stream fixtures.
"""
import io
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csview.io.streams import ByteStream  # noqa: E402


class FlakyFile:
    """File-like object that serves some chunks, then fails every read"""

    name = '<flaky>'

    def __init__(self, chunks):
        self._chunks = list(chunks)

    def read(self, size):
        if not self._chunks:
            raise OSError("simulated device error")
        return self._chunks.pop(0)

    def close(self):
        pass


class ShortWriter:
    """File-like object that reports one byte less than requested"""

    name = '<short>'

    def __init__(self):
        self.calls = 0

    def write(self, data):
        self.calls += 1
        return len(data) - 1

    def close(self):
        pass


@pytest.fixture
def byte_stream():
    """Factory: wrap bytes in a ByteStream"""
    def _make(data: bytes) -> ByteStream:
        return ByteStream.from_fileobj(io.BytesIO(data), name='<memory>')
    return _make


@pytest.fixture
def flaky_stream():
    """Factory: a ByteStream that fails after serving the given chunks"""
    def _make(*chunks: bytes) -> ByteStream:
        return ByteStream.from_fileobj(FlakyFile(chunks))
    return _make


@pytest.fixture
def short_writer():
    return ShortWriter()


@pytest.fixture
def csv_file(tmp_path):
    """Factory: write text to a CSV file under tmp_path and return its path"""
    def _make(content: str, name: str = 'data.csv') -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode('utf-8'))
        return path
    return _make
