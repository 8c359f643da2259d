"""
Byte-stream and console primitives

Thin wrappers over Python file objects. Platform errors surface as csview
exceptions; the layers above decide how to report them.
"""

import sys
from pathlib import Path
from typing import BinaryIO, Optional, TextIO, Union
import logging

from ..core.exceptions import StreamOpenError, StreamReadError

logger = logging.getLogger(__name__)


class ByteStream:
    """A binary stream opened for reading or writing"""

    def __init__(self, fileobj: BinaryIO, name: str = '<stream>', owns_file: bool = True):
        """
        Wrap an open binary file object

        Args:
            fileobj: Binary file object (file handle, io.BytesIO, ...)
            name: Name used in log messages
            owns_file: Whether close() also closes fileobj
        """
        self._fileobj = fileobj
        self.name = name
        self._owns_file = owns_file
        self.closed = False

    @classmethod
    def from_fileobj(cls, fileobj: BinaryIO, name: Optional[str] = None) -> 'ByteStream':
        """Wrap a caller-owned file object; close() leaves it open"""
        return cls(fileobj, name=name or getattr(fileobj, 'name', '<stream>'), owns_file=False)

    def read(self, capacity: int) -> bytes:
        """
        Read up to capacity bytes

        Returns:
            Bytes read; empty at end of stream

        Raises:
            StreamReadError: If the underlying read fails
        """
        try:
            data = self._fileobj.read(capacity)
        except (OSError, ValueError) as e:
            raise StreamReadError(f"Error reading {self.name}: {e}") from e
        return data or b''

    def write(self, data: bytes) -> bool:
        """Write data; returns False on a short or failed write"""
        try:
            written = self._fileobj.write(data)
        except (OSError, ValueError) as e:
            logger.error(f"Error writing {self.name}: {e}")
            return False
        if written is not None and written != len(data):
            logger.error(f"Short write to {self.name}: {written} of {len(data)} bytes")
            return False
        return True

    def close(self):
        if self.closed:
            return
        self.closed = True
        if self._owns_file:
            self._fileobj.close()

    def __enter__(self) -> 'ByteStream':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False


def _open(file_path: Union[str, Path], mode: str) -> ByteStream:
    try:
        fileobj = open(file_path, mode)
    except OSError as e:
        raise StreamOpenError(f"Error opening {file_path}: {e}") from e
    return ByteStream(fileobj, name=str(file_path))


def open_read(file_path: Union[str, Path]) -> ByteStream:
    """Open a file for binary reading"""
    return _open(file_path, 'rb')


def open_write(file_path: Union[str, Path]) -> ByteStream:
    """Open a file for binary writing, creating or truncating it"""
    return _open(file_path, 'wb')


class ConsoleStream:
    """Text sink used by the table renderer"""

    def __init__(self, text_stream: Optional[TextIO] = None):
        # Resolved lazily so pytest's capsys sees the replaced sys.stdout
        self._text_stream = text_stream

    @property
    def text_stream(self) -> TextIO:
        return self._text_stream if self._text_stream is not None else sys.stdout

    def console_write(self, text: str):
        self.text_stream.write(text)

    def flush(self):
        self.text_stream.flush()
