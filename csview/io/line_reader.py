"""
Buffered line reader

Presents a ByteStream as a sequence of text lines. Bytes are pulled from the
stream in fixed-size chunks; each call to next_line() consumes the buffer up
to the next newline, refilling it as needed.

Lines longer than max_len - 1 bytes are cut at the cap and the rest of the
line is discarded. This is a known limitation kept on purpose, the reader
never grows its line buffer.
"""

from enum import Enum
from typing import Iterator, Tuple
import logging

from ..core.config import DEFAULT_BUFFER_SIZE, DEFAULT_ENCODING, DEFAULT_MAX_LINE_LENGTH
from ..core.exceptions import StreamReadError
from .streams import ByteStream

logger = logging.getLogger(__name__)

NEWLINE = b'\n'
CARRIAGE_RETURN = b'\r'


class LineStatus(Enum):
    """Outcome of a next_line() call"""
    OK = "ok"
    EOF = "eof"
    ERROR = "error"


class BufferedLineReader:
    """Reads newline-terminated lines from a byte stream"""

    def __init__(self,
                 stream: ByteStream,
                 buffer_size: int = DEFAULT_BUFFER_SIZE,
                 encoding: str = DEFAULT_ENCODING):
        """
        Initialize the reader

        Args:
            stream: Open stream to read from; the caller keeps ownership
            buffer_size: Number of bytes requested per refill
            encoding: Encoding used to decode each line
        """
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._capacity = buffer_size
        self._buffer = b''
        self._valid = 0
        self._cursor = 0
        self.encoding = encoding
        self.last_status = LineStatus.OK
        self.lines_read = 0
        self.lines_truncated = 0

    def _refill(self) -> bool:
        """Replace the buffer with the next chunk; False at end of stream"""
        data = self._stream.read(self._capacity)
        self._buffer = data
        self._valid = len(data)
        self._cursor = 0
        return self._valid > 0

    def next_line(self, max_len: int = DEFAULT_MAX_LINE_LENGTH) -> Tuple[LineStatus, str]:
        """
        Read the next line

        Args:
            max_len: Line cap; at most max_len - 1 bytes are kept

        Returns:
            Tuple of (status, line). The line excludes the newline and every
            carriage return. On EOF or ERROR the line is empty.
        """
        if max_len < 1:
            raise ValueError(f"max_len must be at least 1, got {max_len}")

        cap = max_len - 1
        line = bytearray()
        consumed_any = False
        truncated = False

        while True:
            if self._cursor >= self._valid:
                try:
                    has_data = self._refill()
                except StreamReadError as e:
                    logger.debug(f"Read failed after {self.lines_read} lines: {e}")
                    self.last_status = LineStatus.ERROR
                    return LineStatus.ERROR, ''
                if not has_data:
                    if not consumed_any:
                        self.last_status = LineStatus.EOF
                        return LineStatus.EOF, ''
                    # Final line without a trailing newline
                    break

            newline_at = self._buffer.find(NEWLINE, self._cursor, self._valid)
            end = self._valid if newline_at == -1 else newline_at
            segment = self._buffer[self._cursor:end]
            self._cursor = end if newline_at == -1 else newline_at + 1
            consumed_any = True

            if segment:
                segment = segment.replace(CARRIAGE_RETURN, b'')
                room = cap - len(line)
                if len(segment) > room:
                    truncated = True
                    segment = segment[:room]
                line.extend(segment)

            if newline_at != -1:
                break

        self.lines_read += 1
        if truncated:
            self.lines_truncated += 1
            logger.debug(f"Line {self.lines_read} truncated to {cap} bytes")

        self.last_status = LineStatus.OK
        return LineStatus.OK, line.decode(self.encoding, errors='replace')

    def iter_lines(self, max_len: int = DEFAULT_MAX_LINE_LENGTH) -> Iterator[str]:
        """Yield lines until end of stream or a read error (see last_status)"""
        while True:
            status, line = self.next_line(max_len)
            if status is not LineStatus.OK:
                return
            yield line

    def __iter__(self) -> Iterator[str]:
        return self.iter_lines()
