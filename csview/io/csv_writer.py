"""
CSV Writer

Serializes Documents back to delimiter-separated text:
- Header line first, when the document has one
- Every row with its own field count (no padding or clipping)
- No trailing delimiter, '\n' after every line
- Fields are written verbatim; nothing is re-quoted
"""

from pathlib import Path
from typing import Iterator, Optional, Sequence, Union
import logging

from ..core.config import CsvDialect, ReaderConfig
from ..core.document import Document
from ..core.exceptions import StreamOpenError
from .streams import ByteStream, open_write

logger = logging.getLogger(__name__)

LINE_TERMINATOR = '\n'


def _format_line(fields: Sequence[str], delimiter: str) -> str:
    return delimiter.join(fields) + LINE_TERMINATOR


def iter_document_lines(doc: Document, dialect: Optional[CsvDialect] = None) -> Iterator[str]:
    """Yield each output line of the document, terminator included"""
    delimiter = (dialect or CsvDialect()).delimiter
    if doc.header is not None:
        yield _format_line(doc.header, delimiter)
    for row in doc.rows:
        yield _format_line(row.fields, delimiter)


def serialize_document(doc: Document, dialect: Optional[CsvDialect] = None) -> str:
    """Return the document as CSV text"""
    return ''.join(iter_document_lines(doc, dialect))


class CsvWriter:
    """Writes Documents to CSV files"""

    def __init__(self, config: Optional[ReaderConfig] = None):
        """
        Initialize CSV writer

        Args:
            config: Settings providing the dialect and encoding
        """
        self.config = config or ReaderConfig()

    def write_stream(self, doc: Document, stream: ByteStream) -> bool:
        """
        Write a document to an open stream

        Stops at the first failed write; lines already written stay written.

        Returns:
            True if every line was written
        """
        lines_written = 0
        for line in iter_document_lines(doc, self.config.dialect):
            try:
                data = line.encode(self.config.encoding)
            except UnicodeEncodeError as e:
                logger.error(
                    f"Cannot encode line {lines_written + 1} for {stream.name} "
                    f"as {self.config.encoding}: {e}"
                )
                return False
            if not stream.write(data):
                logger.error(f"Write to {stream.name} failed after {lines_written} lines")
                return False
            lines_written += 1

        logger.debug(f"Wrote {lines_written} lines to {stream.name}")
        return True

    def write_csv(self, doc: Document, file_path: Union[str, Path]) -> bool:
        """
        Write a document to a file, creating or truncating it

        Args:
            doc: Document to write
            file_path: Output file path

        Returns:
            True on success, False if the file could not be opened or written
        """
        try:
            stream = open_write(file_path)
        except StreamOpenError as e:
            logger.error(f"Error opening file for writing: {e}")
            return False

        try:
            with stream:
                success = self.write_stream(doc, stream)
        except OSError as e:
            # Buffered bytes are flushed on close
            logger.error(f"Error closing {file_path}: {e}")
            return False

        if success:
            logger.info(f"Written {doc.num_rows} rows to {file_path}")
        return success


def write_csv(doc: Document,
              file_path: Union[str, Path],
              config: Optional[ReaderConfig] = None) -> bool:
    """
    Convenience function to write a document to a CSV file

    Args:
        doc: Document to write
        file_path: Output file path
        config: Optional settings

    Returns:
        True on success, False on failure
    """
    return CsvWriter(config).write_csv(doc, file_path)
