"""
CSV Reader

Builds Documents from byte streams: lines come from the buffered line reader,
fields from the tokenizer. Blank lines are skipped, ragged rows are kept.
"""

import io
import logging
from pathlib import Path
from typing import Optional, Union

from ..core.config import ReaderConfig
from ..core.document import Document, release_document
from ..core.exceptions import StreamOpenError
from .line_reader import BufferedLineReader, LineStatus
from .streams import ByteStream, open_read
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class CsvReader:
    """Reads CSV files into Documents"""

    def __init__(self, config: Optional[ReaderConfig] = None):
        """
        Initialize CSV reader

        Args:
            config: Reader settings (defaults apply if not provided)
        """
        self.config = config or ReaderConfig()
        self.tokenizer = Tokenizer(self.config.dialect)

    def read_stream(self, stream: ByteStream, has_header: bool) -> Document:
        """
        Build a Document from an open stream

        If has_header is set, exactly one line is consumed as the header, even
        when it is empty. A read error ends the body early; rows parsed so far
        are kept.

        Args:
            stream: Open stream positioned at the start of the data
            has_header: Whether the first line is a header

        Returns:
            Document owning every row it parsed
        """
        reader = BufferedLineReader(
            stream,
            buffer_size=self.config.buffer_size,
            encoding=self.config.encoding
        )
        max_len = self.config.max_line_length
        doc = Document()

        try:
            if has_header:
                status, line = reader.next_line(max_len)
                if status is LineStatus.OK:
                    doc.set_header(self.tokenizer.split_fields(line))
                elif status is LineStatus.ERROR:
                    logger.warning(f"Read error on header line of {stream.name}")
                    return doc

            skipped = 0
            while True:
                status, line = reader.next_line(max_len)
                if status is LineStatus.EOF:
                    break
                if status is LineStatus.ERROR:
                    logger.warning(
                        f"Read error in {stream.name} after {doc.num_rows} rows; "
                        f"returning partial document"
                    )
                    break
                if not line:
                    skipped += 1
                    continue
                doc.append_row(self.tokenizer.tokenize(line))
        except MemoryError:
            release_document(doc)
            raise

        logger.debug(
            f"Parsed {doc.num_rows} rows, {doc.num_cols} columns from {stream.name} "
            f"({skipped} blank lines skipped, {reader.lines_truncated} lines truncated)"
        )
        return doc

    def read_csv(self, file_path: Union[str, Path], has_header: bool) -> Optional[Document]:
        """
        Read a CSV file

        Args:
            file_path: Path to CSV file
            has_header: Whether the first line is a header

        Returns:
            Document, or None if the file could not be opened or memory ran out
        """
        try:
            stream = open_read(file_path)
        except StreamOpenError as e:
            logger.error(f"Error opening file: {e}")
            return None

        with stream:
            try:
                doc = self.read_stream(stream, has_header)
            except MemoryError:
                logger.error(f"Out of memory while reading {file_path}")
                return None

        logger.info(f"Read {doc.num_rows} rows from {file_path}")
        return doc


def build_document(stream: ByteStream,
                   has_header: bool,
                   config: Optional[ReaderConfig] = None) -> Document:
    """Build a Document from an open stream (see CsvReader.read_stream)"""
    return CsvReader(config).read_stream(stream, has_header)


def read_csv(file_path: Union[str, Path],
             has_header: bool,
             config: Optional[ReaderConfig] = None) -> Optional[Document]:
    """
    Convenience function to read a CSV file

    Args:
        file_path: Path to CSV file
        has_header: Whether the first line is a header
        config: Optional reader settings

    Returns:
        Document, or None if the file could not be opened or memory ran out
    """
    return CsvReader(config).read_csv(file_path, has_header)


def parse_text(text: str,
               has_header: bool,
               config: Optional[ReaderConfig] = None) -> Document:
    """Parse CSV text already held in memory"""
    reader = CsvReader(config)
    data = text.encode(reader.config.encoding)
    with ByteStream.from_fileobj(io.BytesIO(data), name='<text>') as stream:
        return reader.read_stream(stream, has_header)
