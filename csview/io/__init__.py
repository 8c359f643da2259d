"""
csview IO Module

Byte streams, the buffered line reader, the tokenizer, and CSV reading and
writing of Documents.
"""

from .streams import ByteStream, ConsoleStream, open_read, open_write
from .line_reader import BufferedLineReader, LineStatus
from .tokenizer import Tokenizer, tokenize_line
from .csv_reader import CsvReader, build_document, read_csv, parse_text
from .csv_writer import CsvWriter, write_csv, serialize_document
from .frames import document_to_dataframe, document_from_dataframe

__all__ = [
    'ByteStream',
    'ConsoleStream',
    'open_read',
    'open_write',
    'BufferedLineReader',
    'LineStatus',
    'Tokenizer',
    'tokenize_line',
    'CsvReader',
    'build_document',
    'read_csv',
    'parse_text',
    'CsvWriter',
    'write_csv',
    'serialize_document',
    'document_to_dataframe',
    'document_from_dataframe',
]
