"""
csview: in-memory CSV loading, writing and table display

Reads delimiter-separated text line by line through a buffered reader, splits
each line into fields (a field opened with '"' runs to the next '"'), and keeps
the result as a Document of rows with an optional header.

Usage:
    from csview import read_csv, write_csv, show, info, release_document

    doc = read_csv('data.csv', has_header=True)
    if doc is not None:
        show(doc)
        info(doc)
        write_csv(doc, 'copy.csv')
    release_document(doc)

    # Or let a with-block release the document
    from csview import open_document

    with open_document('data.csv', has_header=True) as doc:
        show(doc)
"""

from .core import (
    Row,
    Document,
    release_document,
    open_document,
    CsvDialect,
    ReaderConfig,
    load_config_from_env,
    CsvViewError,
    StreamOpenError,
    StreamReadError,
    ConfigurationError
)

from .io import (
    ByteStream,
    ConsoleStream,
    open_read,
    open_write,
    BufferedLineReader,
    LineStatus,
    Tokenizer,
    tokenize_line,
    CsvReader,
    build_document,
    read_csv,
    parse_text,
    CsvWriter,
    write_csv,
    serialize_document,
    document_to_dataframe,
    document_from_dataframe
)

from .render import TableRenderer, compute_column_widths, render_table, render_info, show, info
from .cli import main as cli_main

__version__ = '1.4.0'

__all__ = [
    # Document model
    'Row',
    'Document',
    'release_document',
    'open_document',

    # Configuration
    'CsvDialect',
    'ReaderConfig',
    'load_config_from_env',

    # Streams and parsing
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

    # Writing
    'CsvWriter',
    'write_csv',
    'serialize_document',

    # pandas interop
    'document_to_dataframe',
    'document_from_dataframe',

    # Rendering
    'TableRenderer',
    'compute_column_widths',
    'render_table',
    'render_info',
    'show',
    'info',

    # CLI
    'cli_main',

    # Exceptions
    'CsvViewError',
    'StreamOpenError',
    'StreamReadError',
    'ConfigurationError'
]
