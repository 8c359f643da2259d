"""
Core components: document model, configuration and exceptions
"""

from .document import Row, Document, release_document, open_document
from .config import (
    CsvDialect,
    ReaderConfig,
    load_config_from_env,
    DEFAULT_BUFFER_SIZE,
    DEFAULT_MAX_LINE_LENGTH
)
from .exceptions import (
    CsvViewError,
    StreamOpenError,
    StreamReadError,
    ConfigurationError
)

__all__ = [
    'Row',
    'Document',
    'release_document',
    'open_document',
    'CsvDialect',
    'ReaderConfig',
    'load_config_from_env',
    'DEFAULT_BUFFER_SIZE',
    'DEFAULT_MAX_LINE_LENGTH',
    'CsvViewError',
    'StreamOpenError',
    'StreamReadError',
    'ConfigurationError'
]
