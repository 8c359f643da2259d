"""
Configuration classes for the CSV dialect and the buffered reader
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional
import logging

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ','
DEFAULT_QUOTE_CHAR = '"'
DEFAULT_BUFFER_SIZE = 4096
DEFAULT_MAX_LINE_LENGTH = 1024
DEFAULT_ENCODING = 'utf-8'


@dataclass(frozen=True)
class CsvDialect:
    """Delimiter and quote marker used to split and join fields"""
    delimiter: str = DEFAULT_DELIMITER
    quote_char: str = DEFAULT_QUOTE_CHAR

    def __post_init__(self):
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ConfigurationError(
                f"delimiter must be a single character, got {self.delimiter!r}"
            )
        if not isinstance(self.quote_char, str) or len(self.quote_char) != 1:
            raise ConfigurationError(
                f"quote_char must be a single character, got {self.quote_char!r}"
            )
        if self.delimiter == self.quote_char:
            raise ConfigurationError("delimiter and quote_char must differ")
        if self.delimiter in ('\n', '\r') or self.quote_char in ('\n', '\r'):
            raise ConfigurationError("line terminators cannot be used as delimiter or quote_char")


@dataclass(frozen=True)
class ReaderConfig:
    """
    Settings for reading and writing documents

    Attributes:
        buffer_size: Capacity in bytes of the line reader's refill buffer
        max_line_length: Line cap; at most max_line_length - 1 bytes are kept per line
        encoding: Text encoding of the byte stream
        dialect: Delimiter and quote marker
    """
    buffer_size: int = DEFAULT_BUFFER_SIZE
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    encoding: str = DEFAULT_ENCODING
    dialect: CsvDialect = field(default_factory=CsvDialect)

    def __post_init__(self):
        if self.buffer_size < 1:
            raise ConfigurationError(f"buffer_size must be positive, got {self.buffer_size}")
        if self.max_line_length < 2:
            raise ConfigurationError(
                f"max_line_length must be at least 2, got {self.max_line_length}"
            )
        try:
            ''.encode(self.encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding {self.encoding!r}") from e

        # Lines are split on raw b'\n' and each line is encoded on its own
        if '\n'.encode(self.encoding) != b'\n' or '\r'.encode(self.encoding) != b'\r':
            raise ConfigurationError(
                f"Encoding {self.encoding!r} must encode line terminators as single ASCII bytes"
            )
        for name, char in (('delimiter', self.dialect.delimiter),
                           ('quote_char', self.dialect.quote_char)):
            try:
                encoded = char.encode(self.encoding)
            except UnicodeEncodeError as e:
                raise ConfigurationError(
                    f"{name} {char!r} cannot be encoded as {self.encoding!r}"
                ) from e
            if len(encoded) != 1:
                raise ConfigurationError(
                    f"{name} {char!r} must encode to a single byte in {self.encoding!r}"
                )

    def with_overrides(self, **overrides: Any) -> 'ReaderConfig':
        """Return a copy with the non-None overrides applied"""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self


def _parse_int(env_config: Dict[str, Any], key: str, default: int) -> int:
    raw = env_config.get(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from e


def load_config_from_env(env_config: Optional[Dict[str, Any]] = None) -> ReaderConfig:
    """
    Build a ReaderConfig from environment variables

    Args:
        env_config: Pre-loaded environment config (if not provided, loads from environment)

    Returns:
        ReaderConfig: Configuration with defaults for anything not set
    """
    if env_config is None:
        from ..utils.env_utils import get_env_config
        env_config = get_env_config()

    dialect = CsvDialect(
        delimiter=env_config.get('delimiter', DEFAULT_DELIMITER),
        quote_char=env_config.get('quote_char', DEFAULT_QUOTE_CHAR)
    )
    config = ReaderConfig(
        buffer_size=_parse_int(env_config, 'buffer_size', DEFAULT_BUFFER_SIZE),
        max_line_length=_parse_int(env_config, 'max_line_length', DEFAULT_MAX_LINE_LENGTH),
        encoding=env_config.get('encoding', DEFAULT_ENCODING),
        dialect=dialect
    )
    logger.debug(f"Loaded reader config: {config}")
    return config
