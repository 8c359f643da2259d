"""
Custom exceptions for the csview parsing and rendering layers
"""


class CsvViewError(Exception):
    """Base exception for csview errors"""
    pass


class StreamOpenError(CsvViewError):
    """Exception when a source or destination cannot be opened"""
    pass


class StreamReadError(CsvViewError):
    """Exception when reading from an open byte stream fails"""
    pass


class ConfigurationError(CsvViewError):
    """Exception for invalid dialect or reader settings"""
    pass
