"""
Logging utilities for csview
"""

import logging
from pathlib import Path
from typing import Optional, Union


def setup_logger(name: str = 'csview',
                level: Union[int, str] = logging.INFO,
                log_file: Optional[Path] = None,
                console_output: bool = True) -> logging.Logger:
    """
    Set up a logger with file and console handlers

    Args:
        name: Logger name
        level: Logging level (int or level name such as 'DEBUG')
        log_file: Path to log file (optional)
        console_output: Whether to output to console (stderr)

    Returns:
        Configured logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = 'csview') -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(name)


def set_log_level(level: int):
    """Set the log level for all csview loggers"""
    logging.getLogger('csview').setLevel(level)
    for handler in logging.getLogger('csview').handlers:
        handler.setLevel(level)
