"""
Utility modules for csview
"""

from .env_utils import (
    load_env_file,
    get_env_config,
    get_env_file_locations,
    get_log_level
)
from .logging_utils import setup_logger, get_logger, set_log_level

__all__ = [
    'load_env_file',
    'get_env_config',
    'get_env_file_locations',
    'get_log_level',
    'setup_logger',
    'get_logger',
    'set_log_level'
]
