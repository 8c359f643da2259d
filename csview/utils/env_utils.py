"""
Environment variable utilities for csview
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

# Environment variable -> config key
ENV_VARIABLES = {
    'CSVIEW_BUFFER_SIZE': 'buffer_size',
    'CSVIEW_MAX_LINE_LENGTH': 'max_line_length',
    'CSVIEW_ENCODING': 'encoding',
    'CSVIEW_DELIMITER': 'delimiter',
    'CSVIEW_QUOTE_CHAR': 'quote_char',
    'CSVIEW_LOG_LEVEL': 'log_level',
}


def get_env_file_locations() -> list[Path]:
    """
    Get list of locations where .env files are searched

    Returns:
        list[Path]: List of search paths
    """
    current_dir = Path.cwd()
    project_root = Path(__file__).parent.parent.parent
    home_dir = Path.home()

    return [
        current_dir / '.env',
        project_root / '.env',
        home_dir / '.env',
        home_dir / '.config' / 'csview' / '.env'
    ]


def load_env_file(env_file: Optional[Path] = None) -> bool:
    """
    Load environment variables from .env file

    Args:
        env_file: Optional path to .env file. If not provided, searches the
                 locations from get_env_file_locations()

    Returns:
        bool: True if .env file was found and loaded, False otherwise
    """
    search_paths = [Path(env_file)] if env_file else get_env_file_locations()

    for path in search_paths:
        if path.exists():
            logger.debug(f"Loading .env file from: {path}")
            load_dotenv(path)
            return True

    logger.debug(f"No .env file found in search paths: {[str(p) for p in search_paths]}")
    return False


def get_env_config(env_file: Optional[Path] = None) -> dict:
    """
    Get all csview-related environment variables

    Args:
        env_file: Optional path to .env file to load first

    Returns:
        dict: Configuration dictionary keyed by config name
    """
    # Try to load .env file first
    load_env_file(env_file)

    config = {}
    for env_name, key in ENV_VARIABLES.items():
        value = os.getenv(env_name)
        if value:
            config[key] = value

    return config


def get_log_level(env_file: Optional[Path] = None) -> Optional[str]:
    """
    Get log level name from environment variables

    Args:
        env_file: Optional path to .env file to load first

    Returns:
        str: Log level name (e.g. 'DEBUG') or None if not set
    """
    load_env_file(env_file)
    level = os.getenv('CSVIEW_LOG_LEVEL')
    return level.upper() if level else None
