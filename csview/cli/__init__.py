"""
Command-line interface for csview
"""

from .main import main

__all__ = ['main']
