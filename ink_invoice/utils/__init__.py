"""
Utility Module for the Ink Invoice Parser.

This module provides common utilities used across all other modules:
    - Logging configuration
    - Error taxonomy
    - File helpers
"""

from .logger import setup_logger, get_logger
from .helpers import ensure_directory, generate_timestamp

__all__ = [
    'setup_logger',
    'get_logger',
    'ensure_directory',
    'generate_timestamp',
]
