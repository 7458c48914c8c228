"""
Utility Module for the Document AI Parser.

Provides the pieces shared by every other module:
    - Logging configuration
    - Exception hierarchy
    - Nested lookup and serialization helpers
"""

from .logger import setup_logger, get_logger
from .helpers import dig, to_serializable, ensure_directory, generate_timestamp

__all__ = [
    'setup_logger',
    'get_logger',
    'dig',
    'to_serializable',
    'ensure_directory',
    'generate_timestamp'
]
