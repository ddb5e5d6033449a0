"""
Utility functions for the mutating SVG canvas
"""

from .logger import get_logger, get_category_logger, configure_logger, LogLevel, LogCategory
from .random_source import RandomInt, default_random_int

__all__ = [
    'get_logger',
    'get_category_logger',
    'configure_logger',
    'LogLevel',
    'LogCategory',
    'RandomInt',
    'default_random_int',
]
