"""
Models package - Data models for the mutating SVG canvas
"""

from .enums import PrimitiveType, FadeDirection, LogLevel, LogCategory
from .color import Color
from .shape import ShapeDescriptor
from .transition import FadeConfig, FADE_IN, FADE_OUT
from .config import AppConfig, CanvasConfig, AnimationConfig, LoggingConfig, SVG_NAMESPACE

__all__ = [
    'PrimitiveType',
    'FadeDirection',
    'LogLevel',
    'LogCategory',
    'Color',
    'ShapeDescriptor',
    'FadeConfig',
    'FADE_IN',
    'FADE_OUT',
    'AppConfig',
    'CanvasConfig',
    'AnimationConfig',
    'LoggingConfig',
    'SVG_NAMESPACE',
]
