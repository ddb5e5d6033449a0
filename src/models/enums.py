"""
Enums for the mutating SVG canvas
"""

from enum import Enum, auto


class PrimitiveType(Enum):
    """
    Supported SVG primitive kinds

    The value is the SVG tag name used when creating the element.
    """
    CIRCLE = "circle"
    RECT = "rect"
    ELLIPSE = "ellipse"
    LINE = "line"
    POLYLINE = "polyline"
    POLYGON = "polygon"

    @classmethod
    def from_tag(cls, tag: str) -> "PrimitiveType":
        """Resolve an exact, case-sensitive tag name to a PrimitiveType. Raises ValueError if unknown."""
        return cls(tag)


class FadeDirection(Enum):
    """Direction of travel of a single fade"""
    IN = auto()      # Opacity rising
    OUT = auto()     # Opacity falling
    NONE = auto()    # start == end, completes on first tick


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    ANIMATION = auto()   # Session start/stop, update cycles
    TRANSITION = auto()  # Opacity fades
    SHAPE = auto()       # Shape generation
    CANVAS = auto()      # Canvas surface mutations
    SYSTEM = auto()      # Startup, shutdown, errors

    SHUTDOWN = auto()
    TASK = auto()
