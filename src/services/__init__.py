"""Services layer"""

from .shape_factory import ShapeFactory
from .transition_service import TransitionService, Fade, fade

__all__ = [
    "ShapeFactory",
    "TransitionService",
    "Fade",
    "fade",
]
