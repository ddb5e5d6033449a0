"""
Color model - RGB fill color for generated shapes

Holds a single RGB triple and renders it in the CSS form written
into an element's style (`rgb(r, g, b)`).
"""

from dataclasses import dataclass
from typing import Callable, Tuple

CHANNEL_MAX = 255


@dataclass(frozen=True)
class Color:
    """
    RGB color (each channel 0-255)

    Examples:
        color = Color.from_rgb(255, 128, 0)
        color.to_css()          # "rgb(255, 128, 0)"

        # Random color from an injected integer source
        color = Color.random(random_int)
    """

    r: int
    g: int
    b: int

    def __post_init__(self):
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"Channel {name} must be int, got {type(value).__name__}")
            if not 0 <= value <= CHANNEL_MAX:
                raise ValueError(f"Channel {name} out of range 0-{CHANNEL_MAX}: {value}")

    # === CONSTRUCTORS ===

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        return cls(r, g, b)

    @classmethod
    def random(cls, random_int: Callable[[int], int]) -> 'Color':
        """
        Create a color with each channel drawn independently

        Args:
            random_int: Uniform integer source, random_int(max) -> [0, max)

        Returns:
            Color with channels in [0, 256)
        """
        r = random_int(CHANNEL_MAX + 1)
        g = random_int(CHANNEL_MAX + 1)
        b = random_int(CHANNEL_MAX + 1)
        return cls(r, g, b)

    # === RENDERING ===

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_css(self) -> str:
        """CSS color string used as the element's fill style"""
        return f"rgb({self.r}, {self.g}, {self.b})"

    @staticmethod
    def black() -> 'Color':
        return Color.from_rgb(0, 0, 0)

    @staticmethod
    def white() -> 'Color':
        return Color.from_rgb(255, 255, 255)

    # === STRING REPRESENTATION ===

    def __str__(self) -> str:
        return f"Color(RGB={self.to_rgb()})"
