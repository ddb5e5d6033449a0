"""
Shape Factory

Produces random shape descriptors for the six SVG primitives.
Geometry stays inside a 500x500 canvas; shape sizes are drawn below 50.
"""

from typing import Dict, Optional, Union

from models.color import Color
from models.enums import LogCategory, PrimitiveType
from models.shape import AttributeValue, ShapeDescriptor
from utils.logger import get_category_logger
from utils.random_source import RandomInt, default_random_int

log = get_category_logger(LogCategory.SHAPE)

BASE_VALUE = 500  # Canvas extent (coordinates drawn in [0, BASE_VALUE))
BASE_SIZE = 50    # Upper bound for radii / widths / heights


class ShapeFactory:
    """
    Random shape generator

    Attribute schemas per primitive:
    - circle:   cx, cy, r
    - rect:     x, y, width, height   (x, y < 450 so the rect stays on canvas)
    - ellipse:  cx, cy, rx, ry        (ry < 25)
    - line:     x1, y1, x2, y2
    - polyline/polygon: points ("x1,y1 x2,y2 x3,y3")

    Tag names match exactly ("Circle" is unsupported).

    Example:
        factory = ShapeFactory()
        shape = factory.create_shape(PrimitiveType.CIRCLE)
        shape.attributes   # {'cx': 131, 'cy': 402, 'r': 17}
        shape.fill_color   # Color(RGB=(12, 200, 77))
    """

    def __init__(self, random_int: Optional[RandomInt] = None):
        """
        Args:
            random_int: Uniform integer source, random_int(max) -> [0, max)
        """
        self.random_int: RandomInt = random_int or default_random_int

    def _resolve(self, primitive_type: Union[PrimitiveType, str]) -> Union[PrimitiveType, str]:
        """Map a tag name to PrimitiveType, leaving unknown names as strings"""
        if isinstance(primitive_type, PrimitiveType):
            return primitive_type
        try:
            return PrimitiveType.from_tag(str(primitive_type))
        except ValueError:
            return primitive_type

    def _points(self, count: int = 3) -> str:
        pairs = []
        for _ in range(count):
            x = self.random_int(BASE_VALUE)
            y = self.random_int(BASE_VALUE)
            pairs.append(f"{x},{y}")
        return " ".join(pairs)

    def generate_attributes(self, primitive_type: Union[PrimitiveType, str]) -> Dict[str, AttributeValue]:
        """
        Generate random geometry attributes for one shape.

        Unsupported types log an error and return an empty dict.
        """
        kind = self._resolve(primitive_type)
        rnd = self.random_int

        if kind is PrimitiveType.CIRCLE:
            return {"cx": rnd(BASE_VALUE), "cy": rnd(BASE_VALUE), "r": rnd(BASE_SIZE)}

        if kind is PrimitiveType.RECT:
            return {
                "x": rnd(BASE_VALUE - BASE_SIZE),
                "y": rnd(BASE_VALUE - BASE_SIZE),
                "width": rnd(BASE_SIZE),
                "height": rnd(BASE_SIZE),
            }

        if kind is PrimitiveType.ELLIPSE:
            return {
                "cx": rnd(BASE_VALUE),
                "cy": rnd(BASE_VALUE),
                "rx": rnd(BASE_SIZE),
                "ry": rnd(BASE_SIZE // 2),
            }

        if kind is PrimitiveType.LINE:
            return {
                "x1": rnd(BASE_VALUE),
                "y1": rnd(BASE_VALUE),
                "x2": rnd(BASE_VALUE),
                "y2": rnd(BASE_VALUE),
            }

        if kind in (PrimitiveType.POLYLINE, PrimitiveType.POLYGON):
            return {"points": self._points()}

        log.error("Unsupported tag name", tag=primitive_type)
        return {}

    def create_shape(self, primitive_type: Union[PrimitiveType, str]) -> ShapeDescriptor:
        """Generate geometry first, then a random fill color"""
        attributes = self.generate_attributes(primitive_type)
        fill_color = Color.random(self.random_int)
        return ShapeDescriptor(
            primitive_type=self._resolve(primitive_type),
            attributes=attributes,
            fill_color=fill_color,
        )
