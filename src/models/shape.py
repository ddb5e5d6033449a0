"""
Shape descriptor

One fully specified random shape: primitive type, geometry attributes
and fill color. Created by ShapeFactory, consumed once by the
AnimationController to build a canvas element.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

from models.color import Color
from models.enums import PrimitiveType

AttributeValue = Union[int, str]


@dataclass(frozen=True)
class ShapeDescriptor:
    """
    Immutable description of a shape to draw.

    Attributes:
        primitive_type: PrimitiveType, or the raw tag name when the type is unsupported
        attributes: Geometry attributes (read-only mapping)
        fill_color: Fill color
    """
    primitive_type: Union[PrimitiveType, str]
    attributes: Mapping[str, AttributeValue] = field(default_factory=dict)
    fill_color: Color = field(default_factory=Color.black)

    def __post_init__(self):
        # Freeze attributes so the descriptor can't be mutated through the mapping
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def tag(self) -> str:
        """SVG tag name for element creation"""
        if isinstance(self.primitive_type, PrimitiveType):
            return self.primitive_type.value
        return str(self.primitive_type)

    @property
    def is_supported(self) -> bool:
        return isinstance(self.primitive_type, PrimitiveType)
