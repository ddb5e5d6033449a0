# canvas/canvas_interface.py
"""
ICanvasSurface Protocol
========================
Drawing surface abstraction for the animation controller.
Minimal contract any host surface (in-memory SVG DOM, browser bridge, ...) provides.
"""

from __future__ import annotations
from typing import List, Optional, Protocol, Union

AttributeValue = Union[int, float, str]


class ICanvasElement(Protocol):
    """
    Protocol for one child element of the canvas.

    - tag / namespace: element identity
    - set_attribute / get_attribute: geometry attributes (stored as strings)
    - set_style / get_style: inline style properties (fill, opacity, ...)
    """

    @property
    def tag(self) -> str:
        ...

    @property
    def namespace(self) -> str:
        ...

    def set_attribute(self, name: str, value: AttributeValue) -> None:
        ...

    def get_attribute(self, name: str) -> Optional[str]:
        ...

    def set_style(self, name: str, value: str) -> None:
        ...

    def get_style(self, name: str) -> Optional[str]:
        ...


class ICanvasSurface(Protocol):
    """
    Protocol defining the drawing surface the controller mutates.

    All implementations must provide:
    - width / height: logical canvas size
    - opacity: presentation opacity in [0, 1] (read/write)
    - children: current child elements, in paint order
    - create_element: namespace-qualified element creation (not attached)
    - append_child / remove_child / clear: child list mutation
    """

    @property
    def width(self) -> int:
        ...

    @property
    def height(self) -> int:
        ...

    @property
    def opacity(self) -> float:
        ...

    @opacity.setter
    def opacity(self, value: float) -> None:
        ...

    @property
    def children(self) -> List[ICanvasElement]:
        ...

    def create_element(self, namespace: str, tag: str) -> ICanvasElement:
        """Create a detached element; append_child() attaches it."""
        ...

    def append_child(self, element: ICanvasElement) -> None:
        ...

    def remove_child(self, element: ICanvasElement) -> None:
        ...

    def clear(self) -> None:
        """Remove all child elements."""
        ...
