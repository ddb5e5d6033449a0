from __future__ import annotations

from typing import Dict, List, Optional
from xml.etree import ElementTree as ET

from canvas.canvas_interface import AttributeValue, ICanvasSurface
from models.config import SVG_NAMESPACE
from models.enums import LogCategory
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.CANVAS)

ET.register_namespace("", SVG_NAMESPACE)


def _qualified(namespace: str, tag: str) -> str:
    return f"{{{namespace}}}{tag}" if namespace else tag


def _format_number(value: float) -> str:
    """Shortest stable text for opacity values (1.0 -> '1', 0.5 -> '0.5')"""
    return f"{value:.6f}".rstrip("0").rstrip(".") or "0"


class SvgElement:
    """ElementTree-backed SVG element with an inline style dict"""

    def __init__(self, namespace: str, tag: str):
        self._namespace = namespace
        self._tag = tag
        self.node = ET.Element(_qualified(namespace, tag))
        self._style: Dict[str, str] = {}

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def attributes(self) -> Dict[str, str]:
        """Geometry attributes (style excluded)"""
        return {k: v for k, v in self.node.attrib.items() if k != "style"}

    def set_attribute(self, name: str, value: AttributeValue) -> None:
        self.node.set(name, str(value))

    def get_attribute(self, name: str) -> Optional[str]:
        return self.node.get(name)

    def set_style(self, name: str, value: str) -> None:
        self._style[name] = str(value)
        self.node.set("style", "; ".join(f"{k}: {v}" for k, v in self._style.items()))

    def get_style(self, name: str) -> Optional[str]:
        return self._style.get(name)

    def __repr__(self):
        return f"SvgElement(<{self._tag}> {self.attributes}, style={self._style})"


class SvgCanvas(ICanvasSurface):
    """
    In-memory SVG drawing surface.

    Root <svg> element with width/height/viewBox; opacity is kept as an
    inline style on the root. Counts every mutation (opacity write,
    child append/remove) so callers can check the surface stays quiet
    after teardown.

    Example:
        canvas = SvgCanvas()
        circle = canvas.create_element(SVG_NAMESPACE, "circle")
        circle.set_attribute("r", 10)
        canvas.append_child(circle)
        canvas.to_svg()
    """

    def __init__(self, width: int = 500, height: int = 500, namespace: str = SVG_NAMESPACE):
        self._width = width
        self._height = height
        self.root = SvgElement(namespace, "svg")
        self.root.set_attribute("width", width)
        self.root.set_attribute("height", height)
        self.root.set_attribute("viewBox", f"0 0 {width} {height}")
        self._children: List[SvgElement] = []
        self._opacity = 1.0
        self.root.set_style("opacity", _format_number(self._opacity))
        self.mutations = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def opacity(self) -> float:
        return self._opacity

    @opacity.setter
    def opacity(self, value: float) -> None:
        value = float(value)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Opacity out of range [0, 1]: {value}")
        self._opacity = value
        self.root.set_style("opacity", _format_number(value))
        self.mutations += 1

    @property
    def children(self) -> List[SvgElement]:
        return list(self._children)

    def create_element(self, namespace: str, tag: str) -> SvgElement:
        return SvgElement(namespace, tag)

    def append_child(self, element: SvgElement) -> None:
        self._children.append(element)
        self.root.node.append(element.node)
        self.mutations += 1

    def remove_child(self, element: SvgElement) -> None:
        self._children.remove(element)
        self.root.node.remove(element.node)
        self.mutations += 1

    def clear(self) -> None:
        while self._children:
            self.remove_child(self._children[0])

    def to_svg(self) -> str:
        """Serialize the current surface as SVG markup"""
        return ET.tostring(self.root.node, encoding="unicode")

    def __repr__(self):
        return f"SvgCanvas({self._width}x{self._height}, opacity={self._opacity}, children={len(self._children)})"
