"""
Canvas Layer

Drawing surfaces the animation controller renders into:

- ICanvasSurface / ICanvasElement protocols
- SvgCanvas: in-memory SVG DOM on xml.etree.ElementTree
"""
from .canvas_interface import ICanvasSurface, ICanvasElement
from .svg_canvas import SvgCanvas, SvgElement

__all__ = [
    "ICanvasSurface",
    "ICanvasElement",
    "SvgCanvas",
    "SvgElement",
]
