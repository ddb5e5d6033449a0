"""
Tests for SvgCanvas (in-memory SVG drawing surface).
"""

from xml.etree import ElementTree as ET

import pytest

from canvas.svg_canvas import SvgCanvas
from models.config import SVG_NAMESPACE


class TestSvgCanvasBasics:

    def test_defaults(self):
        canvas = SvgCanvas()

        assert canvas.width == 500
        assert canvas.height == 500
        assert canvas.opacity == 1.0
        assert canvas.children == []
        assert canvas.mutations == 0

    def test_opacity_written_to_style(self):
        canvas = SvgCanvas()
        canvas.opacity = 0.3

        assert canvas.opacity == pytest.approx(0.3)
        assert canvas.root.get_style("opacity") == "0.3"
        assert canvas.mutations == 1

    @pytest.mark.parametrize("value", [-0.01, 1.01])
    def test_opacity_out_of_range_rejected(self, value):
        canvas = SvgCanvas()
        with pytest.raises(ValueError):
            canvas.opacity = value


class TestChildren:

    def test_create_is_detached(self):
        canvas = SvgCanvas()
        element = canvas.create_element(SVG_NAMESPACE, "circle")

        assert element.tag == "circle"
        assert element.namespace == SVG_NAMESPACE
        assert canvas.children == []

    def test_append_and_clear(self):
        canvas = SvgCanvas()
        for _ in range(3):
            canvas.append_child(canvas.create_element(SVG_NAMESPACE, "rect"))

        assert len(canvas.children) == 3
        assert len(list(canvas.root.node)) == 3

        canvas.clear()

        assert canvas.children == []
        assert len(list(canvas.root.node)) == 0
        assert canvas.mutations == 6

    def test_attributes_stored_as_strings(self):
        canvas = SvgCanvas()
        element = canvas.create_element(SVG_NAMESPACE, "circle")
        element.set_attribute("cx", 12)
        element.set_style("fill", "rgb(1, 2, 3)")

        assert element.get_attribute("cx") == "12"
        assert element.attributes == {"cx": "12"}
        assert element.get_style("fill") == "rgb(1, 2, 3)"
        assert element.get_attribute("style") == "fill: rgb(1, 2, 3)"

    def test_children_list_is_a_copy(self):
        canvas = SvgCanvas()
        canvas.children.append(canvas.create_element(SVG_NAMESPACE, "line"))

        assert canvas.children == []


class TestSerialization:

    def test_to_svg_parses_back(self):
        canvas = SvgCanvas(width=200, height=100)
        circle = canvas.create_element(SVG_NAMESPACE, "circle")
        circle.set_attribute("r", 5)
        circle.set_style("fill", "rgb(10, 20, 30)")
        canvas.append_child(circle)
        canvas.opacity = 0.5

        root = ET.fromstring(canvas.to_svg())

        assert root.tag == f"{{{SVG_NAMESPACE}}}svg"
        assert root.get("width") == "200"
        assert root.get("viewBox") == "0 0 200 100"
        assert "opacity: 0.5" in root.get("style")

        children = list(root)
        assert [c.tag for c in children] == [f"{{{SVG_NAMESPACE}}}circle"]
        assert children[0].get("r") == "5"
        assert children[0].get("style") == "fill: rgb(10, 20, 30)"
