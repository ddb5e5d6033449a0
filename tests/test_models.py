"""
Tests for value models: Color, PrimitiveType, ShapeDescriptor, AnimationConfig.
"""

import pytest

from models.color import Color
from models.config import AnimationConfig, CanvasConfig
from models.enums import PrimitiveType
from models.shape import ShapeDescriptor


class TestColor:

    def test_css(self):
        assert Color.from_rgb(255, 128, 0).to_css() == "rgb(255, 128, 0)"
        assert Color.black().to_rgb() == (0, 0, 0)
        assert Color.white().to_rgb() == (255, 255, 255)

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0)])
    def test_out_of_range(self, channels):
        with pytest.raises(ValueError):
            Color(*channels)

    def test_non_int_channel(self):
        with pytest.raises(TypeError):
            Color(1.5, 0, 0)

    def test_random_draws_three_channels(self):
        draws = []

        def random_int(max_value):
            draws.append(max_value)
            return len(draws)

        assert Color.random(random_int) == Color(1, 2, 3)
        assert draws == [256, 256, 256]


class TestPrimitiveType:

    @pytest.mark.parametrize("tag", ["circle", "rect", "polygon"])
    def test_from_tag(self, tag):
        assert PrimitiveType.from_tag(tag).value == tag

    @pytest.mark.parametrize("tag", ["star", "Ellipse", "RECT", " circle "])
    def test_unknown_or_inexact_tag(self, tag):
        with pytest.raises(ValueError):
            PrimitiveType.from_tag(tag)


class TestShapeDescriptor:

    def test_tag_and_support(self):
        shape = ShapeDescriptor(PrimitiveType.LINE, {"x1": 1})
        odd = ShapeDescriptor("star")

        assert shape.tag == "line"
        assert shape.is_supported
        assert odd.tag == "star"
        assert not odd.is_supported
        assert odd.fill_color == Color.black()

    def test_attributes_read_only(self):
        source = {"r": 5}
        shape = ShapeDescriptor(PrimitiveType.CIRCLE, source)
        source["r"] = 6

        assert shape.attributes["r"] == 5
        with pytest.raises(TypeError):
            shape.attributes["r"] = 7


class TestConfigValidation:

    @pytest.mark.parametrize("kwargs", [
        {"shape_count": -1},
        {"cycle_interval_ms": 0},
        {"fade_duration_ms": 0},
        {"fade_step_ms": 0},
    ])
    def test_invalid_animation_config(self, kwargs):
        with pytest.raises(ValueError):
            AnimationConfig(**kwargs)

    def test_defaults(self):
        assert AnimationConfig().shape_count == 10
        assert CanvasConfig().width == 500
