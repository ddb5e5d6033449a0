"""
Tests for ConfigManager: include system, monolithic config, fallback to
factory defaults, and mapping onto AppConfig.
"""

import pytest
import yaml

from managers.config_manager import ConfigManager
from models.config import SVG_NAMESPACE, AnimationConfig, AppConfig, LoggingConfig
from models.enums import LogLevel


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


@pytest.fixture
def defaults_file(tmp_path):
    path = tmp_path / "factory_defaults.yaml"
    write_yaml(path, {"animation": {"primitive_type": "rect", "shape_count": 3}})
    return path


def test_bundled_config_loads():
    app = ConfigManager().load()

    assert app.canvas.width == 500
    assert app.canvas.height == 500
    assert app.canvas.namespace == SVG_NAMESPACE
    assert app.animation.primitive_type == "circle"
    assert app.animation.shape_count == 10
    assert app.animation.cycle_interval_ms == 3000
    assert app.animation.fade_duration_ms == 500
    assert app.animation.fade_step_ms == 50


def test_monolithic_config(tmp_path, defaults_file):
    config_file = tmp_path / "config.yaml"
    write_yaml(config_file, {
        "canvas": {"width": 300},
        "animation": {"primitive_type": "polygon", "cycle_interval_ms": 1500},
        "logging": {"level": "debug", "colors": False},
    })

    app = ConfigManager(config_file, defaults_file).load()

    assert app.canvas.width == 300
    assert app.canvas.height == 500
    assert app.animation.primitive_type == "polygon"
    assert app.animation.cycle_interval_ms == 1500
    assert app.animation.shape_count == 10
    assert app.logging.log_level is LogLevel.DEBUG
    assert app.logging.colors is False


def test_include_files_merged(tmp_path, defaults_file):
    write_yaml(tmp_path / "canvas.yaml", {"canvas": {"height": 250}})
    write_yaml(tmp_path / "animation.yaml", {"animation": {"primitive_type": "line"}})
    config_file = tmp_path / "config.yaml"
    write_yaml(config_file, {"include": ["canvas.yaml", "animation.yaml"]})

    manager = ConfigManager(config_file, defaults_file)
    app = manager.load()

    assert set(manager.data) == {"canvas", "animation"}
    assert app.canvas.height == 250
    assert app.animation.primitive_type == "line"


def test_missing_config_falls_back_to_defaults(tmp_path, defaults_file, captured_logs):
    app = ConfigManager(tmp_path / "missing.yaml", defaults_file).load()

    assert app.animation.primitive_type == "rect"
    assert app.animation.shape_count == 3
    assert any(r["message"] == "Falling back to factory defaults" for r in captured_logs)


def test_missing_include_falls_back(tmp_path, defaults_file):
    config_file = tmp_path / "config.yaml"
    write_yaml(config_file, {"include": ["nope.yaml"]})

    app = ConfigManager(config_file, defaults_file).load()

    assert app.animation.primitive_type == "rect"


def test_invalid_values_fall_back(tmp_path, defaults_file):
    config_file = tmp_path / "config.yaml"
    write_yaml(config_file, {"animation": {"cycle_interval_ms": 0}})

    app = ConfigManager(config_file, defaults_file).load()

    assert app.animation.shape_count == 3


def test_unknown_log_level_falls_back(tmp_path, defaults_file, captured_logs):
    config_file = tmp_path / "config.yaml"
    write_yaml(config_file, {"logging": {"level": "LOUD"}})

    app = ConfigManager(config_file, defaults_file).load()

    assert app.animation.primitive_type == "rect"
    assert app.logging.log_level is LogLevel.INFO
    assert any(r["message"] == "Falling back to factory defaults" for r in captured_logs)


def test_unknown_keys_ignored():
    app = AppConfig.from_dict({"animation": {"shape_count": 5, "speed": 9}, "extra": {}})

    assert app.animation == AnimationConfig(shape_count=5)


def test_unknown_log_level_rejected_on_construction():
    with pytest.raises(ValueError):
        LoggingConfig(level="loud")
