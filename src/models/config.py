"""
Configuration models

Typed views over the sections of config.yaml (canvas, animation, logging).
Missing keys fall back to the dataclass defaults.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Type, TypeVar

from models.enums import LogLevel

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

T = TypeVar("T")


def _from_section(cls: Type[T], data: Dict[str, Any]) -> T:
    """Build a config dataclass from a YAML section, ignoring unknown keys"""
    known = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in (data or {}).items() if k in known})


@dataclass
class CanvasConfig:
    width: int = 500
    height: int = 500
    namespace: str = SVG_NAMESPACE


@dataclass
class AnimationConfig:
    """
    Update cycle timing and content

    primitive_type is kept as the raw tag name; unsupported names are
    allowed and produce attribute-less shapes at generation time.
    """
    primitive_type: str = "circle"
    shape_count: int = 10
    cycle_interval_ms: float = 3000
    fade_duration_ms: float = 500
    fade_step_ms: float = 50

    def __post_init__(self):
        if self.shape_count < 0:
            raise ValueError(f"shape_count must be >= 0: {self.shape_count}")
        if self.cycle_interval_ms <= 0:
            raise ValueError(f"cycle_interval_ms must be positive: {self.cycle_interval_ms}")
        if self.fade_duration_ms <= 0 or self.fade_step_ms <= 0:
            raise ValueError("fade_duration_ms and fade_step_ms must be positive")


@dataclass
class LoggingConfig:
    level: str = "INFO"
    colors: bool = True

    def __post_init__(self):
        if str(self.level).upper() not in LogLevel.__members__:
            raise ValueError(f"Unknown log level: {self.level}")

    @property
    def log_level(self) -> LogLevel:
        try:
            return LogLevel[self.level.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {self.level}")


@dataclass
class AppConfig:
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        data = data or {}
        return cls(
            canvas=_from_section(CanvasConfig, data.get("canvas")),
            animation=_from_section(AnimationConfig, data.get("animation")),
            logging=_from_section(LoggingConfig, data.get("logging")),
        )
