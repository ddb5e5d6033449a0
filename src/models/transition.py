"""
Transition Models

Defines fade configurations for canvas opacity changes.
Used by the update cycle for the fade-out / fade-in around a content swap.
"""

from typing import Optional

from models.enums import FadeDirection

DEFAULT_FADE_DURATION_MS = 500
DEFAULT_FADE_STEP_MS = 50


class FadeConfig:
    """
    Configuration for a single opacity fade

    The fade moves opacity from `start` to `end` in fixed steps,
    one step every `step_ms`, for `duration_ms / step_ms` steps.

    Attributes:
        start: Starting opacity (0.0-1.0)
        end: Target opacity (0.0-1.0)
        duration_ms: Total fade duration in milliseconds
        step_ms: Time between opacity updates in milliseconds

    Examples:
        # Default fade-out: 1.0 → 0.0 in 10 steps of 50ms
        fade_out = FadeConfig(start=1.0, end=0.0)

        # Slow fade-in
        slow_in = FadeConfig(start=0.0, end=1.0, duration_ms=2000, step_ms=50)
    """

    def __init__(
        self,
        start: float = 1.0,
        end: float = 0.0,
        duration_ms: float = DEFAULT_FADE_DURATION_MS,
        step_ms: float = DEFAULT_FADE_STEP_MS,
    ):
        if not 0.0 <= start <= 1.0:
            raise ValueError(f"start opacity out of range [0, 1]: {start}")
        if not 0.0 <= end <= 1.0:
            raise ValueError(f"end opacity out of range [0, 1]: {end}")
        if duration_ms <= 0:
            raise ValueError(f"duration_ms must be positive: {duration_ms}")
        if step_ms <= 0:
            raise ValueError(f"step_ms must be positive: {step_ms}")

        self.start = float(start)
        self.end = float(end)
        self.duration_ms = duration_ms
        self.step_ms = step_ms

    @property
    def steps(self) -> float:
        """Nominal number of updates (duration / step)"""
        return self.duration_ms / self.step_ms

    @property
    def delta(self) -> float:
        """Per-step opacity change"""
        return (self.end - self.start) / self.steps

    @property
    def direction(self) -> FadeDirection:
        if self.end > self.start:
            return FadeDirection.IN
        if self.end < self.start:
            return FadeDirection.OUT
        return FadeDirection.NONE

    def reversed(self) -> "FadeConfig":
        """Same timing, opposite direction"""
        return FadeConfig(self.end, self.start, self.duration_ms, self.step_ms)

    def with_timing(self, duration_ms: Optional[float] = None, step_ms: Optional[float] = None) -> "FadeConfig":
        return FadeConfig(
            self.start,
            self.end,
            duration_ms if duration_ms is not None else self.duration_ms,
            step_ms if step_ms is not None else self.step_ms,
        )

    def __repr__(self):
        return f"FadeConfig({self.start} → {self.end}, {self.duration_ms}ms, step {self.step_ms}ms)"


# === Presets ===

FADE_OUT = FadeConfig(start=1.0, end=0.0)
FADE_IN = FadeConfig(start=0.0, end=1.0)
