"""
Transition Service

Opacity fades for the canvas surface.

- Fade: pure stepper (no timers), one opacity update per step()
- fade(): runs a Fade on a scheduler, one step every step_ms
- TransitionService: presets + tracking of in-flight fades so they can
  all be cancelled on teardown
"""

from typing import Callable, Optional, Set

from engine.scheduler import IScheduler, TimerHandle
from models.enums import FadeDirection, LogCategory
from models.transition import DEFAULT_FADE_STEP_MS, FADE_IN, FADE_OUT, FadeConfig
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.TRANSITION)

# Tolerance for the end-of-fade check (0.1 steps don't sum to exactly 0 or 1)
OPACITY_EPSILON = 1e-9


def clamp_opacity(value: float) -> float:
    return max(0.0, min(1.0, value))


class Fade:
    """
    Opacity stepper for one fade.

    Each step() adds `delta` to the running opacity and writes the
    clamped value to target.opacity. The fade is done once opacity has
    reached or crossed `end` in the direction of travel; the final write
    is snapped to `end`.

    Example:
        fade = Fade(canvas, FadeConfig(1.0, 0.0, 500, 50))
        while not fade.step():
            pass
        canvas.opacity   # 0.0
    """

    def __init__(self, target, config: FadeConfig):
        self.target = target
        self.config = config
        self.opacity = config.start
        self.delta = config.delta
        self.steps_taken = 0
        self._done = False

    @property
    def direction(self) -> FadeDirection:
        return self.config.direction

    def reached_end(self, opacity: float) -> bool:
        """Completion predicate over a raw opacity value"""
        end = self.config.end
        if self.delta > 0:
            return opacity >= end - OPACITY_EPSILON
        if self.delta < 0:
            return opacity <= end + OPACITY_EPSILON
        return True

    @property
    def done(self) -> bool:
        return self._done

    def step(self) -> bool:
        """
        Advance one step and write the new opacity.

        Returns:
            True when the fade has completed (on this or an earlier step)
        """
        if self._done:
            return True

        self.opacity += self.delta
        self.steps_taken += 1

        if self.reached_end(self.opacity):
            self.opacity = self.config.end
            self._done = True

        self.target.opacity = clamp_opacity(self.opacity)
        return self._done


def fade(
    scheduler: IScheduler,
    target,
    start: float,
    end: float,
    duration_ms: float,
    on_complete: Optional[Callable[[], None]] = None,
    step_ms: float = DEFAULT_FADE_STEP_MS,
) -> TimerHandle:
    """
    Animate target.opacity from start to end.

    One update every step_ms; delta = (end - start) / (duration_ms / step_ms).
    When the end is reached the step timer is cancelled and on_complete
    (if given) is called exactly once.

    Returns:
        Handle of the step timer. Cancelling it aborts the fade and
        suppresses on_complete.

    Raises:
        ValueError: opacity outside [0, 1] or non-positive timing
    """
    config = FadeConfig(start=start, end=end, duration_ms=duration_ms, step_ms=step_ms)
    stepper = Fade(target, config)
    handle: Optional[TimerHandle] = None

    def tick() -> None:
        if not stepper.step():
            return
        handle.cancel()
        log.debug(
            f"Fade {config.direction.name.lower()} complete",
            opacity=stepper.opacity,
            steps=stepper.steps_taken,
        )
        if on_complete is not None:
            on_complete()

    handle = scheduler.call_every(step_ms, tick, description=f"fade {start} → {end}")
    return handle


class TransitionService:
    """
    Fades with presets and tracking of in-flight fade timers.

    Every fade started through the service is tracked until it completes
    or is cancelled; cancel_all() aborts all of them (used on session
    teardown so no fade writes to a detached canvas).

    Example:
        service = TransitionService(scheduler)
        service.fade_out(canvas, on_complete=swap)
        ...
        service.cancel_all()
    """

    def __init__(self, scheduler: IScheduler, fade_out: FadeConfig = FADE_OUT, fade_in: FadeConfig = FADE_IN):
        self.scheduler = scheduler
        self.fade_out_config = fade_out
        self.fade_in_config = fade_in
        self._active: Set[TimerHandle] = set()

    def fade(self, target, config: FadeConfig, on_complete: Optional[Callable[[], None]] = None) -> TimerHandle:
        handle: Optional[TimerHandle] = None

        def finished() -> None:
            self._active.discard(handle)
            if on_complete is not None:
                on_complete()

        handle = fade(
            self.scheduler,
            target,
            config.start,
            config.end,
            config.duration_ms,
            on_complete=finished,
            step_ms=config.step_ms,
        )
        self._active.add(handle)
        return handle

    def fade_out(self, target, on_complete: Optional[Callable[[], None]] = None) -> TimerHandle:
        return self.fade(target, self.fade_out_config, on_complete)

    def fade_in(self, target, on_complete: Optional[Callable[[], None]] = None) -> TimerHandle:
        return self.fade(target, self.fade_in_config, on_complete)

    def active_count(self) -> int:
        return sum(1 for h in self._active if not h.cancelled)

    def is_active(self) -> bool:
        return self.active_count() > 0

    def cancel_all(self) -> int:
        """Cancel every in-flight fade. Returns the number cancelled."""
        cancelled = 0
        for handle in list(self._active):
            if not handle.cancelled:
                handle.cancel()
                cancelled += 1
        self._active.clear()
        if cancelled:
            log.debug(f"Cancelled {cancelled} in-flight fade(s)")
        return cancelled
