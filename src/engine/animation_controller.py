"""
Animation Controller

Runs the update cycle on a mounted canvas:

    fade out (1 → 0) → clear + repopulate with fresh shapes → fade in (0 → 1)

The cycle runs once on start() and then every cycle_interval_ms until
stop(). The repeat timer is not synchronized with fade completion: if a
fade-out + swap takes longer than the interval, the next cycle starts
while the previous fade is still running and both write the canvas
opacity. This is a known limitation and is left as is.
"""

from typing import List, Optional, Union

from canvas.canvas_interface import ICanvasElement, ICanvasSurface
from engine.scheduler import IScheduler, TimerHandle
from models.config import SVG_NAMESPACE, AnimationConfig
from models.enums import LogCategory, PrimitiveType
from models.shape import ShapeDescriptor
from models.transition import FADE_IN, FADE_OUT
from services.shape_factory import ShapeFactory
from services.transition_service import TransitionService
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)


class AnimationSession:
    """
    State of one mounted canvas.

    Holds a non-owning canvas reference, the repeating cycle timer and
    the TransitionService owning its in-flight fades. Valid between
    start() and stop().
    """

    def __init__(
        self,
        canvas: ICanvasSurface,
        namespace: str,
        primitive_type: Union[PrimitiveType, str],
        transitions: TransitionService,
    ):
        self.canvas = canvas
        self.namespace = namespace
        self.primitive_type = primitive_type
        self.transitions = transitions

        self.cycle_timer: Optional[TimerHandle] = None

        self.cycles_started = 0
        self.swaps_completed = 0
        self.active = True

    @property
    def tag(self) -> str:
        if isinstance(self.primitive_type, PrimitiveType):
            return self.primitive_type.value
        return str(self.primitive_type)

    def __repr__(self):
        return (
            f"AnimationSession(<{self.tag}>, active={self.active}, "
            f"cycles={self.cycles_started}, swaps={self.swaps_completed})"
        )


class AnimationController:
    """
    Owns the timed regenerate loop for canvas sessions.

    Example:
        controller = AnimationController(AsyncioScheduler())
        session = controller.start(canvas, SVG_NAMESPACE, PrimitiveType.CIRCLE)
        ...
        controller.stop(session)
    """

    def __init__(
        self,
        scheduler: IScheduler,
        shape_factory: Optional[ShapeFactory] = None,
        config: Optional[AnimationConfig] = None,
    ):
        self.scheduler = scheduler
        self.shape_factory = shape_factory or ShapeFactory()
        self.config = config or AnimationConfig()
        self.sessions: List[AnimationSession] = []

    # ============================================================
    # Lifecycle
    # ============================================================

    def start(
        self,
        canvas: Optional[ICanvasSurface],
        namespace: str = SVG_NAMESPACE,
        primitive_type: Union[PrimitiveType, str, None] = None,
    ) -> Optional[AnimationSession]:
        """
        Begin the update cycle on a mounted canvas.

        Runs one cycle immediately, then schedules one every
        cycle_interval_ms. Returns None (and schedules nothing) when no
        canvas is mounted yet.
        """
        if canvas is None:
            log.warn("No canvas mounted, animation not started")
            return None

        if primitive_type is None:
            primitive_type = self.config.primitive_type

        transitions = TransitionService(
            self.scheduler,
            fade_out=FADE_OUT.with_timing(self.config.fade_duration_ms, self.config.fade_step_ms),
            fade_in=FADE_IN.with_timing(self.config.fade_duration_ms, self.config.fade_step_ms),
        )
        session = AnimationSession(canvas, namespace, primitive_type, transitions)
        self.sessions.append(session)

        log.info(
            "Animation session started",
            primitive=session.tag,
            shapes=self.config.shape_count,
            interval_ms=self.config.cycle_interval_ms,
        )

        self._run_cycle(session)
        session.cycle_timer = self.scheduler.call_every(
            self.config.cycle_interval_ms,
            lambda: self._run_cycle(session),
            description=f"update cycle <{session.tag}>",
        )
        return session

    def stop(self, session: Optional[AnimationSession]) -> None:
        """
        Cancel the cycle timer and every in-flight fade of the session.

        Idempotent; safe mid-fade. After it returns no callback of this
        session touches the canvas again.
        """
        if session is None or not session.active:
            return

        session.active = False
        if session.cycle_timer is not None:
            session.cycle_timer.cancel()
        cancelled_fades = session.transitions.cancel_all()

        if session in self.sessions:
            self.sessions.remove(session)

        log.info(
            "Animation session stopped",
            primitive=session.tag,
            cycles=session.cycles_started,
            fades_cancelled=cancelled_fades,
        )

    def stop_all(self) -> None:
        for session in list(self.sessions):
            self.stop(session)

    def is_running(self) -> bool:
        return any(s.active for s in self.sessions)

    # ============================================================
    # Update cycle
    # ============================================================

    def _run_cycle(self, session: AnimationSession) -> None:
        session.cycles_started += 1
        log.debug(f"Update cycle #{session.cycles_started}", primitive=session.tag)
        session.transitions.fade_out(
            session.canvas,
            on_complete=lambda: self._swap(session),
        )

    def _swap(self, session: AnimationSession) -> None:
        """Canvas is fully transparent: replace all shapes, then fade back in"""
        canvas = session.canvas
        canvas.clear()

        for _ in range(self.config.shape_count):
            shape = self.shape_factory.create_shape(session.primitive_type)
            canvas.append_child(self._build_element(canvas, session.namespace, shape))

        session.swaps_completed += 1
        session.transitions.fade_in(canvas)

    @staticmethod
    def _build_element(canvas: ICanvasSurface, namespace: str, shape: ShapeDescriptor) -> ICanvasElement:
        element = canvas.create_element(namespace, shape.tag)
        for name, value in shape.attributes.items():
            element.set_attribute(name, str(value))
        element.set_style("fill", shape.fill_color.to_css())
        return element
