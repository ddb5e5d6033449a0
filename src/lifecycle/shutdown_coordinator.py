
"""
Shutdown coordinator that orchestrates graceful shutdown of all components.

Manages signal handlers, shutdown sequencing, and error handling across
multiple shutdown handlers in priority order.
"""

import asyncio
import signal
from typing import Dict, List, Optional

from lifecycle.shutdown_protocol import IShutdownHandler
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SHUTDOWN)


class ShutdownCoordinator:
    """
    Coordinates graceful shutdown of multiple components.

    Maintains a list of shutdown handlers and executes them in priority order
    when shutdown is triggered.

    Example:
        coordinator = ShutdownCoordinator()
        coordinator.register(AnimationShutdownHandler(controller))
        coordinator.register(TaskCancellationHandler())

        coordinator.setup_signal_handlers(loop)
        await coordinator.wait_for_shutdown()
        await coordinator.shutdown_all()
    """

    def __init__(self, timeout_per_handler: float = 5.0, total_timeout: float = 15.0):
        """
        Args:
            timeout_per_handler: Timeout for each individual handler (seconds)
            total_timeout: Total timeout for entire shutdown sequence (seconds)
        """
        self._handlers: List[IShutdownHandler] = []
        self._shutdown_event: Optional[asyncio.Event] = None
        self._timeout_per_handler = timeout_per_handler
        self._total_timeout = total_timeout
        self._shutdown_trigger: Dict[str, Optional[str]] = {"reason": None}

    @property
    def reason(self) -> Optional[str]:
        return self._shutdown_trigger["reason"]

    def register(self, handler: IShutdownHandler) -> None:
        """
        Register a shutdown handler.

        Handler must have:
        - shutdown_priority property (int)
        - async shutdown() method
        """
        if not hasattr(handler, "shutdown_priority"):
            raise ValueError(f"Handler {handler} missing shutdown_priority property")
        if not hasattr(handler, "shutdown"):
            raise ValueError(f"Handler {handler} missing shutdown() method")

        self._handlers.append(handler)
        log.debug(f"Registered shutdown handler: {handler.__class__.__name__}")

    def _ensure_event(self) -> asyncio.Event:
        if self._shutdown_event is None:
            self._shutdown_event = asyncio.Event()
        return self._shutdown_event

    def setup_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        """
        Install SIGINT (Ctrl+C) and SIGTERM handlers that trigger shutdown.

        Platforms without loop signal support (Windows) fall back to
        KeyboardInterrupt handling in the entry point.
        """
        shutdown_event = self._ensure_event()

        def signal_handler(sig: signal.Signals) -> None:
            self._shutdown_trigger["reason"] = sig.name
            log.info(f"Signal {sig.name} received → triggering shutdown")
            shutdown_event.set()

        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, lambda s=sig: signal_handler(s))
            except NotImplementedError:
                log.warn(f"Signal handlers not supported on this platform ({sig.name})")
                return

        log.info("Signal handlers installed (SIGINT, SIGTERM)")

    def request_shutdown(self, reason: str) -> None:
        """Trigger shutdown programmatically."""
        self._shutdown_trigger["reason"] = reason
        self._ensure_event().set()

    async def wait_for_shutdown(self, timeout: Optional[float] = None) -> None:
        """
        Wait for a shutdown request.

        Args:
            timeout: Seconds to wait before shutting down on our own (None = forever)
        """
        event = self._ensure_event()
        try:
            await asyncio.wait_for(event.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            self._shutdown_trigger["reason"] = f"Run time elapsed ({timeout}s)"
            event.set()

    async def shutdown_all(self) -> None:
        """
        Execute graceful shutdown of all handlers in priority order.

        Handlers are called in descending priority order (highest first).
        Each handler has its own timeout; the sequence has a global timeout.
        A failing handler is logged and the sequence continues.
        """
        log.info("Initiating graceful shutdown sequence...", reason=self.reason or "UNKNOWN")

        sorted_handlers = sorted(self._handlers, key=lambda h: h.shutdown_priority, reverse=True)

        loop = asyncio.get_running_loop()
        start_time = loop.time()

        for handler in sorted_handlers:
            handler_name = handler.__class__.__name__

            elapsed = loop.time() - start_time
            if elapsed > self._total_timeout:
                log.error(f"Total shutdown timeout exceeded ({elapsed:.1f}s > {self._total_timeout}s)")
                break

            try:
                log.debug(f"Shutting down {handler_name} (priority={handler.shutdown_priority})...")
                await asyncio.wait_for(handler.shutdown(), timeout=self._timeout_per_handler)
                log.debug(f"✓ {handler_name} shutdown complete")

            except asyncio.TimeoutError:
                log.error(f"{handler_name} shutdown timeout ({self._timeout_per_handler}s)")

            except asyncio.CancelledError:
                log.debug(f"{handler_name} shutdown was cancelled")
                raise

            except Exception as e:
                log.error(f"Error shutting down {handler_name}: {e}", exc_info=True)

        log.info("✓ Shutdown sequence complete")
