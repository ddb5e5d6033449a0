"""
main_asyncio.py: application entry point
------------------------------------------

Responsible for:
- loading configuration and configuring the logger
- mounting an in-memory SVG canvas (the host surface)
- starting the animation controller on the asyncio loop
- graceful shutdown on Ctrl+C, SIGTERM or when --duration elapses
"""

import sys

# ---------------------------------------------------------------------------
# UTF-8 ENCODING FIX
# ---------------------------------------------------------------------------

# Set UTF-8 encoding for output BEFORE any imports (fixes Unicode symbol rendering)
if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and sys.stderr.encoding != 'UTF-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import argparse
import asyncio
from typing import List, Optional

from canvas.svg_canvas import SvgCanvas
from engine.animation_controller import AnimationController
from engine.scheduler import AsyncioScheduler
from lifecycle import ShutdownCoordinator, TaskRegistry
from lifecycle.handlers import AnimationShutdownHandler, TaskCancellationHandler
from managers import ConfigManager
from models.enums import LogCategory, LogLevel
from services.shape_factory import ShapeFactory
from utils.logger import configure_logger, get_logger

# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------

log = get_logger().for_category(LogCategory.SYSTEM)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Periodically regenerate and cross-fade random SVG shapes.")
    parser.add_argument("--config", default="config/config.yaml", help="Path to config.yaml (relative to src/)")
    parser.add_argument("--primitive", default=None, help="Override primitive type (circle, rect, ellipse, line, polyline, polygon)")
    parser.add_argument("--duration", type=float, default=None, help="Run for N seconds, then shut down")
    parser.add_argument("--log-level", default=None, choices=[lvl.name for lvl in LogLevel], help="Override log level")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--dump-svg", action="store_true", help="Log the canvas markup after shutdown")
    return parser.parse_args(argv)


# ---------------------------------------------------------------------------
# Application Entry
# ---------------------------------------------------------------------------

async def main(argv: Optional[List[str]] = None) -> int:
    """Main async entry point (dependency wiring and event loop startup)."""
    args = parse_args(argv)

    # ========================================================================
    # 1. CONFIGURATION
    # ========================================================================

    config_manager = ConfigManager(config_path=args.config)
    app_config = config_manager.load()

    level = LogLevel[args.log_level] if args.log_level else app_config.logging.log_level
    configure_logger(level, use_colors=app_config.logging.colors and not args.no_color)

    if args.primitive:
        app_config.animation.primitive_type = args.primitive

    log.info("Starting mutating SVG canvas...")

    # ========================================================================
    # 2. HOST SURFACE + CONTROLLER
    # ========================================================================

    canvas = SvgCanvas(
        width=app_config.canvas.width,
        height=app_config.canvas.height,
        namespace=app_config.canvas.namespace,
    )

    controller = AnimationController(
        scheduler=AsyncioScheduler(),
        shape_factory=ShapeFactory(),
        config=app_config.animation,
    )

    # ========================================================================
    # 3. LIFECYCLE
    # ========================================================================

    coordinator = ShutdownCoordinator()
    coordinator.setup_signal_handlers(asyncio.get_running_loop())
    coordinator.register(AnimationShutdownHandler(controller))
    coordinator.register(TaskCancellationHandler())

    # Mount
    session = controller.start(canvas, app_config.canvas.namespace, app_config.animation.primitive_type)
    if session is None:
        log.error("Animation session could not be started")
        return 1

    try:
        await coordinator.wait_for_shutdown(timeout=args.duration)
    finally:
        # Unmount
        await coordinator.shutdown_all()

    log.info(
        "Session finished",
        cycles=session.cycles_started,
        swaps=session.swaps_completed,
        children=len(canvas.children),
    )
    log.debug(TaskRegistry.instance().summary())

    if args.dump_svg:
        log.info("Canvas markup", svg=canvas.to_svg())

    return 0


def run() -> None:
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        # Platforms without loop signal handlers
        log.info("Interrupted")


if __name__ == "__main__":
    run()
