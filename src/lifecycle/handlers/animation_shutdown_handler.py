"""
Shutdown handlers for application components.

Each handler is responsible for shutting down one aspect of the application.
They are called in priority order by ShutdownCoordinator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lifecycle.shutdown_protocol import IShutdownHandler
from models.enums import LogCategory
from utils.logger import get_logger

if TYPE_CHECKING:
    from engine.animation_controller import AnimationController

log = get_logger().for_category(LogCategory.SHUTDOWN)


class AnimationShutdownHandler(IShutdownHandler):
    """
    Shutdown handler for the animation controller.
    Stops every canvas session (cycle timers and in-flight fades) before
    the remaining tasks are cancelled.
    """

    def __init__(self, controller: AnimationController):
        self.controller = controller

    @property
    def shutdown_priority(self) -> int:
        return 130  # FIRST

    async def shutdown(self) -> None:
        log.info("Stopping animation sessions...", sessions=len(self.controller.sessions))
        self.controller.stop_all()
        log.debug("AnimationController stopped")
