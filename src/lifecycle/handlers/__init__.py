from .animation_shutdown_handler import AnimationShutdownHandler
from .task_cancellation_handler import TaskCancellationHandler

__all__ = [
    "AnimationShutdownHandler",
    "TaskCancellationHandler",
]
