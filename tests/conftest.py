import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from canvas.svg_canvas import SvgCanvas
from engine.animation_controller import AnimationController
from engine.virtual_scheduler import VirtualScheduler
from lifecycle.task_registry import TaskRegistry
from models.config import AnimationConfig
from services.shape_factory import ShapeFactory
from utils.logger import get_logger
from utils.random_source import seeded_random_int


@pytest.fixture
def scheduler():
    return VirtualScheduler()


@pytest.fixture
def canvas():
    return SvgCanvas(width=500, height=500)


@pytest.fixture
def shape_factory():
    return ShapeFactory(random_int=seeded_random_int(1234))


@pytest.fixture
def controller(scheduler, shape_factory):
    return AnimationController(scheduler, shape_factory, AnimationConfig())


@pytest.fixture
def captured_logs():
    """Collect log records emitted during the test."""
    records = []
    logger = get_logger()
    logger.add_sink(records.append)
    yield records
    logger.remove_sink(records.append)


@pytest.fixture(autouse=True)
def fresh_task_registry():
    TaskRegistry.reset()
    yield
    TaskRegistry.reset()
