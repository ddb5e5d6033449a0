"""
Smoke test for the asyncio entry point with a bounded run time.
"""

import pytest

import main_asyncio
from utils.logger import configure_logger, get_logger


@pytest.fixture
def restore_logger():
    logger = get_logger()
    previous = (logger.min_level, logger.use_colors)
    yield
    configure_logger(*previous)


def test_parse_args_defaults():
    args = main_asyncio.parse_args([])

    assert args.config == "config/config.yaml"
    assert args.primitive is None
    assert args.duration is None
    assert not args.dump_svg


@pytest.mark.asyncio
async def test_main_runs_for_duration(restore_logger, captured_logs):
    code = await main_asyncio.main(["--duration", "1.0", "--primitive", "rect", "--no-color", "--dump-svg"])

    assert code == 0
    finished = [r for r in captured_logs if r["message"] == "Session finished"]
    assert len(finished) == 1
    assert "cycles: 1" in finished[0]["details"]
    assert "children: 10" in finished[0]["details"]
    assert any(r["message"] == "Canvas markup" for r in captured_logs)


@pytest.mark.asyncio
async def test_main_survives_unknown_log_level(tmp_path, restore_logger, captured_logs):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("logging:\n  level: LOUD\n", encoding="utf-8")

    code = await main_asyncio.main(["--config", str(config_file), "--duration", "0.1", "--no-color"])

    assert code == 0
    assert any(r["message"] == "Falling back to factory defaults" for r in captured_logs)
