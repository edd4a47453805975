"""
Test structured logging setup.
"""
import pytest
from loguru import logger

from palettekit.services.colors.extraction import ExtractionConfig, extract_palette
from palettekit.utils.ids import generate_extraction_id
from palettekit.utils.logging import configure_logging, get_logger


@pytest.fixture
def captured():
    messages = []
    handler_id = configure_logging(level="DEBUG", sink=messages.append)
    yield messages
    logger.remove(handler_id)


def test_structured_logger_binds_context(captured):
    get_logger().bind(extraction_id="pal-test").info("Palette extracted", extra={"palette_size": 8})
    assert len(captured) == 1
    record = str(captured[0])
    assert "Palette extracted" in record
    assert "pal-test" in record
    assert "palette_size" in record


def test_level_filtering():
    messages = []
    handler_id = configure_logging(level="WARNING", sink=messages.append)
    try:
        get_logger().info("hidden")
        get_logger().warning("shown")
    finally:
        logger.remove(handler_id)
    assert len(messages) == 1
    assert "shown" in str(messages[0])


def test_extraction_warning_is_logged(captured, black_white_2x2):
    assert extract_palette(black_white_2x2, k=0) == []
    assert any("empty palette" in str(m) for m in captured)


def test_extraction_id_format():
    extraction_id = generate_extraction_id()
    prefix, timestamp, suffix = extraction_id.split("-")
    assert prefix == "pal"
    assert len(timestamp) == 14 and timestamp.isdigit()
    assert len(suffix) == 8


def test_extraction_logs_iteration_count(captured, red_blue_halves, seeded_rng):
    config = ExtractionConfig(iterations=7, rng=seeded_rng)
    extract_palette(red_blue_halves, k=2, config=config)
    debug_lines = [str(m) for m in captured if "| DEBUG |" in str(m)]
    assert any("7 iterations" in line for line in debug_lines)
    assert any("step=" in line for line in debug_lines)
