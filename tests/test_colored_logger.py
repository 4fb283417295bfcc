"""Tests for colored console logging."""
import logging

from weather_chat.utils.colored_logger import (
    COMPONENT_COLORS,
    LEVEL_COLORS,
    Colors,
    ColoredFormatter,
    get_plugin_logger,
)


def _record(level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord("weather_chat.test", level, __file__, 1, "forecast ready", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_component_color() -> None:
    """Test that component records use the component color."""
    formatted = ColoredFormatter().format(_record(component="llm"))
    assert formatted.startswith(COMPONENT_COLORS["llm"])
    assert formatted.endswith(Colors.RESET)
    assert "forecast ready" in formatted


def test_level_color_without_component() -> None:
    """Test fallback to the level color."""
    formatted = ColoredFormatter().format(_record(logging.ERROR))
    assert formatted.startswith(LEVEL_COLORS["ERROR"])


def test_unknown_component_uses_default() -> None:
    """Test unknown component names."""
    formatted = ColoredFormatter().format(_record(component="radar"))
    assert formatted.startswith(COMPONENT_COLORS["default"])


def test_plugin_logger_tags_records(caplog) -> None:
    """Test that component loggers attach their component."""
    plugin_logger = get_plugin_logger("weather_chat.test", "knowledge")

    with caplog.at_level(logging.INFO, logger="weather_chat.test"):
        plugin_logger.info("lookup done", extra={"city": "Lahore"})

    record = caplog.records[-1]
    assert record.component == "knowledge"
    assert record.city == "Lahore"
