"""
PaletteKit Structured Logging
Centralized logging configuration using loguru.

Library modules log through ``loguru.logger`` directly; applications that
embed PaletteKit call :func:`configure_logging` once to install a sink.
"""
import sys
from typing import Any, Dict, Optional

from loguru import logger

from palettekit.config import config

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}"


def configure_logging(level: Optional[str] = None, sink: Any = None) -> int:
    """
    Replace loguru's default handler with the structured PaletteKit format.

    Args:
        level: Minimum level (defaults to config.LOG_LEVEL)
        sink: Output sink (defaults to sys.stderr)

    Returns:
        loguru handler id of the installed sink
    """
    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stderr,
        format=LOG_FORMAT,
        level=level or config.LOG_LEVEL,
        serialize=False,
    )


class StructuredLogger:
    """Structured logger that attaches extra fields to every record."""

    def __init__(self, **context: Any):
        self._context = context

    def bind(self, **extra: Any) -> "StructuredLogger":
        """Return a child logger carrying additional context fields."""
        return StructuredLogger(**{**self._context, **extra})

    def _log(self, level: str, message: str, extra: Optional[Dict[str, Any]]):
        fields = {**self._context, **(extra or {})}
        logger.bind(**fields).log(level, message)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with optional extra data."""
        self._log("INFO", message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with optional extra data."""
        self._log("WARNING", message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log error message with optional extra data."""
        self._log("ERROR", message, extra)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with optional extra data."""
        self._log("DEBUG", message, extra)


# Global logger instance
_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance."""
    global _logger
    if _logger is None:
        _logger = StructuredLogger(service="palettekit")
    return _logger
