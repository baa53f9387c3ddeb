"""
Logging configuration for the Roster Book application.

Configures loguru as the single logging backend and routes records emitted
through the standard ``logging`` module (Flask/werkzeug) into it.
"""
import logging
import sys

from loguru import logger

from .constants import LOG_LEVEL, VALID_LOG_LEVELS


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller that originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def normalize_level(level: str) -> str:
    """
    Return an upper-cased loguru level name, falling back to INFO.

    Args:
        level: Requested level name (any case)

    Returns:
        A level name loguru understands
    """
    candidate = (level or "").strip().upper()
    if candidate not in VALID_LOG_LEVELS:
        return "INFO"
    return candidate


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure the loguru stderr sink and intercept standard logging."""
    resolved = normalize_level(level)
    logger.remove()
    logger.add(
        sys.stderr,
        level=resolved,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=False,
    )
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.debug("Logging initialized with level: {}", resolved)
