"""Logging configuration using Loguru.

Provides human-readable output for development, JSON lines for
production, and routes standard library logging (uvicorn, httpx)
through Loguru.
"""

import logging
import sys

from loguru import logger


class InterceptHandler(logging.Handler):
    """Redirect standard library log records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller outside the logging module
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


_TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - "
    "<level>{message}</level> {extra}"
)


def setup_logging(log_level: str = "INFO", log_format: str = "text") -> None:
    """Configure Loguru logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("text" or "json")
    """
    logger.remove()
    logger.configure(extra={"name": "dictionary_cache"})

    if log_format == "json":
        logger.add(sys.stdout, level=log_level.upper(), serialize=True, backtrace=True, diagnose=False)
    else:
        logger.add(sys.stdout, level=log_level.upper(), format=_TEXT_FORMAT, colorize=True)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Reduce noise from third-party libraries
    for logger_name in ["uvicorn.access", "httpx", "httpcore"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str):
    """Get a logger instance bound to a name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        A Loguru logger instance
    """
    return logger.bind(name=name)
