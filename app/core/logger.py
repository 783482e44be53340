"""
Loguru setup for the NOVA service.

Everything logs through loguru: the engine and services directly, and
uvicorn/fastapi through :class:`InterceptHandler`, so one sink
configuration covers the whole process.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}"

# Standard-library loggers routed into loguru.
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")


class InterceptHandler(logging.Handler):
    """Forward standard-library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Report the caller of the stdlib logger, not this handler.
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    json_logs: bool = False,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Configure loguru sinks and route server logs through them.

    Args:
        level: Minimum level for every sink.
        log_file: Optional rotating log file; console only when None.
        json_logs: Emit console records as JSON lines instead of text.
        rotation: File rotation trigger (e.g. "10 MB", "1 day").
        retention: How long rotated files are kept.
    """
    logger.remove()

    if json_logs:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )

    for name in INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    logger.debug("Logger initialised: level={} file={} json={}", level, log_file, json_logs)
