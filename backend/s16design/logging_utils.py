"""Sink configuration for the engine's loguru logger.

Library modules only ever ``from loguru import logger`` and emit records;
sinks are attached here by the application entry points (API, demo).
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from .settings import Settings

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function} | {message}"


def configure_logging(level: str | None = None, log_file: Path | str | None = None) -> None:
    """Replace the default sinks with a stderr sink and an optional file sink.

    Arguments left as ``None`` fall back to ``S16_LOG_LEVEL`` / ``S16_LOG_FILE``.
    """
    settings = Settings.from_env()
    level = (level or settings.log_level).upper()
    log_file = log_file if log_file is not None else settings.log_file

    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT, backtrace=False, diagnose=False)
    if log_file is not None:
        logger.add(
            str(log_file),
            level="DEBUG",
            rotation="5 MB",
            retention=10,
            enqueue=True,
            backtrace=False,
            diagnose=False,
            format=_FORMAT,
        )
    logger.debug("Logging configured at {} (file: {})", level, log_file)
