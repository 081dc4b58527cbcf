"""
Logging configuration for the application.

``setup_logging`` attaches handlers to the ``hotel_reviews_api`` package
logger rather than the root logger, so the API's records are formatted
the same way whether the app runs under uvicorn, pytest or a script,
and third‑party loggers keep whatever configuration their host gives
them.  Records still propagate to the root logger.

The function may be called many times (every ``create_app`` call does);
the level is refreshed each time but a handler is only added once per
destination.
"""

import logging
import os
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "hotel_reviews_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_HANDLER_NAME = "hotel_reviews_api.console"


def _resolve_level(level: str) -> int:
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def _has_console_handler(logger: logging.Logger) -> bool:
    return any(handler.get_name() == CONSOLE_HANDLER_NAME for handler in logger.handlers)


def _has_file_handler(logger: logging.Logger, path: str) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == path
        for handler in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  Missing parent directories
        are created.  If omitted, only the console handler is attached.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_resolve_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_console_handler(logger):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = os.path.abspath(logfile)
        if not _has_file_handler(logger, log_path):
            Path(log_path).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
