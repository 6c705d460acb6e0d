# === FILE: link_scout/logger.py ===
"""
Handlers for the ``"LinkScout"`` logger.

Crawler modules only call ``logging.getLogger("LinkScout")``; the CLI attaches
the console (and optional rotating file) handler once via :func:`init_logging`.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, TextIO, Union

LOGGER_NAME: Final[str] = "LinkScout"
DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(message)s"

_MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 3

logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def _formatted(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: Union[int, str] = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Point the crawl log at *stream* (stdout by default) and, if given, *log_file*.

    With *replace_handlers* the handlers of a previous call are closed first,
    so repeated CLI invocations in one process do not duplicate lines.
    Propagation is switched off: the crawl log never reaches the root logger.
    """
    logger.setLevel(level)
    if replace_handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    logger.addHandler(_formatted(logging.StreamHandler(stream or sys.stdout), log_format))
    if log_file is not None:
        rotating = RotatingFileHandler(
            str(log_file), maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
        )
        logger.addHandler(_formatted(rotating, log_format))

    logger.propagate = False
    return logger


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    stream: TextIO | None = None,
) -> logging.Logger:
    return configure(level=level, log_file=log_file, log_format=log_format, stream=stream)


__all__ = ["logger", "configure", "init_logging", "LOGGER_NAME"]
