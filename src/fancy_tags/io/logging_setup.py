"""Diagnostics logging bootstrap for fancy-tags.

Only the CLI calls configure(); importing the library never touches handlers.

// [LAW:single-enforcer] Logger handler wiring is enforced in this module only.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "fancy_tags"
DEFAULT_LEVEL = "WARNING"


@dataclass(frozen=True)
class LoggingRuntime:
    """Resolved runtime logging configuration."""

    level_name: str
    level: int
    file_path: Optional[str]


_RUNTIME: LoggingRuntime | None = None


def _parse_level(raw: Optional[str]) -> tuple[str, int]:
    normalized = str(raw or DEFAULT_LEVEL).strip().upper()
    level = logging.getLevelName(normalized)
    if not isinstance(level, int):
        level = getattr(logging, DEFAULT_LEVEL)
    return logging.getLevelName(level), level


def _make_stream_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s %(message)s"))
    return handler


def _make_file_handler(level: int, file_path: str) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure(level: Optional[str] = None) -> LoggingRuntime:
    """Configure the fancy_tags logger with a stderr handler (+ file if requested).

    ``level`` wins over FANCY_TAGS_LOG_LEVEL. Idempotent: repeated calls
    return the originally configured runtime.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    level_name, level_value = _parse_level(level or os.environ.get("FANCY_TAGS_LOG_LEVEL"))
    file_path = os.environ.get("FANCY_TAGS_LOG_FILE") or None

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level_value)
    logger.propagate = False
    logger.handlers.clear()
    logger.addHandler(_make_stream_handler(level_value))
    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_make_file_handler(level_value, file_path))

    logging.captureWarnings(True)

    _RUNTIME = LoggingRuntime(level_name=level_name, level=level_value, file_path=file_path)
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    """Return configured logging runtime, if configure() has run."""
    return _RUNTIME


def reset() -> None:
    """Drop installed handlers so configure() can run again."""
    global _RUNTIME
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logging.captureWarnings(False)
    _RUNTIME = None
