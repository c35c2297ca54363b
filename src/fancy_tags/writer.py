"""Line writers consumed by LineFormatter.

A writer is any callable taking one rendered line. ConsoleWriter prints it
behind a "[HH:MM:SS]" timestamp, the way fancy-log does for node scripts.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime
from typing import Optional, TextIO

import fancy_tags.settings

Writer = Callable[[str], None]

GREY = "\033[90m"
RESET = "\033[0m"


class ConsoleWriter:
    """Write timestamped lines to a text stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        time_format: str = "%H:%M:%S",
        color: bool = True,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._stream = stream
        self.time_format = time_format
        self.color = color
        self._clock = clock or datetime.now

    @property
    def stream(self) -> TextIO:
        # Resolved per call so redirected sys.stdout (pytest capsys) is honored.
        return self._stream if self._stream is not None else sys.stdout

    def timestamp(self) -> str:
        stamp = self._clock().strftime(self.time_format)
        if self.color:
            stamp = GREY + stamp + RESET
        return "[{}]".format(stamp)

    def __call__(self, line: str) -> None:
        stream = self.stream
        stream.write(self.timestamp() + " " + line + "\n")
        stream.flush()


def default_writer() -> ConsoleWriter:
    """Build a ConsoleWriter from the user's settings."""
    settings = fancy_tags.settings.load_writer_settings()
    stream = sys.stderr if settings.stream == "stderr" else None
    return ConsoleWriter(stream=stream, time_format=settings.time_format, color=settings.color)


def logger_writer(target: logging.Logger, level: int = logging.INFO) -> Writer:
    """Return a writer that forwards each line to a stdlib logger."""

    def _write(line: str) -> None:
        target.log(level, "%s", line)

    return _write
