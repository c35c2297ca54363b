"""LineFormatter: accumulate tags and a message, emit one colored line.

Usage:
    formatter = LineFormatter()
    formatter.add_tag({"color": "red", "content": "Login"})
    formatter.log("New connection")

Invalid input never raises: bad tags are dropped and non-string messages are
ignored. After every log() call the formatter is empty again.

Not thread-safe; share one instance per logical caller.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import fancy_tags.writer
from fancy_tags.colors import DEFAULT
from fancy_tags.tags import Tag, coerce_tag, render_tag

logger = logging.getLogger(__name__)

SEPARATOR = " - "


def _flatten(items: tuple) -> list:
    """Flatten one level: lists and tuples are expanded, anything else kept."""
    flat = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(item)
        else:
            flat.append(item)
    return flat


class LineFormatter:
    """Stateful builder for one tagged log line at a time."""

    def __init__(self, writer: Optional[fancy_tags.writer.Writer] = None):
        self._writer = writer if writer is not None else fancy_tags.writer.default_writer()
        self._tags: list[Tag] = []
        self._message = ""

    # ── Tags ───────────────────────────────────────────────────────────

    @property
    def tags(self) -> tuple[Tag, ...]:
        return tuple(self._tags)

    def add_tag(self, tag: Any) -> None:
        """Append a tag unless it is invalid or an equal tag is already present."""
        normalized = coerce_tag(tag)
        if normalized is None:
            logger.debug("add_tag ignored invalid tag %r", tag)
            return
        if normalized in self._tags:
            return
        self._tags.append(normalized)

    def add_tags(self, *tags: Any) -> None:
        """Add tags given individually and/or as lists, preserving order."""
        for tag in _flatten(tags):
            self.add_tag(tag)

    def remove_tag(self, tag: Any) -> None:
        """Remove the stored tag equal to ``tag``. No-op if absent or invalid."""
        normalized = coerce_tag(tag)
        if normalized is None:
            logger.debug("remove_tag ignored invalid tag %r", tag)
            return
        if normalized in self._tags:
            self._tags.remove(normalized)

    def remove_tags(self, *tags: Any) -> None:
        for tag in _flatten(tags):
            self.remove_tag(tag)

    def __len__(self) -> int:
        return len(self._tags)

    # ── Message ────────────────────────────────────────────────────────

    @property
    def message(self) -> str:
        return self._message

    @message.setter
    def message(self, value: Any) -> None:
        if not isinstance(value, str):
            return
        self._message = value

    # ── Rendering ──────────────────────────────────────────────────────

    @property
    def tag_line(self) -> str:
        """Rendered tags: reset, then each tag followed by reset and a space."""
        return DEFAULT + "".join(render_tag(tag) + DEFAULT + " " for tag in self._tags)

    def __str__(self) -> str:
        # The separator's leading space stands in for the tag line's trailing one.
        return self.tag_line.rstrip(" ") + SEPARATOR + self._message

    def __repr__(self) -> str:
        return "LineFormatter(tags={!r}, message={!r})".format(self._tags, self._message)

    # ── Emission ───────────────────────────────────────────────────────

    def clear(self) -> None:
        self._tags = []
        self._message = ""

    def log(self, message: Any = None) -> None:
        """Write the current line with ``message`` and reset tags and message.

        A non-string ``message`` keeps the previously set message. The reset
        happens even when the writer raises.
        """
        self.message = message
        try:
            self._writer(str(self))
        finally:
            self.clear()
