"""Tag model and rendering.

A tag is a bracketed label ("[Login]") with optional foreground and
background escapes. Tags hold *resolved* escapes, never color names.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from fancy_tags.colors import (
    BACKGROUND_ESCAPES,
    FOREGROUND_ESCAPES,
    resolve_background,
    resolve_foreground,
)


class InvalidTagError(ValueError):
    """Raised when a Tag is constructed with invalid fields."""


@dataclass(frozen=True)
class Tag:
    content: str
    color: str = ""
    bg_color: str = ""

    def __post_init__(self):
        if not isinstance(self.content, str) or not self.content.strip():
            raise InvalidTagError(f"tag content must be a non-empty string, got {self.content!r}")
        checks = (("color", FOREGROUND_ESCAPES), ("bg_color", BACKGROUND_ESCAPES))
        for field_name, allowed in checks:
            value = getattr(self, field_name)
            if value != "" and value not in allowed:
                raise InvalidTagError(f"tag {field_name} is not a known escape: {value!r}")
        object.__setattr__(self, "content", self.content.strip())

    @classmethod
    def create(cls, content: str, color: str = "", bg_color: str = "") -> "Tag":
        """Build a tag from color names ("red", "bgBlue" or "blue")."""
        return cls(
            content=content,
            color=resolve_foreground(color),
            bg_color=resolve_background(bg_color),
        )


def coerce_tag(value: Any) -> Optional[Tag]:
    """Normalize a Tag or a tag-shaped mapping into a Tag.

    Mappings carry ``content`` plus optional ``color`` and ``bgColor``
    (or ``bg_color``) names. Returns None for anything that is not a valid
    tag; never raises.
    """
    if isinstance(value, Tag):
        return value
    if not isinstance(value, Mapping):
        return None
    content = value.get("content")
    if not isinstance(content, str) or not content.strip():
        return None
    bg_color = value.get("bgColor", value.get("bg_color", ""))
    return Tag.create(content, value.get("color", ""), bg_color)


def render_tag(tag: Tag) -> str:
    """Render a tag as background + foreground + "[content]", without reset."""
    return tag.bg_color + tag.color + "[{}]".format(tag.content)
