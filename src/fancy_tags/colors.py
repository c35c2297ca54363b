"""Terminal color table and name resolution.

// [LAW:one-source-of-truth] COLORS is the only place escape sequences are defined.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)

BG_PREFIX = "bg"

COLORS = MappingProxyType({
    "default": "\033[0m",

    # Foreground
    "red": "\033[31m",
    "yellow": "\033[33m",
    "green": "\033[32m",
    "blue": "\033[34m",
    "white": "\033[37m",
    "cyan": "\033[36m",

    # Background
    "bgBlack": "\033[40m",
    "bgRed": "\033[41m",
    "bgGreen": "\033[42m",
    "bgYellow": "\033[43m",
    "bgBlue": "\033[44m",
    "bgMagenta": "\033[45m",
    "bgCyan": "\033[46m",
    "bgWhite": "\033[47m",
})

DEFAULT = COLORS["default"]


def foreground_names() -> list[str]:
    return [name for name in COLORS if not name.startswith(BG_PREFIX)]


def background_names() -> list[str]:
    return [name for name in COLORS if name.startswith(BG_PREFIX)]


FOREGROUND_ESCAPES = frozenset(COLORS[name] for name in foreground_names())
BACKGROUND_ESCAPES = frozenset(COLORS[name] for name in background_names())


def resolve_foreground(name) -> str:
    """Return the escape for a foreground color name, or "" for no color.

    Background names ("bgRed") are never valid foregrounds.
    """
    if not isinstance(name, str):
        return ""
    name = name.strip()
    if name.startswith(BG_PREFIX):
        return ""
    escape = COLORS.get(name, "")
    if escape:
        logger.debug("foreground color resolved name=%r", name)
    return escape


def resolve_background(name) -> str:
    """Return the escape for a background color name, or "" for no color.

    Accepts both the table key ("bgRed") and the bare hue ("red"), which is
    mapped to the key by prefixing "bg" and capitalizing the first letter.
    """
    if not isinstance(name, str):
        return ""
    name = name.strip()
    if not name:
        return ""
    key = name if name.startswith(BG_PREFIX) else BG_PREFIX + name[0].upper() + name[1:]
    escape = COLORS.get(key, "")
    if escape:
        logger.debug("background color resolved name=%r key=%r", name, key)
    return escape
