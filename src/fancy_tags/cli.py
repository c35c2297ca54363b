"""CLI entry point for fancy-tags.

    fancy-tags -t Login@red -t DB@white/blue "New connection"
    fancy-tags --list-colors
"""

import argparse
import logging
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

import fancy_tags.io.logging_setup
from fancy_tags.colors import BG_PREFIX, COLORS, DEFAULT, resolve_background, resolve_foreground
from fancy_tags.formatter import LineFormatter

logger = logging.getLogger(__name__)


def parse_tag_arg(raw: str) -> dict:
    """Parse ``CONTENT[@FG[/BG]]`` into a tag-shaped mapping.

    Only the text after the last "@" is read as colors, and only when every
    non-empty part names a known color. Otherwise the whole argument is the
    content, so "user@host" stays intact; "user@host@" forces an empty suffix.
    """
    content, sep, colors = raw.rpartition("@")
    if not sep:
        return {"content": raw}
    fg, _, bg = colors.partition("/")
    if (fg and not resolve_foreground(fg)) or (bg and not resolve_background(bg)):
        logger.debug("tag suffix %r is not a color, keeping it as content", colors)
        return {"content": raw}
    return {"content": content, "color": fg, "bgColor": bg}


def build_color_table() -> Table:
    table = Table(title="fancy-tags colors")
    table.add_column("name")
    table.add_column("kind")
    table.add_column("escape")
    table.add_column("sample")
    for name, escape in COLORS.items():
        kind = "background" if name.startswith(BG_PREFIX) else "foreground"
        table.add_row(name, kind, repr(escape), Text.from_ansi(escape + " sample " + DEFAULT))
    return table


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fancy-tags",
        description="Print a message prefixed with colored tags",
    )
    parser.add_argument(
        "-t",
        "--tag",
        dest="tags",
        action="append",
        default=[],
        metavar="CONTENT[@FG[/BG]]",
        help="Tag to prefix, e.g. Login@red or DB@white/blue (repeatable)",
    )
    parser.add_argument(
        "--list-colors",
        action="store_true",
        default=False,
        help="Print the available color names and exit",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Diagnostics log level (default: WARNING). Env: FANCY_TAGS_LOG_LEVEL",
    )
    parser.add_argument("message", nargs="*", help="Message to print after the tags")
    return parser


def main(argv: Optional[list[str]] = None, console: Optional[Console] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_runtime = fancy_tags.io.logging_setup.configure(level=args.log_level)
    logger.debug("logging configured level=%s file=%s", log_runtime.level_name, log_runtime.file_path)

    if args.list_colors:
        (console or Console(highlight=False)).print(build_color_table())
        return 0

    if not args.message:
        parser.error("a message is required unless --list-colors is given")

    formatter = LineFormatter()
    formatter.add_tags([parse_tag_arg(raw) for raw in args.tags])
    formatter.log(" ".join(args.message))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
