"""Settings file I/O for fancy-tags.

Manages a JSON settings file at XDG_CONFIG_HOME/fancy-tags/settings.json.
Environment variables override file values for the console writer.

Import as: import fancy_tags.settings
"""

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

STREAMS = ("stdout", "stderr")


@dataclass(frozen=True)
class WriterSettings:
    """Resolved console writer configuration."""

    time_format: str = "%H:%M:%S"
    stream: str = "stdout"
    color: bool = True


def get_config_path() -> Path:
    """Return path to settings file.

    Uses XDG_CONFIG_HOME (default ~/.config) / fancy-tags / settings.json.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "fancy-tags" / "settings.json"


def load_settings() -> dict:
    """Load settings from JSON file. Returns empty dict on missing/corrupt file."""
    path = get_config_path()
    # [LAW:dataflow-not-control-flow] Always attempt read; empty dict is the "no data" value.
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Atomic write of settings dict to JSON file.

    Creates parent directories if needed. Writes to temp file then renames
    to avoid partial writes on crash.
    """
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def load_writer_settings() -> WriterSettings:
    """Resolve writer settings: defaults < settings file < environment."""
    defaults = WriterSettings()
    data = load_settings()

    time_format = os.environ.get("FANCY_TAGS_TIME_FORMAT") or data.get("time_format")
    if not isinstance(time_format, str) or not time_format:
        time_format = defaults.time_format

    stream = os.environ.get("FANCY_TAGS_STREAM") or data.get("stream")
    stream = stream.strip().lower() if isinstance(stream, str) else defaults.stream
    if stream not in STREAMS:
        stream = defaults.stream

    color = data.get("color", defaults.color)
    color = color if isinstance(color, bool) else defaults.color
    # NO_COLOR (any non-empty value) only disables the timestamp color; tag
    # escapes are chosen by the caller and always emitted.
    if os.environ.get("NO_COLOR"):
        color = False

    return WriterSettings(time_format=time_format, stream=stream, color=color)
