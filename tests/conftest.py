"""Pytest configuration and shared fixtures for fancy-tags tests."""

import pytest

import fancy_tags.io.logging_setup


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point settings at an empty config dir and clear fancy-tags env vars."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in (
        "FANCY_TAGS_TIME_FORMAT",
        "FANCY_TAGS_STREAM",
        "FANCY_TAGS_LOG_LEVEL",
        "FANCY_TAGS_LOG_FILE",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    fancy_tags.io.logging_setup.reset()


@pytest.fixture
def lines():
    """List that collects every line passed to the ``writer`` fixture."""
    return []


@pytest.fixture
def writer(lines):
    return lines.append
