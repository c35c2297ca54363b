"""Tests for the color table and name resolution."""

import logging

import pytest

from fancy_tags.colors import (
    COLORS,
    DEFAULT,
    background_names,
    foreground_names,
    resolve_background,
    resolve_foreground,
)


def test_color_table_is_read_only():
    with pytest.raises(TypeError):
        COLORS["red"] = "x"


def test_default_is_reset_escape():
    assert DEFAULT == "\x1b[0m"


def test_names_split_by_background_prefix():
    assert foreground_names() == ["default", "red", "yellow", "green", "blue", "white", "cyan"]
    assert "bgMagenta" in background_names()
    assert all(name.startswith("bg") for name in background_names())
    assert len(foreground_names()) + len(background_names()) == len(COLORS)


class TestResolveForeground:
    def test_known_name(self):
        assert resolve_foreground("red") == "\x1b[31m"
        assert resolve_foreground("cyan") == "\x1b[36m"

    def test_input_is_trimmed(self):
        assert resolve_foreground("  green ") == "\x1b[32m"

    def test_unknown_name_is_no_color(self):
        assert resolve_foreground("mauve") == ""

    def test_background_name_is_never_a_foreground(self):
        assert resolve_foreground("bgRed") == ""

    @pytest.mark.parametrize("value", [None, 42, ["red"], {"color": "red"}])
    def test_non_string_is_no_color(self, value):
        assert resolve_foreground(value) == ""

    def test_empty_string(self):
        assert resolve_foreground("") == ""

    def test_logs_debug_on_match(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fancy_tags.colors"):
            resolve_foreground("blue")
        assert "foreground color resolved name='blue'" in caplog.text


class TestResolveBackground:
    def test_bare_hue_and_prefixed_name_match(self):
        assert resolve_background("red") == resolve_background("bgRed") == "\x1b[41m"

    def test_first_letter_is_capitalized(self):
        assert resolve_background("magenta") == "\x1b[45m"
        assert resolve_background("Black") == "\x1b[40m"

    def test_input_is_trimmed(self):
        assert resolve_background(" blue ") == "\x1b[44m"
        assert resolve_background(" bgWhite ") == "\x1b[47m"

    def test_unknown_names(self):
        assert resolve_background("mauve") == ""
        assert resolve_background("bgMauve") == ""
        # Prefixed names are looked up verbatim.
        assert resolve_background("bgred") == ""

    def test_default_is_not_a_background(self):
        assert resolve_background("default") == ""

    @pytest.mark.parametrize("value", [None, 3.5, "", "   "])
    def test_invalid_input_is_no_color(self, value):
        assert resolve_background(value) == ""
