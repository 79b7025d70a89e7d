"""Tests for color specification parsing."""

from regex_lexer.core.color import ColorParser, parse_color


class TestColorParser:
    """Tests for ColorParser."""

    def test_foreground_and_background(self):
        color = ColorParser().parse("bold red on white")

        assert color.fg == "ansired"
        assert color.bg == "ansiwhite"
        assert color.to_prompt_toolkit_style() == "bold ansired bg:ansiwhite"

    def test_bright_colors(self):
        assert parse_color("bright blue").fg == "ansibrightblue"
        assert parse_color("gray").fg == "ansibrightblack"
        assert parse_color("bright gray").fg == "ansibrightblack"

    def test_hex_color(self):
        assert parse_color("#ff0000 underline").to_prompt_toolkit_style() == "underline #ff0000"

    def test_inverse_alias(self):
        assert parse_color("inverse").attributes == ["reverse"]

    def test_empty_spec(self):
        assert parse_color("").to_prompt_toolkit_style() == ""

    def test_unknown_words_ignored(self):
        assert parse_color("sparkly").to_prompt_toolkit_style() == ""
