# test_convert.py

import pytest
from rich.color import Color as RichColor
from rich.style import Style as RichStyle
from rich.text import Text

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from text_style.style import Ansi, AnsiColor, AnsiMode, Effect, Rgb, Style, StyledStr
from text_style.convert import (
    from_formatted_text,
    from_rich_color,
    from_rich_style,
    from_rich_text,
    from_style_str,
    to_formatted_text,
    to_rich_style,
    to_style_str,
)


class TestRichConversion:

    def test_standard_colors(self):
        assert from_rich_color(RichColor.parse("red")) == Ansi(AnsiColor.RED, AnsiMode.DARK)
        assert from_rich_color(RichColor.parse("bright_cyan")) == Ansi(AnsiColor.CYAN, AnsiMode.LIGHT)

    def test_truecolor_and_default(self):
        assert from_rich_color(RichColor.parse("#0a0b0c")) == Rgb(10, 11, 12)
        assert from_rich_color(RichColor.parse("default")) is None
        assert from_rich_color(None) is None

    def test_eight_bit_beyond_palette_becomes_rgb(self):
        assert isinstance(from_rich_color(RichColor.from_ansi(200)), Rgb)

    def test_style_round_trip(self):
        style = Style(
            fg=Ansi(AnsiColor.BLUE, AnsiMode.LIGHT),
            bg=Rgb(1, 2, 3),
            effects=frozenset([Effect.BOLD, Effect.UNDERLINE]),
        )
        assert from_rich_style(to_rich_style(style)) == style

    def test_unsupported_attributes_dropped(self):
        style = from_rich_style(RichStyle.parse("dim blink italic"))
        assert style == Style(effects=frozenset([Effect.ITALIC]))

    def test_text_segments(self):
        text = Text("plain ")
        text.append("bold", style="bold red")
        assert from_rich_text(text) == [
            StyledStr.plain("plain "),
            StyledStr.styled("bold", Style(
                fg=Ansi(AnsiColor.RED, AnsiMode.DARK),
                effects=frozenset([Effect.BOLD]),
            )),
        ]


class TestPromptToolkitConversion:

    def test_style_str(self):
        style = Style(
            fg=Ansi(AnsiColor.WHITE, AnsiMode.DARK),
            bg=Rgb(10, 11, 12),
            effects=frozenset([Effect.UNDERLINE, Effect.BOLD]),
        )
        assert to_style_str(style) == "fg:ansigray bg:#0a0b0c bold underline"
        assert to_style_str(None) == ""

    def test_light_white_is_ansiwhite(self):
        assert to_style_str(Style(fg=Ansi(AnsiColor.WHITE, AnsiMode.LIGHT))) == "fg:ansiwhite"

    def test_formatted_text(self):
        ft = to_formatted_text([StyledStr.plain("a").italic(), "b"])
        assert list(ft) == [("italic", "a"), ("", "b")]

    def test_parse_style_str(self):
        assert from_style_str("fg:ansibrightred bg:#ffffff bold") == Style(
            fg=Ansi(AnsiColor.RED, AnsiMode.LIGHT),
            bg=Rgb(255, 255, 255),
            effects=frozenset([Effect.BOLD]),
        )

    def test_round_trip(self):
        items = [
            StyledStr.plain("x").with_fg(Ansi(AnsiColor.MAGENTA)).underline(),
            StyledStr.plain(" "),
            StyledStr.plain("y").on(Rgb(0, 128, 255)).italic(),
        ]
        assert from_formatted_text(to_formatted_text(items)) == items

    def test_unsupported_color(self):
        with pytest.raises(ValueError):
            from_style_str("fg:nonsense")
