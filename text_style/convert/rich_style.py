# convert/rich_style.py

from typing import List, Optional

from rich.color import Color as RichColor, ColorType
from rich.console import Console
from rich.style import Style as RichStyle
from rich.text import Text

from ..style.definitions import Ansi, AnsiColor, AnsiMode, Color, Effect, Rgb, Style, StyledStr

_PALETTE_TYPES = (ColorType.STANDARD, ColorType.WINDOWS, ColorType.EIGHT_BIT)


def from_rich_color(color: Optional[RichColor]) -> Optional[Color]:
    """
    Convert a Rich color.

    Palette entries 0-15 map to ANSI hues (8-15 are the light variants),
    the default color maps to None and everything else to RGB.
    """
    if color is None or color.is_default:
        return None
    if color.type in _PALETTE_TYPES and color.number is not None and color.number < 16:
        mode = AnsiMode.DARK if color.number < 8 else AnsiMode.LIGHT
        return Ansi(AnsiColor(color.number % 8), mode)
    triplet = color.get_truecolor()
    return Rgb(triplet.red, triplet.green, triplet.blue)


def to_rich_color(color: Optional[Color]) -> Optional[RichColor]:
    if color is None:
        return None
    if isinstance(color, Ansi):
        offset = 8 if color.mode is AnsiMode.LIGHT else 0
        return RichColor.from_ansi(color.color.value + offset)
    if isinstance(color, Rgb):
        return RichColor.from_rgb(color.r, color.g, color.b)
    raise TypeError(f"Unsupported color: {color!r}")


def from_rich_style(style: Optional[RichStyle]) -> Style:
    """Convert a Rich style, keeping colors, bold, italic and underline."""
    if style is None:
        return Style()
    effects = set()
    if style.bold:
        effects.add(Effect.BOLD)
    if style.italic:
        effects.add(Effect.ITALIC)
    if style.underline:
        effects.add(Effect.UNDERLINE)
    return Style(
        fg=from_rich_color(style.color),
        bg=from_rich_color(style.bgcolor),
        effects=frozenset(effects),
    )


def to_rich_style(style: Optional[Style]) -> RichStyle:
    if style is None:
        return RichStyle()
    return RichStyle(
        color=to_rich_color(style.fg),
        bgcolor=to_rich_color(style.bg),
        bold=Effect.BOLD in style.effects or None,
        italic=Effect.ITALIC in style.effects or None,
        underline=Effect.UNDERLINE in style.effects or None,
    )


def from_rich_text(text: Text, console: Optional[Console] = None) -> List[StyledStr]:
    """
    Split a Rich Text into styled strings, one per rendered segment.

    Control segments are skipped. Segments without a style, or whose
    style carries nothing we can express, come back plain.
    """
    if console is None:
        console = Console(force_terminal=True, color_system="truecolor", highlight=False)
    result = []
    for segment in text.render(console):
        if segment.control or not segment.text:
            continue
        style = from_rich_style(segment.style)
        if style.is_plain():
            result.append(StyledStr.plain(segment.text))
        else:
            result.append(StyledStr.styled(segment.text, style))
    return result
