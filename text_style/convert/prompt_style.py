# convert/prompt_style.py

from typing import Iterable, List, Optional, Tuple, Union

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style as PromptStyle

from ..style.definitions import Ansi, AnsiColor, AnsiMode, Color, Effect, Rgb, Style, StyledStr

# prompt_toolkit names the dark white "gray" and the light white "white"
_DARK_NAMES = {
    AnsiColor.BLACK: 'ansiblack',
    AnsiColor.RED: 'ansired',
    AnsiColor.GREEN: 'ansigreen',
    AnsiColor.YELLOW: 'ansiyellow',
    AnsiColor.BLUE: 'ansiblue',
    AnsiColor.MAGENTA: 'ansimagenta',
    AnsiColor.CYAN: 'ansicyan',
    AnsiColor.WHITE: 'ansigray',
}
_LIGHT_NAMES = {
    AnsiColor.BLACK: 'ansibrightblack',
    AnsiColor.RED: 'ansibrightred',
    AnsiColor.GREEN: 'ansibrightgreen',
    AnsiColor.YELLOW: 'ansibrightyellow',
    AnsiColor.BLUE: 'ansibrightblue',
    AnsiColor.MAGENTA: 'ansibrightmagenta',
    AnsiColor.CYAN: 'ansibrightcyan',
    AnsiColor.WHITE: 'ansiwhite',
}
_ANSI_BY_NAME = {
    **{name: Ansi(color, AnsiMode.DARK) for color, name in _DARK_NAMES.items()},
    **{name: Ansi(color, AnsiMode.LIGHT) for color, name in _LIGHT_NAMES.items()},
}
_EFFECT_NAMES = {
    Effect.BOLD: 'bold',
    Effect.ITALIC: 'italic',
    Effect.UNDERLINE: 'underline',
}

_parser = PromptStyle([])


def _color_name(color: Color) -> str:
    if isinstance(color, Ansi):
        names = _LIGHT_NAMES if color.mode is AnsiMode.LIGHT else _DARK_NAMES
        return names[color.color]
    if isinstance(color, Rgb):
        return f'#{color.r:02x}{color.g:02x}{color.b:02x}'
    raise TypeError(f"Unsupported color: {color!r}")


def _parse_color(value: Optional[str]) -> Optional[Color]:
    """Convert a color as normalized by prompt_toolkit ('ansired' or 'ff0000')."""
    if not value or value in ('default', 'ansidefault'):
        return None
    if value in _ANSI_BY_NAME:
        return _ANSI_BY_NAME[value]
    if len(value) == 6:
        try:
            return Rgb(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
        except ValueError:
            pass
    raise ValueError(f"Unsupported prompt_toolkit color: {value!r}")


def to_style_str(style: Optional[Style]) -> str:
    """Build a prompt_toolkit style string, e.g. 'fg:ansired bold'."""
    if style is None:
        return ''
    parts = []
    if style.fg is not None:
        parts.append(f'fg:{_color_name(style.fg)}')
    if style.bg is not None:
        parts.append(f'bg:{_color_name(style.bg)}')
    parts.extend(_EFFECT_NAMES[effect] for effect in style.ordered_effects())
    return ' '.join(parts)


def to_formatted_text(items: Iterable[Union[StyledStr, str]]) -> FormattedText:
    fragments = []
    for item in items:
        if isinstance(item, str):
            fragments.append(('', item))
        else:
            fragments.append((to_style_str(item.style), item.s))
    return FormattedText(fragments)


def from_style_str(style_str: str) -> Style:
    """Parse a prompt_toolkit style string with prompt_toolkit's own parser."""
    attrs = _parser.get_attrs_for_style_str(style_str)
    effects = set()
    if attrs.bold:
        effects.add(Effect.BOLD)
    if attrs.italic:
        effects.add(Effect.ITALIC)
    if attrs.underline:
        effects.add(Effect.UNDERLINE)
    return Style(
        fg=_parse_color(attrs.color),
        bg=_parse_color(attrs.bgcolor),
        effects=frozenset(effects),
    )


def from_formatted_text(fragments: Iterable[Tuple]) -> List[StyledStr]:
    """
    Convert (style, text) fragments into styled strings.

    Mouse handlers in three-element fragments are ignored.
    """
    result = []
    for fragment in fragments:
        style_str, text = fragment[0], fragment[1]
        style = from_style_str(style_str)
        result.append(StyledStr.plain(text) if style.is_plain() else StyledStr.styled(text, style))
    return result
