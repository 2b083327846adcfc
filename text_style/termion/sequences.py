# termion/sequences.py

from typing import Dict, Tuple

from ..style.definitions import Ansi, AnsiColor, AnsiMode, Color, Effect, Rgb

# ANSI format utility
FMT = lambda x: f'\033[{x}m'

# termion's style::Reset; clears colors and every effect at once
RESET = FMT('')

_EFFECTS: Dict[Effect, str] = {
    Effect.BOLD: FMT('1'),
    Effect.ITALIC: FMT('3'),
    Effect.UNDERLINE: FMT('4'),
}

_ANSI_FG: Dict[Tuple[AnsiMode, AnsiColor], str] = {
    (AnsiMode.DARK, AnsiColor.BLACK): FMT('38;5;0'),
    (AnsiMode.DARK, AnsiColor.RED): FMT('38;5;1'),
    (AnsiMode.DARK, AnsiColor.GREEN): FMT('38;5;2'),
    (AnsiMode.DARK, AnsiColor.YELLOW): FMT('38;5;3'),
    (AnsiMode.DARK, AnsiColor.BLUE): FMT('38;5;4'),
    (AnsiMode.DARK, AnsiColor.MAGENTA): FMT('38;5;5'),
    (AnsiMode.DARK, AnsiColor.CYAN): FMT('38;5;6'),
    (AnsiMode.DARK, AnsiColor.WHITE): FMT('38;5;7'),
    (AnsiMode.LIGHT, AnsiColor.BLACK): FMT('38;5;8'),
    (AnsiMode.LIGHT, AnsiColor.RED): FMT('38;5;9'),
    (AnsiMode.LIGHT, AnsiColor.GREEN): FMT('38;5;10'),
    (AnsiMode.LIGHT, AnsiColor.YELLOW): FMT('38;5;11'),
    (AnsiMode.LIGHT, AnsiColor.BLUE): FMT('38;5;12'),
    (AnsiMode.LIGHT, AnsiColor.MAGENTA): FMT('38;5;13'),
    (AnsiMode.LIGHT, AnsiColor.CYAN): FMT('38;5;14'),
    (AnsiMode.LIGHT, AnsiColor.WHITE): FMT('38;5;15'),
}

_ANSI_BG: Dict[Tuple[AnsiMode, AnsiColor], str] = {
    (AnsiMode.DARK, AnsiColor.BLACK): FMT('48;5;0'),
    (AnsiMode.DARK, AnsiColor.RED): FMT('48;5;1'),
    (AnsiMode.DARK, AnsiColor.GREEN): FMT('48;5;2'),
    (AnsiMode.DARK, AnsiColor.YELLOW): FMT('48;5;3'),
    (AnsiMode.DARK, AnsiColor.BLUE): FMT('48;5;4'),
    (AnsiMode.DARK, AnsiColor.MAGENTA): FMT('48;5;5'),
    (AnsiMode.DARK, AnsiColor.CYAN): FMT('48;5;6'),
    (AnsiMode.DARK, AnsiColor.WHITE): FMT('48;5;7'),
    (AnsiMode.LIGHT, AnsiColor.BLACK): FMT('48;5;8'),
    (AnsiMode.LIGHT, AnsiColor.RED): FMT('48;5;9'),
    (AnsiMode.LIGHT, AnsiColor.GREEN): FMT('48;5;10'),
    (AnsiMode.LIGHT, AnsiColor.YELLOW): FMT('48;5;11'),
    (AnsiMode.LIGHT, AnsiColor.BLUE): FMT('48;5;12'),
    (AnsiMode.LIGHT, AnsiColor.MAGENTA): FMT('48;5;13'),
    (AnsiMode.LIGHT, AnsiColor.CYAN): FMT('48;5;14'),
    (AnsiMode.LIGHT, AnsiColor.WHITE): FMT('48;5;15'),
}


def get_ansi_fg(color: AnsiColor, mode: AnsiMode) -> str:
    """Return the foreground sequence for a palette color."""
    return _ANSI_FG[(mode, color)]


def get_ansi_bg(color: AnsiColor, mode: AnsiMode) -> str:
    """Return the background sequence for a palette color."""
    return _ANSI_BG[(mode, color)]


def get_fg(color: Color) -> str:
    """Return the sequence switching the foreground to `color`."""
    if isinstance(color, Ansi):
        return get_ansi_fg(color.color, color.mode)
    elif isinstance(color, Rgb):
        return FMT(f'38;2;{color.r};{color.g};{color.b}')
    raise TypeError(f"Unsupported color: {color!r}")


def get_bg(color: Color) -> str:
    """Return the sequence switching the background to `color`."""
    if isinstance(color, Ansi):
        return get_ansi_bg(color.color, color.mode)
    elif isinstance(color, Rgb):
        return FMT(f'48;2;{color.r};{color.g};{color.b}')
    raise TypeError(f"Unsupported color: {color!r}")


def get_effect(effect: Effect) -> str:
    """Return the sequence enabling `effect`."""
    try:
        return _EFFECTS[effect]
    except KeyError:
        raise TypeError(f"Unsupported effect: {effect!r}") from None
