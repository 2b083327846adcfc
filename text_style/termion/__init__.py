# termion/__init__.py

"""
Rendering of styled strings into the escape sequences of the termion
terminal library.

Use render() for a single string, render_iter() for several, or wrap a
value with termion() and format it with str().
"""

from .sequences import RESET, get_ansi_bg, get_ansi_fg, get_bg, get_effect, get_fg
from .engine import TermionStr, termion
from .writer import render, render_iter

__all__ = [
    'RESET',
    'TermionStr',
    'get_ansi_bg',
    'get_ansi_fg',
    'get_bg',
    'get_effect',
    'get_fg',
    'render',
    'render_iter',
    'termion',
]
