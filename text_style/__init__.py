# __init__.py

from .logger import Logger
from .style import Ansi, AnsiColor, AnsiMode, Color, Effect, Rgb, Style, StyledStr
from .termion import TermionStr, render, render_iter

__all__ = [
    "Ansi",
    "AnsiColor",
    "AnsiMode",
    "Color",
    "Effect",
    "Logger",
    "Rgb",
    "Style",
    "StyledStr",
    "TermionStr",
    "render",
    "render_iter",
]
