# style/__init__.py

from .definitions import (
    Ansi,
    AnsiColor,
    AnsiMode,
    Color,
    Effect,
    Rgb,
    Style,
    StyledStr,
)

__all__ = ['Ansi', 'AnsiColor', 'AnsiMode', 'Color', 'Effect', 'Rgb', 'Style', 'StyledStr']
