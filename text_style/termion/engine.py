# termion/engine.py

from typing import Iterator, Optional, Union

from ..style.definitions import Style, StyledStr
from .sequences import RESET, get_bg, get_effect, get_fg


class TermionStr:
    """
    A styled string rendered with termion's escape sequences.

    str() gives the complete rendering; chunks() yields the same output
    piece by piece so writers can emit it incrementally. Formatting is
    always cleared with the universal reset rather than the per-effect
    "off" sequences, which some terminals do not honor.
    """

    __slots__ = ('s', 'style')

    def __init__(self, s: str, style: Optional[Style] = None):
        self.s = s
        self.style = style

    def chunks(self) -> Iterator[str]:
        style = self.style
        if style is not None:
            if style.fg is not None:
                yield get_fg(style.fg)
            if style.bg is not None:
                yield get_bg(style.bg)
            for effect in style.ordered_effects():
                yield get_effect(effect)
        yield self.s
        if style is not None and not style.is_plain():
            yield RESET

    def __str__(self) -> str:
        return ''.join(self.chunks())

    def __repr__(self) -> str:
        return f"TermionStr({self.s!r}, {self.style!r})"


def termion(value: Union[StyledStr, str]) -> TermionStr:
    """Wrap a StyledStr, or a plain str, for termion rendering."""
    if isinstance(value, str):
        return TermionStr(value)
    if isinstance(value, StyledStr):
        return TermionStr(value.s, value.style)
    raise TypeError(f"Expected StyledStr or str, got {type(value).__name__}")
