# style/definitions.py

from enum import Enum
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterator, Optional, Union


class AnsiColor(Enum):
    """The eight named terminal hues, valued by their palette index."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class AnsiMode(Enum):
    """Intensity of an ANSI hue."""
    DARK = "dark"
    LIGHT = "light"


class Effect(Enum):
    """Text decorations independent of color, in rendering order."""
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"


@dataclass(frozen=True)
class Ansi:
    """A named palette color."""
    color: AnsiColor
    mode: AnsiMode = AnsiMode.DARK

    def __post_init__(self):
        if not isinstance(self.color, AnsiColor):
            raise TypeError(f"Expected AnsiColor, got {self.color!r}")
        if not isinstance(self.mode, AnsiMode):
            raise TypeError(f"Expected AnsiMode, got {self.mode!r}")

    @classmethod
    def dark(cls, color: AnsiColor) -> "Ansi":
        return cls(color, AnsiMode.DARK)

    @classmethod
    def light(cls, color: AnsiColor) -> "Ansi":
        return cls(color, AnsiMode.LIGHT)


@dataclass(frozen=True)
class Rgb:
    """A 24-bit color."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"RGB component '{name}' must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"RGB component '{name}' out of range: {value}")


Color = Union[Ansi, Rgb]


@dataclass(frozen=True)
class Style:
    """
    Foreground, background and effects applied to a piece of text.

    The effect set is unordered; use ordered_effects() wherever output
    order matters.
    """
    fg: Optional[Color] = None
    bg: Optional[Color] = None
    effects: FrozenSet[Effect] = field(default_factory=frozenset)

    def __post_init__(self):
        for name in ("fg", "bg"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, (Ansi, Rgb)):
                raise TypeError(f"Style.{name} must be Ansi, Rgb or None, got {value!r}")
        effects = frozenset(self.effects)
        for effect in effects:
            if not isinstance(effect, Effect):
                raise TypeError(f"Unknown effect: {effect!r}")
        object.__setattr__(self, "effects", effects)

    def ordered_effects(self) -> Iterator[Effect]:
        """Yield the active effects in declaration order."""
        return (effect for effect in Effect if effect in self.effects)

    def is_plain(self) -> bool:
        return self.fg is None and self.bg is None and not self.effects


@dataclass(frozen=True)
class StyledStr:
    """A string with an optional style."""
    s: str
    style: Optional[Style] = None

    def __post_init__(self):
        if not isinstance(self.s, str):
            raise TypeError(f"StyledStr.s must be a str, got {type(self.s).__name__}")
        if self.style is not None and not isinstance(self.style, Style):
            raise TypeError(f"StyledStr.style must be a Style or None, got {self.style!r}")

    @classmethod
    def plain(cls, s: str) -> "StyledStr":
        return cls(s)

    @classmethod
    def styled(cls, s: str, style: Style) -> "StyledStr":
        return cls(s, style)

    def _base_style(self) -> Style:
        return self.style if self.style is not None else Style()

    def with_fg(self, color: Color) -> "StyledStr":
        """Return a copy with the foreground color set."""
        return replace(self, style=replace(self._base_style(), fg=color))

    def on(self, color: Color) -> "StyledStr":
        """Return a copy with the background color set."""
        return replace(self, style=replace(self._base_style(), bg=color))

    def effect(self, effect: Effect) -> "StyledStr":
        style = self._base_style()
        return replace(self, style=replace(style, effects=style.effects | {effect}))

    def bold(self) -> "StyledStr":
        return self.effect(Effect.BOLD)

    def italic(self) -> "StyledStr":
        return self.effect(Effect.ITALIC)

    def underline(self) -> "StyledStr":
        return self.effect(Effect.UNDERLINE)

    def termion(self):
        """Return a TermionStr whose str() is this string in termion's escape sequences."""
        from ..termion.engine import TermionStr
        return TermionStr(self.s, self.style)
