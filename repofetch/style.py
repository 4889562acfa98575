"""Terminal colours and text styles rendered as ANSI escape sequences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_RESET = "\x1b[0m"
_RESET_FG = "\x1b[39m"
_RESET_BG = "\x1b[49m"


class AnsiColor(Enum):
    """The sixteen standard terminal colours plus the terminal default.

    Each value is the SGR parameter that selects the colour as foreground;
    adding ten gives the background parameter.
    """

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    DEFAULT = 39
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97


@dataclass(frozen=True)
class Rgb:
    """A 24-bit true colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        if not all(0 <= channel <= 255 for channel in (self.r, self.g, self.b)):
            raise ValueError(f"RGB channels must be in 0..255, got {self}")


_NUMBERED_COLORS = (
    AnsiColor.BLACK,
    AnsiColor.RED,
    AnsiColor.GREEN,
    AnsiColor.YELLOW,
    AnsiColor.BLUE,
    AnsiColor.MAGENTA,
    AnsiColor.CYAN,
    AnsiColor.WHITE,
    AnsiColor.BRIGHT_BLACK,
    AnsiColor.BRIGHT_RED,
    AnsiColor.BRIGHT_GREEN,
    AnsiColor.BRIGHT_YELLOW,
    AnsiColor.BRIGHT_BLUE,
    AnsiColor.BRIGHT_MAGENTA,
    AnsiColor.BRIGHT_CYAN,
    AnsiColor.BRIGHT_WHITE,
)


def _fg_params(color: AnsiColor | Rgb) -> str:
    if isinstance(color, AnsiColor):
        return str(color.value)
    return f"38;2;{color.r};{color.g};{color.b}"


def _bg_params(color: AnsiColor | Rgb) -> str:
    if isinstance(color, AnsiColor):
        return str(color.value + 10)
    return f"48;2;{color.r};{color.g};{color.b}"


@dataclass(frozen=True)
class Style:
    """A foreground colour and optional bold weight applied to text."""

    color: AnsiColor | Rgb | None = None
    bold: bool = False

    def paint(self, text: str) -> str:
        """Return ``text`` wrapped in the escape sequences for this style."""
        params = []
        if self.color is not None:
            params.append(_fg_params(self.color))
        if self.bold:
            params.append("1")
        if not params:
            return text
        return f"\x1b[{';'.join(params)}m{text}{_RESET}"


def num_to_color(num: int) -> AnsiColor:
    """Map a colour number 0..15 to its terminal colour; anything else is the default."""
    if 0 <= num < len(_NUMBERED_COLORS):
        return _NUMBERED_COLORS[num]
    return AnsiColor.DEFAULT


def get_style(is_bold: bool, color: AnsiColor | Rgb) -> Style:
    """Build a style with the given colour, bold when asked."""
    return Style(color=color, bold=is_bold)


def colorize(text: str, color: AnsiColor | Rgb) -> str:
    """Set the foreground colour of ``text``."""
    return f"\x1b[{_fg_params(color)}m{text}{_RESET_FG}"


def on_color(text: str, color: AnsiColor | Rgb) -> str:
    """Set the background colour of ``text``."""
    return f"\x1b[{_bg_params(color)}m{text}{_RESET_BG}"