"""Colours used for the textual part of the output."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from repofetch.style import AnsiColor, Rgb, num_to_color


@dataclass(frozen=True)
class TextColors:
    """Colours of the title, separator, underline, subtitles and info values."""

    title: AnsiColor | Rgb
    separator: AnsiColor | Rgb
    underline: AnsiColor | Rgb
    subtitle: AnsiColor | Rgb
    info: AnsiColor | Rgb

    @classmethod
    def from_codes(
        cls, colors: Sequence[int], logo_primary_color: AnsiColor | Rgb
    ) -> TextColors:
        """Build text colours from colour numbers, falling back to the logo colour or the default.

        Positions are title, separator, underline, subtitle, (unused), info.
        """
        custom = [num_to_color(code) for code in colors]

        def pick(position: int, fallback: AnsiColor | Rgb) -> AnsiColor | Rgb:
            return custom[position] if position < len(custom) else fallback

        return cls(
            title=pick(0, logo_primary_color),
            separator=pick(1, AnsiColor.DEFAULT),
            underline=pick(2, AnsiColor.DEFAULT),
            subtitle=pick(3, logo_primary_color),
            info=pick(5, AnsiColor.DEFAULT),
        )