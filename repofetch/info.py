"""The complete set of repository information and how it is rendered."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from repofetch.info_field import InfoField
from repofetch.style import AnsiColor, Rgb, on_color
from repofetch.text_colors import TextColors
from repofetch.title import Title

_PALETTE = (
    AnsiColor.BLACK,
    AnsiColor.RED,
    AnsiColor.GREEN,
    AnsiColor.YELLOW,
    AnsiColor.BLUE,
    AnsiColor.MAGENTA,
    AnsiColor.CYAN,
    AnsiColor.WHITE,
)
_PALETTE_CELL = "   "


@dataclass
class Info:
    """A title, the info fields in display order, and how to draw them.

    Only the title and the fields are serialised; the remaining attributes
    control the terminal rendering.
    """

    info_fields: list[InfoField]
    text_colors: TextColors
    title: Title | None = None
    no_color_palette: bool = False
    no_bold: bool = False
    separator: str = ""
    dominant_language: str = ""
    ascii_colors: Sequence[AnsiColor | Rgb] = field(default_factory=list)

    def __str__(self) -> str:
        parts = []
        if self.title is not None:
            parts.append(str(self.title))
        parts.extend(
            info_field.write_styled(self.no_bold, self.text_colors, self.separator)
            for info_field in self.info_fields
        )
        if not self.no_color_palette:
            palette = "".join(on_color(_PALETTE_CELL, color) for color in _PALETTE)
            parts.append(f"\n{palette}\n")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Return the serialisable view: the title and every info field."""
        return {
            "title": self.title.serialize() if self.title is not None else None,
            "infoFields": [info_field.serialize() for info_field in self.info_fields],
        }

    def to_json(self) -> str:
        """Return :meth:`to_dict` as pretty-printed JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)