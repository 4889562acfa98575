"""The heading line: committer name and git version, underlined."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from repofetch.style import AnsiColor, Rgb, colorize, get_style


@dataclass
class Title:
    """Committer name and git version shown above the info fields."""

    git_username: str
    git_version: str
    title_color: AnsiColor | Rgb = AnsiColor.DEFAULT
    separator: str = ""
    separator_color: AnsiColor | Rgb = AnsiColor.DEFAULT
    underline_color: AnsiColor | Rgb = AnsiColor.DEFAULT
    is_bold: bool = True

    def __str__(self) -> str:
        if not self.git_username and not self.git_version:
            return ""
        info_length = len(self.git_username) + len(self.git_version)
        title_style = get_style(self.is_bold, self.title_color)
        if self.git_username and self.git_version:
            separator_style = get_style(self.is_bold, self.separator_color)
            text = (
                f"{title_style.paint(self.git_username)}"
                f"{separator_style.paint(self.separator)} "
                f"{title_style.paint(self.git_version)}"
            )
            length = info_length + 3
        else:
            text = f"{title_style.paint(self.git_username)}{title_style.paint(self.git_version)}"
            length = info_length
        underline = colorize("-" * length, self.underline_color)
        return f"{text}\n{underline}\n"

    def serialize(self) -> dict[str, Any]:
        """Return the serialisable part of the title."""
        return {"gitUsername": self.git_username, "gitVersion": self.git_version}