"""Lines-of-code statistics gathered per language."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

MARKDOWN = "Markdown"


class NoSourceCodeError(ValueError):
    """Raised when no language in the repository has any line of code."""

    def __init__(self) -> None:
        super().__init__("Could not find any source code in this repository")


@dataclass
class LanguageStats:
    """Line counts of one language or one file.

    ``blobs`` holds code of other languages embedded in it, such as a
    shell snippet inside a Markdown cell. ``children`` maps a language
    name to the per-file reports of that language found inside this one.
    """

    code: int = 0
    comments: int = 0
    blanks: int = 0
    blobs: dict[str, LanguageStats] = field(default_factory=dict)
    children: dict[str, list[LanguageStats]] = field(default_factory=dict)

    def summarise(self) -> LanguageStats:
        """Return the stats with every embedded blob folded into the totals."""
        code, comments, blanks = self.code, self.comments, self.blanks
        for blob in self.blobs.values():
            summary = blob.summarise()
            code += summary.code
            comments += summary.comments
            blanks += summary.blanks
        return LanguageStats(code=code, comments=comments, blanks=blanks)


def _counted_lines(language_name: str, code: int, comments: int) -> int:
    # Prose in Markdown is parsed as comments but is the content that matters.
    if language_name == MARKDOWN:
        return code + comments
    return code


def loc_of(language_name: str, stats: LanguageStats) -> int:
    """Count the lines of code of a language, including languages nested inside it."""
    total = _counted_lines(language_name, stats.code, stats.comments)
    for child_name, reports in stats.children.items():
        for report in reports:
            summary = report.summarise()
            total += _counted_lines(child_name, summary.code, summary.comments)
    return total


def get_loc_by_language(languages: Mapping[str, LanguageStats]) -> dict[str, int]:
    """Map each language with code to its line count.

    Raises :class:`NoSourceCodeError` when no language has any.
    """
    loc_by_language = {
        name: loc
        for name, loc in ((name, loc_of(name, stats)) for name, stats in languages.items())
        if loc > 0
    }
    if sum(loc_by_language.values()) == 0:
        raise NoSourceCodeError()
    return loc_by_language


def sort_by_loc(loc_by_language: Mapping[str, int]) -> list[tuple[str, int]]:
    """Return ``(language, loc)`` pairs with the most lines first."""
    return sorted(loc_by_language.items(), key=lambda pair: pair[1], reverse=True)


def get_total_loc(loc_by_language: Iterable[tuple[str, int]]) -> int:
    """Sum the line counts of every language."""
    return sum(count for _, count in loc_by_language)


def get_main_language(loc_by_language: Iterable[tuple[str, int]]) -> str:
    """Return the language listed first, the dominant one in a sorted list."""
    for language, _ in loc_by_language:
        return language
    raise ValueError("no languages to choose from")