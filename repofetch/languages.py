"""Share of each programming language, with a coloured bar."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from repofetch.info_field import InfoField
from repofetch.style import AnsiColor, Rgb, colorize, on_color

LANGUAGES_BAR_LENGTH = 26
DEFAULT_CHIP_ICON = "\u25cf"

_DEFAULT_PALETTE = (
    AnsiColor.RED,
    AnsiColor.GREEN,
    AnsiColor.YELLOW,
    AnsiColor.BLUE,
    AnsiColor.MAGENTA,
    AnsiColor.CYAN,
)


@dataclass
class LanguageWithPercentage:
    """A language and the percentage of the code written in it.

    ``chip_color`` is the language's own colour, used in true-colour mode;
    ``nerd_font_icon`` is its Nerd Font glyph, if it has one.
    """

    language: str
    percentage: float
    chip_color: AnsiColor | Rgb | None = field(
        default=None, metadata={"skip_serializing": True}
    )
    nerd_font_icon: str | None = field(default=None, metadata={"skip_serializing": True})

    def _chip_icon(self, nerd_fonts: bool) -> str:
        if nerd_fonts and self.nerd_font_icon:
            return self.nerd_font_icon
        return DEFAULT_CHIP_ICON


@dataclass
class LanguageDisplayData:
    """What is drawn for one language: name, share, chip colour and icon."""

    language: str
    percentage: float
    chip_color: AnsiColor | Rgb
    chip_icon: str


@dataclass
class LanguagesInfo(InfoField):
    """Languages of the repository with their share of the code."""

    languages_with_percentage: list[LanguageWithPercentage]
    true_color: bool = field(default=False, metadata={"skip_serializing": True})
    number_of_languages_to_display: int = field(default=6, metadata={"skip_serializing": True})
    info_color: AnsiColor | Rgb = field(
        default=AnsiColor.DEFAULT, metadata={"skip_serializing": True}
    )
    nerd_fonts: bool = field(default=False, metadata={"skip_serializing": True})
    percent_verbosity: int = field(default=1, metadata={"skip_serializing": True})
    separator_length: int = field(default=1, metadata={"skip_serializing": True})

    @classmethod
    def from_loc(
        cls,
        loc_by_language: Iterable[tuple[str, int]],
        true_color: bool,
        number_of_languages_to_display: int,
        info_color: AnsiColor | Rgb,
        nerd_fonts: bool,
        percent_verbosity: int,
        separator_length: int,
    ) -> LanguagesInfo:
        """Turn per-language line counts into percentages, keeping their order."""
        pairs = list(loc_by_language)
        total = sum(count for _, count in pairs)
        languages = [
            LanguageWithPercentage(
                language=language,
                percentage=count / total * 100 if total else math.nan,
            )
            for language, count in pairs
        ]
        return cls(
            languages_with_percentage=languages,
            true_color=true_color,
            number_of_languages_to_display=number_of_languages_to_display,
            info_color=info_color,
            nerd_fonts=nerd_fonts,
            percent_verbosity=percent_verbosity,
            separator_length=separator_length,
        )

    def __str__(self) -> str:
        languages = prepare_languages(self, _DEFAULT_PALETTE)
        text = build_language_bar(languages)
        indent = " " * (len(self.title()) + self.separator_length + 1)
        for index, data in enumerate(languages):
            number = f"{data.percentage:.{self.percent_verbosity}f}"
            chip = colorize(data.chip_icon, data.chip_color)
            label = colorize(f"{data.language} ({number} %)", self.info_color)
            language_str = f"{chip} {label} "
            if index % 2 == 0:
                text += f"\n{indent}{language_str}"
            else:
                text += language_str.rstrip()
        return text

    def value(self) -> str:
        return str(self)

    def title(self) -> str:
        return "Languages" if len(self.languages_with_percentage) > 1 else "Language"


def prepare_languages(
    languages_info: LanguagesInfo, color_palette: Sequence[AnsiColor | Rgb]
) -> list[LanguageDisplayData]:
    """Choose colours and icons; languages past the display limit are merged into "Other"."""
    prepared = []
    for index, entry in enumerate(languages_info.languages_with_percentage):
        if languages_info.true_color and entry.chip_color is not None:
            chip_color = entry.chip_color
        else:
            chip_color = color_palette[index % len(color_palette)]
        prepared.append(
            LanguageDisplayData(
                language=entry.language,
                percentage=entry.percentage,
                chip_color=chip_color,
                chip_icon=entry._chip_icon(languages_info.nerd_fonts),
            )
        )

    limit = languages_info.number_of_languages_to_display
    if len(prepared) <= limit:
        return prepared
    shown, rest = prepared[:limit], prepared[limit:]
    other = sum((data.percentage for data in rest), 0.0)
    shown.append(
        LanguageDisplayData(
            language="Other",
            percentage=other,
            chip_color=AnsiColor.WHITE,
            chip_icon=DEFAULT_CHIP_ICON,
        )
    )
    return shown


def _bar_width(percentage: float) -> int:
    return max(math.floor(percentage / 100 * LANGUAGES_BAR_LENGTH + 0.5), 1)


def build_language_bar(languages: Iterable[LanguageDisplayData]) -> str:
    """Draw one coloured segment per language, at least one cell wide each."""
    return "".join(
        on_color(" " * _bar_width(data.percentage), data.chip_color) for data in languages
    )