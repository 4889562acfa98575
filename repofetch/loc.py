"""The total number of lines of code."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from repofetch.info_field import InfoField
from repofetch.utils import NumberSeparator, format_number


@dataclass
class LocInfo(InfoField):
    """Lines of code summed over every language."""

    lines_of_code: int
    number_separator: NumberSeparator = field(
        default=NumberSeparator.PLAIN, metadata={"skip_serializing": True}
    )

    @classmethod
    def from_loc_by_language(
        cls,
        loc_by_language: Iterable[tuple[Any, int]],
        number_separator: NumberSeparator,
    ) -> LocInfo:
        """Sum the per-language line counts."""
        total = sum(count for _, count in loc_by_language)
        return cls(lines_of_code=total, number_separator=number_separator)

    def value(self) -> str:
        return format_number(self.lines_of_code, self.number_separator)

    def title(self) -> str:
        return "Lines of code"