"""The date of the most recent commit."""

from __future__ import annotations

from dataclasses import dataclass

from repofetch.info_field import InfoField
from repofetch.utils import format_time


@dataclass
class LastChangeInfo(InfoField):
    """When the repository was last changed, already formatted."""

    last_change: str

    @classmethod
    def from_time(cls, seconds: int, iso_time: bool) -> LastChangeInfo:
        """Build the field from the Unix time of the most recent commit."""
        return cls(last_change=format_time(seconds, iso_time))

    def value(self) -> str:
        return self.last_change

    def title(self) -> str:
        return "Last change"