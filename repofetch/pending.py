"""Uncommitted changes in the working tree."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from repofetch.info_field import InfoField


class StatusSummary(Enum):
    """How a single path differs between the index and the working tree."""

    REMOVED = auto()
    ADDED = auto()
    COPIED = auto()
    MODIFIED = auto()
    TYPE_CHANGE = auto()
    RENAMED = auto()
    INTENT_TO_ADD = auto()
    CONFLICT = auto()


@dataclass
class PendingInfo(InfoField):
    """Counts of added, deleted and modified paths."""

    added: int = 0
    deleted: int = 0
    modified: int = 0

    @classmethod
    def from_summaries(cls, summaries: Iterable[StatusSummary]) -> PendingInfo:
        """Tally status summaries; a rename counts as one addition and one deletion."""
        added = deleted = modified = 0
        for status in summaries:
            if status is StatusSummary.REMOVED:
                deleted += 1
            elif status in (StatusSummary.ADDED, StatusSummary.COPIED):
                added += 1
            elif status in (StatusSummary.MODIFIED, StatusSummary.TYPE_CHANGE):
                modified += 1
            elif status is StatusSummary.RENAMED:
                added += 1
                deleted += 1
        return cls(added=added, deleted=deleted, modified=modified)

    def __str__(self) -> str:
        parts = []
        if self.modified > 0:
            parts.append(f"{self.modified}+-")
        if self.added > 0:
            parts.append(f"{self.added}+")
        if self.deleted > 0:
            parts.append(f"{self.deleted}-")
        return " ".join(parts)

    def value(self) -> str:
        return str(self)

    def title(self) -> str:
        return "Pending"