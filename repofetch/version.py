"""The latest release of the project."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from repofetch.info_field import InfoField


def pick_version(tags: Iterable[tuple[str, int]], manifest_version: str | None = None) -> str:
    """Pick the tag whose commit is most recent, else fall back to the manifest version.

    ``tags`` holds ``(short tag name, commit time in Unix seconds)`` pairs.
    Only commits after the epoch count; on equal times the earlier tag wins.
    """
    version = ""
    most_recent = 0
    for name, commit_time in tags:
        if commit_time > most_recent:
            most_recent = commit_time
            version = name
    if version:
        return version
    return manifest_version or ""


@dataclass
class VersionInfo(InfoField):
    """The project version."""

    version: str

    def value(self) -> str:
        return self.version

    def title(self) -> str:
        return "Version"