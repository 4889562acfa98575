"""Project name with its branch and tag counts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from urllib.parse import urlsplit

from repofetch.info_field import InfoField
from repofetch.utils import NumberSeparator, format_number


def _url_path(repo_url: str) -> str:
    if "://" in repo_url:
        return urlsplit(repo_url).path
    host, sep, rest = repo_url.partition(":")
    if sep and "/" not in host:
        return rest
    return repo_url


def get_repo_name(repo_url: str, manifest_name: str | None = None) -> str:
    """Derive the repository name from its remote URL, falling back to the manifest name."""
    if not repo_url:
        return ""
    path = PurePosixPath(_url_path(repo_url))
    repo_name = path.stem if path.name else ""
    if repo_name:
        return repo_name
    return manifest_name or ""


def _counted(count: int, singular: str, plural: str, number_separator: NumberSeparator) -> str:
    if count == 0:
        return ""
    if count == 1:
        return f"1 {singular}"
    return f"{format_number(count, number_separator)} {plural}"


@dataclass
class ProjectInfo(InfoField):
    """The repository name and how many remote branches and tags it has."""

    repo_name: str
    number_of_branches: int = 0
    number_of_tags: int = 0
    number_separator: NumberSeparator = NumberSeparator.PLAIN
    separator: str = ""

    def __str__(self) -> str:
        if not self.repo_name:
            return ""
        branches = _counted(
            self.number_of_branches, "branch", "branches", self.number_separator
        )
        tags = _counted(self.number_of_tags, "tag", "tags", self.number_separator)
        if not branches and not tags:
            return self.repo_name
        if not branches or not tags:
            return f"{self.repo_name} ({tags}{branches})"
        return f"{self.repo_name} ({branches}, {tags})"

    def value(self) -> str:
        return str(self)

    def title(self) -> str:
        return "Project"