"""The common interface of every line of repository information."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from repofetch.style import get_style
from repofetch.text_colors import TextColors


class InfoType(Enum):
    """The kinds of information fields, named as on the command line."""

    PROJECT = "project"
    DESCRIPTION = "description"
    HEAD = "head"
    PENDING = "pending"
    VERSION = "version"
    CREATED = "created"
    LANGUAGES = "languages"
    DEPENDENCIES = "dependencies"
    AUTHORS = "authors"
    LAST_CHANGE = "last-change"
    CONTRIBUTORS = "contributors"
    URL = "url"
    COMMITS = "commits"
    CHURN = "churn"
    LINES_OF_CODE = "lines-of-code"
    SIZE = "size"
    LICENSE = "license"


def _camel_case(name: str) -> str:
    first, *rest = name.split("_")
    return first + "".join(part.capitalize() for part in rest)


def _public_fields(obj: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(obj):
        return {
            field.name: getattr(obj, field.name)
            for field in dataclasses.fields(obj)
            if not field.metadata.get("skip_serializing", False)
        }
    return {name: value for name, value in vars(obj).items() if not name.startswith("_")}


def _to_plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value if isinstance(value.value, str) else value.name
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {_camel_case(name): _to_plain(item) for name, item in _public_fields(value).items()}
    return value


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class InfoField(ABC):
    """A titled piece of repository information.

    Subclasses are usually dataclasses; fields whose metadata holds
    ``skip_serializing=True`` are left out of :meth:`serialize`.
    """

    @abstractmethod
    def value(self) -> str:
        """The text shown for this field; empty when there is nothing to show."""

    @abstractmethod
    def title(self) -> str:
        """The label shown before the value."""

    def write_styled(self, no_bold: bool, text_colors: TextColors, separator: str) -> str:
        """Return the styled line for this field, or an empty string if it has no value."""
        styled_value = self.style_value(text_colors)
        if styled_value is None:
            return ""
        return f"{self.style_title(text_colors, no_bold, separator)} {styled_value}\n"

    def style_title(self, text_colors: TextColors, no_bold: bool, separator: str) -> str:
        """Return the styled title followed by the styled separator."""
        subtitle_style = get_style(not no_bold, text_colors.subtitle)
        separator_style = get_style(not no_bold, text_colors.separator)
        return subtitle_style.paint(self.title()) + separator_style.paint(separator)

    def style_value(self, text_colors: TextColors) -> str | None:
        """Return the value styled line by line, or None if it is empty."""
        value = self.value()
        if not value:
            return None
        style = get_style(False, text_colors.info)
        return "\n".join(style.paint(line) for line in _lines(value))

    def serialize(self) -> dict[str, Any]:
        """Return the field as ``{type name: {camelCase field: value}}``."""
        return {
            type(self).__name__: {
                _camel_case(name): _to_plain(item) for name, item in _public_fields(self).items()
            }
        }