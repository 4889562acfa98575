"""The remote URL of the repository."""

from __future__ import annotations

import re
from dataclasses import dataclass

from repofetch.info_field import InfoField

_TOKEN_PATTERN = re.compile(r"(https?://)([^@]+@)")
_SSH_PATTERN = re.compile(r"([^@]+)@([^:]+):(.*)")


def remove_token_from_url(url: str) -> str:
    """Drop the credentials between the scheme and the host of an HTTP(S) URL."""
    return _TOKEN_PATTERN.sub(r"\1", url, count=1)


def create_http_url_from_ssh(url: str) -> str:
    """Turn an scp-like ``user@host:path`` URL into ``https://host/path``."""
    return _SSH_PATTERN.sub(r"https://\2/\3", url, count=1)


def format_url(url: str, hide_token: bool, http_url: bool) -> str:
    """Optionally strip credentials and convert SSH URLs to HTTPS."""
    formatted = remove_token_from_url(url) if hide_token else url
    if http_url and not formatted.startswith("http"):
        return create_http_url_from_ssh(formatted)
    return formatted


@dataclass
class UrlInfo(InfoField):
    """The URL of the ``origin`` remote."""

    repo_url: str

    def value(self) -> str:
        return self.repo_url

    def title(self) -> str:
        return "URL"