"""The license the project is published under."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from repofetch.info_field import InfoField

LICENSE_FILES = ("LICENSE", "LICENCE", "COPYING")


def is_license_file(file_name: str) -> bool:
    """Tell whether a file name looks like that of a license file."""
    return file_name.startswith(LICENSE_FILES)


def find_license_files(directory: str | Path) -> list[Path]:
    """Return the regular files directly inside ``directory`` that look like license files.

    The result is sorted by file name.
    """
    return sorted(
        (
            entry
            for entry in Path(directory).iterdir()
            if entry.is_file() and is_license_file(entry.name)
        ),
        key=lambda entry: entry.name,
    )


@dataclass
class LicenseInfo(InfoField):
    """The detected license names, comma separated."""

    license: str

    def value(self) -> str:
        return self.license

    def title(self) -> str:
        return "License"