"""Size of the files tracked in the index."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from repofetch.info_field import InfoField
from repofetch.utils import NumberSeparator, format_number

_BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def bytes_to_human_readable(num_bytes: int) -> str:
    """Format a byte count in the largest fitting binary unit, with at most two decimals."""
    if num_bytes < 0:
        raise ValueError("byte count cannot be negative")
    exponent = 0
    while exponent + 1 < len(_BINARY_UNITS) and num_bytes >= 1024 ** (exponent + 1):
        exponent += 1
    if exponent == 0:
        return f"{num_bytes} B"
    amount = f"{num_bytes / 1024**exponent:.2f}".rstrip("0").rstrip(".")
    return f"{amount} {_BINARY_UNITS[exponent]}"


@dataclass
class SizeInfo(InfoField):
    """Human-readable total size and number of tracked files."""

    repo_size: str
    file_count: int
    number_separator: NumberSeparator = field(
        default=NumberSeparator.PLAIN, metadata={"skip_serializing": True}
    )

    @classmethod
    def from_entry_sizes(
        cls, sizes: Iterable[int], number_separator: NumberSeparator
    ) -> SizeInfo:
        """Build the field from the sizes of the index entries."""
        total = 0
        count = 0
        for size in sizes:
            total += size
            count += 1
        return cls(
            repo_size=bytes_to_human_readable(total),
            file_count=count,
            number_separator=number_separator,
        )

    def __str__(self) -> str:
        if self.file_count == 0:
            return self.repo_size
        if self.file_count == 1:
            return f"{self.repo_size} (1 file)"
        return f"{self.repo_size} ({format_number(self.file_count, self.number_separator)} files)"

    def value(self) -> str:
        return str(self)

    def title(self) -> str:
        return "Size"