"""Number and time formatting shared by the info fields."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from enum import Enum

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class NumberSeparator(Enum):
    """How digit groups of large numbers are separated."""

    PLAIN = ""
    COMMA = ","
    SPACE = "\u202f"
    UNDERSCORE = "_"
    DOT = "."


def format_number(number: int, number_separator: NumberSeparator) -> str:
    """Format an integer with thousands grouped by the given separator."""
    return f"{number:,}".replace(",", number_separator.value)


def _period(count: int, unit: str, single: str) -> str:
    return single if count == 1 else f"{count} {unit}s"


def _rough_text(seconds: int) -> str:
    n = abs(seconds)
    if n > 547 * _DAY:
        return _period(max(n // _YEAR, 2), "year", "a year")
    if n > 345 * _DAY:
        return "a year"
    if n > 45 * _DAY:
        return _period(max(n // _MONTH, 2), "month", "a month")
    if n > 29 * _DAY:
        return "a month"
    if n > 10 * _DAY + 12 * _HOUR:
        return _period(max(n // _WEEK, 2), "week", "a week")
    if n > 6 * _DAY + 12 * _HOUR:
        return "a week"
    if n > 36 * _HOUR:
        return _period(max(n // _DAY, 2), "day", "a day")
    if n > 22 * _HOUR:
        return "a day"
    if n > 90 * _MINUTE:
        return _period(max(n // _HOUR, 2), "hour", "an hour")
    if n > 45 * _MINUTE:
        return "an hour"
    if n > 90:
        return _period(max(n // _MINUTE, 2), "minute", "a minute")
    if n > 45:
        return "a minute"
    if n > 10:
        return f"{n} seconds"
    return "now"


def human_time(delta_seconds: int) -> str:
    """Describe a signed offset from now roughly, e.g. ``"a day ago"`` or ``"in 5 minutes"``."""
    text = _rough_text(delta_seconds)
    if -10 <= delta_seconds <= 10:
        return text
    if delta_seconds < 0:
        return f"{text} ago"
    return f"in {text}"


def to_human_time(seconds: int, now: int | None = None) -> str:
    """Describe a Unix timestamp relative to ``now`` (the current time by default)."""
    if now is None:
        now = int(time.time())
    return human_time(seconds - now)


def to_rfc3339(seconds: int) -> str:
    """Format a Unix timestamp as an RFC 3339 UTC date-time."""
    moment = _EPOCH + timedelta(seconds=seconds)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def format_time(seconds: int, iso_time: bool, now: int | None = None) -> str:
    """Format a Unix timestamp either as RFC 3339 or as a relative human description."""
    if iso_time:
        return to_rfc3339(seconds)
    return to_human_time(seconds, now)