"""Short x-axis labels from ISO timestamps."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from enum import Enum
from typing import Any

from sparkline.core.errors import InvalidInput

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class Granularity(str, Enum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


_STRFTIME = {
    Granularity.YEAR: "%y",
    Granularity.MONTH: "%m",
    Granularity.HOUR: "%H",
    Granularity.MINUTE: "%M",
    Granularity.SECOND: "%S",
}


def parse_timestamp(s: str) -> datetime:
    """Parse an ISO-8601 extended timestamp (``2024-01-15T10:30:00Z``)."""
    if not isinstance(s, str) or not s:
        raise InvalidInput(f"Expected an ISO timestamp string, got {s!r}")
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError as e:
        raise InvalidInput(f"Invalid ISO timestamp {s!r}: {e}") from e


def format_component(dt: datetime, granularity: Granularity | str) -> str:
    try:
        granularity = Granularity(granularity)
    except ValueError:
        return ""
    if granularity is Granularity.DAY:
        return WEEKDAYS[dt.weekday()][:2]
    return dt.strftime(_STRFTIME[granularity])


def time_label(timestamp: str, granularity: Granularity | str = Granularity.DAY) -> str:
    """Two-letter weekday for ``day``, zero-padded number otherwise, ``""`` if unknown."""
    return format_component(parse_timestamp(timestamp), granularity)


def time_labels(timestamp: Callable[[Any], str],
                granularity: Granularity | str = Granularity.DAY
                ) -> Callable[[Sequence[Any]], list[str]]:
    """Build an ``x_labels`` strategy reading each point's timestamp."""
    def labels(series: Sequence[Any]) -> list[str]:
        return [time_label(timestamp(point), granularity) for point in series]
    return labels
