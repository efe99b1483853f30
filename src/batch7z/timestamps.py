"""Filename-safe timestamp tags."""

from __future__ import annotations

from datetime import datetime
from enum import Enum


class TimestampPrecision(str, Enum):
    DATE = "date"
    SECONDS = "seconds"


_FORMATS = {
    TimestampPrecision.DATE: "%Y-%m-%d",
    # Colons are reserved on Windows, so the time part uses underscores.
    TimestampPrecision.SECONDS: "%Y-%m-%d %H_%M_%S",
}


def timestamp_tag(precision: TimestampPrecision = TimestampPrecision.SECONDS, now: datetime | None = None) -> str:
    """Return the bracketed local-time tag, e.g. ``[2024-01-15 14_30_05]``."""

    moment = now or datetime.now()
    return f"[{moment.strftime(_FORMATS[TimestampPrecision(precision)])}]"


__all__ = ["TimestampPrecision", "timestamp_tag"]
