"""Injectable time sources for the two wall-clock fields of a metadata record."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ


class Clock(typ.Protocol):
    """Anything that can report the current instant."""

    def now(self) -> dt.datetime: ...


class SystemClock:
    """Read the current UTC time from the system clock."""

    def now(self) -> dt.datetime:
        return dt.datetime.now(dt.UTC)


@dc.dataclass(frozen=True, slots=True)
class FixedClock:
    """Always report the same instant; naive values are treated as UTC."""

    instant: dt.datetime

    def now(self) -> dt.datetime:
        if self.instant.tzinfo is None:
            return self.instant.replace(tzinfo=dt.UTC)
        return self.instant


def format_timestamp(instant: dt.datetime) -> str:
    """Format ``instant`` as UTC ISO-8601 with milliseconds and a ``Z`` suffix.

    >>> format_timestamp(dt.datetime(2026, 10, 18, 9, 30, tzinfo=dt.UTC))
    '2026-10-18T09:30:00.000Z'
    """
    utc = instant.astimezone(dt.UTC)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


SYSTEM_CLOCK = SystemClock()

__all__ = ["SYSTEM_CLOCK", "Clock", "FixedClock", "SystemClock", "format_timestamp"]
