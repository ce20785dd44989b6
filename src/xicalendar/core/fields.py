"""
xicalendar.core.fields
----------------------
Decomposition of an instant into calendar fields and the reverse trip.

Field conventions seen by callers (independent of the host library):
  day_of_year  1..366
  day_of_week  1 (Monday) .. 7 (Sunday)

Python's ``struct_time`` already counts ``tm_yday`` from 1 but numbers
``tm_wday`` from Monday=0, so only the weekday is shifted on the read path.
Neither derived field is ever fed back into recomposition.
"""

from __future__ import annotations

import calendar
import logging
import time
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, tzinfo
from typing import Dict, Optional

from .errors import UnknownFieldError

logger = logging.getLogger(__name__)

# Fields consumed by recomposition, in mktime() parameter order.
WRITABLE_FIELDS = ("hour", "minute", "second", "month", "day_of_month", "year")
DERIVED_FIELDS = ("day_of_year", "day_of_week")


@dataclass(frozen=True)
class FieldSet:
    year: int
    month: int
    day_of_month: int
    day_of_year: int
    day_of_week: int
    hour: int
    minute: int
    second: int
    # tm_isdst of the decomposed instant: 1, 0, or -1 when unknown. Picks the
    # right occurrence of a repeated wall-clock hour; never set by callers.
    is_dst: int = -1

    @classmethod
    def from_struct_time(cls, st: time.struct_time) -> FieldSet:
        return cls(
            year=st.tm_year,
            month=st.tm_mon,
            day_of_month=st.tm_mday,
            day_of_year=st.tm_yday,
            day_of_week=st.tm_wday + 1,
            hour=st.tm_hour,
            minute=st.tm_min,
            second=st.tm_sec,
            is_dst=st.tm_isdst,
        )

    @classmethod
    def from_datetime(cls, dt: datetime) -> FieldSet:
        return cls.from_struct_time(dt.timetuple())

    def get(self, name: str) -> int:
        if name not in WRITABLE_FIELDS and name not in DERIVED_FIELDS:
            raise UnknownFieldError(f"Unknown field '{name}'. Available: {sorted(WRITABLE_FIELDS + DERIVED_FIELDS)}")
        return getattr(self, name)

    def overlay(self, changes: Dict[str, int]) -> FieldSet:
        """
        Fields named in *changes* replace the current ones; the rest are kept.
        The DST flag only survives when no field actually changes.
        """
        for name in changes:
            if name not in WRITABLE_FIELDS:
                raise UnknownFieldError(f"Field '{name}' is not writable. Writable: {sorted(WRITABLE_FIELDS)}")
        if any(getattr(self, name) != value for name, value in changes.items()):
            return replace(self, is_dst=-1, **changes)
        return self


def decompose(timestamp: int) -> FieldSet:
    """Local-time fields of a unix timestamp."""
    return FieldSet.from_struct_time(time.localtime(timestamp))


def recompose(fields: FieldSet) -> int:
    """
    Local-time fields back to a unix timestamp via mktime().

    Out-of-range components roll over the way the C library normalizes them
    (month 13 is January of the following year, day 34 of January is
    February 3rd). Years mktime() cannot represent raise OverflowError.
    """
    ts = int(time.mktime((
        fields.year,
        fields.month,
        fields.day_of_month,
        fields.hour,
        fields.minute,
        fields.second,
        0, 0, fields.is_dst,
    )))
    logger.debug("Recomposed %s into %d", fields, ts)
    return ts


def compose_datetime(fields: FieldSet, tz: Optional[tzinfo]) -> datetime:
    """
    Wall-clock fields in *tz* back to an aware datetime.

    Mirrors mktime() normalization: the month overflows into the year, and
    day/hour/minute/second overflow is carried by plain addition. A known
    DST flag selects the matching fold of an ambiguous wall-clock time.
    """
    carry, month0 = divmod(fields.month - 1, 12)
    base = datetime(fields.year + carry, month0 + 1, 1, tzinfo=tz)
    dt = base + timedelta(
        days=fields.day_of_month - 1,
        hours=fields.hour,
        minutes=fields.minute,
        seconds=fields.second,
    )
    if fields.is_dst >= 0:
        for candidate in (dt.replace(fold=0), dt.replace(fold=1)):
            offset = candidate.dst()
            if offset is not None and bool(offset) == bool(fields.is_dst):
                dt = candidate
                break
    logger.debug("Composed %s into %s", fields, dt.isoformat())
    return dt


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def iso_week_date(year: int, week: int, day: int) -> datetime:
    """
    Naive midnight of ISO (year, week, day). Week and day overflow roll into
    neighbouring weeks/years instead of raising.
    """
    jan4 = datetime(year, 1, 4)
    monday = jan4 - timedelta(days=jan4.weekday())
    return monday + timedelta(weeks=week - 1, days=day - 1)
