"""
xicalendar.plain
----------------
Date: an immutable unix timestamp with calendar-field accessors.

Fields are read and written in the process-local timezone (``time.localtime``
and ``time.mktime``). Every ``set_*`` method returns a new Date.
"""

from __future__ import annotations

import functools
from datetime import datetime
from time import localtime, strftime
from time import time as _clock
from typing import Any, Optional, Union

from .config.settings import get_settings
from .core.fields import FieldSet, decompose, days_in_month, recompose
from .core.relative import resolve


def _is_instant(value: Any) -> bool:
    try:
        return str(value) == str(int(value))
    except (TypeError, ValueError):
        return False


@functools.total_ordering
class Date:
    """
    Provides facilities similar to ``time``/``datetime`` but with the ability
    to deal with specific fields of the date. Immutable; all setter methods
    yield new Date objects.
    """

    __slots__ = ("_time", "_format")

    def __init__(self, time: Union[int, str, None] = None, fmt: Optional[str] = None):
        """
        time: unix timestamp, or a string accepted by the free-form parser.
            None means now.
        fmt: default presentation pattern (strftime).
        """
        if time is None:
            ts = int(_clock())
        elif _is_instant(time):
            ts = int(time)
        else:
            ts = int(resolve(str(time), datetime.now()).timestamp())
        self._time = ts
        self._format = fmt if fmt is not None else get_settings().date_format

    def _new(self, ts: int) -> Date:
        return type(self)(ts, self._format)

    @property
    def timestamp(self) -> int:
        return self._time

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------

    def properties(self) -> FieldSet:
        """
        Fields of the current date. Weekdays start from Monday as 1 and days
        of the year from 1. Recomputed on every call.
        """
        return decompose(self._time)

    def get_property(self, name: str) -> int:
        return self.properties().get(name)

    def set_properties(self, **changes: int) -> Date:
        """
        New Date with 'year', 'month', 'day_of_month', 'hour', 'minute' and
        'second' replaced from *changes*; unnamed fields keep current values.
        Out-of-range values roll over (month=13 is January next year).
        """
        return self._new(recompose(self.properties().overlay(changes)))

    def set_property(self, name: str, value: int) -> Date:
        return self.set_properties(**{name: value})

    @property
    def day_of_month(self) -> int:
        return self.get_property("day_of_month")

    @property
    def days_in_month(self) -> int:
        p = self.properties()
        return days_in_month(p.year, p.month)

    @property
    def day_of_year(self) -> int:
        return self.get_property("day_of_year")

    @property
    def week(self) -> int:
        """ISO 8601 week number, 1..53."""
        return datetime.fromtimestamp(self._time).isocalendar().week

    @property
    def day_of_week(self) -> int:
        """1 (Monday) through 7 (Sunday)."""
        return self.get_property("day_of_week")

    @property
    def month(self) -> int:
        return self.get_property("month")

    @property
    def year(self) -> int:
        return self.get_property("year")

    @property
    def hour(self) -> int:
        return self.get_property("hour")

    @property
    def minute(self) -> int:
        return self.get_property("minute")

    @property
    def second(self) -> int:
        return self.get_property("second")

    # ---------------------------------------------------------
    # Setters (all return new values)
    # ---------------------------------------------------------

    def set_iso_date(self, year: int, week: int, day: int = 1) -> Date:
        """ISO 8601 year, week and day. Hour, minute and second are kept."""
        p = self.properties()
        description = "%04d-W%02d-%dT%02d:%02d:%02d" % (year, week, day, p.hour, p.minute, p.second)
        return self._new(int(resolve(description, datetime.fromtimestamp(self._time)).timestamp()))

    def set_date(self, year: int, month: int, day: int) -> Date:
        """Year, month and day. Hour, minute and second are kept."""
        return self.set_properties(year=year, month=month, day_of_month=day)

    def set_day_of_month(self, mday: int) -> Date:
        return self.set_property("day_of_month", mday)

    def set_day_of_year(self, yday: int) -> Date:
        # January plus day overflow lands on the right day of the year.
        return self.set_properties(month=1, day_of_month=yday)

    def set_week(self, week: int) -> Date:
        p = self.properties()
        return self.set_iso_date(p.year, week, p.day_of_week)

    def set_day_of_week(self, weekday: int) -> Date:
        """weekday: 1 (Monday) through 7 (Sunday)."""
        return self.set_iso_date(self.year, self.week, weekday)

    def set_month(self, month: int) -> Date:
        return self.set_property("month", month)

    def set_year(self, year: int) -> Date:
        return self.set_property("year", year)

    def set_hour(self, hour: int) -> Date:
        return self.set_property("hour", hour)

    def set_minute(self, minute: int) -> Date:
        return self.set_property("minute", minute)

    def set_second(self, second: int) -> Date:
        return self.set_property("second", second)

    # ---------------------------------------------------------
    # Presentation
    # ---------------------------------------------------------

    @property
    def fmt(self) -> str:
        return self._format

    def set_format(self, fmt: str) -> Date:
        """Same instant, different default presentation pattern."""
        return type(self)(self._time, fmt)

    def format(self, fmt: Optional[str] = None) -> str:
        if fmt is None:
            fmt = self._format
        return strftime(fmt, localtime(self._time))

    def modify(self, description: str) -> Date:
        """Alter the timestamp, e.g. ``modify("+1 week")``."""
        return self._new(int(resolve(description, datetime.fromtimestamp(self._time)).timestamp()))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._time!r}, fmt={self._format!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._time == other._time

    def __lt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._time < other._time

    def __hash__(self) -> int:
        return hash(self._time)
