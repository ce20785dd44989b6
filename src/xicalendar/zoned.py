"""
xicalendar.zoned
----------------
DateTime: an immutable, timezone-aware moment wrapping ``datetime.datetime``.

Fields are read and written as wall-clock values in the moment's own
timezone. The field decomposition is computed once per instance; every
``with_*`` method yields a new instance, so the cache never goes stale.
"""

from __future__ import annotations

import functools
from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional, Union

from dateutil.relativedelta import relativedelta

from .config.settings import default_tzinfo, resolve_timezone
from .core.errors import ParseError, TypeMismatchError
from .core.fields import FieldSet, compose_datetime, days_in_month, iso_week_date
from .core.intervals import IntervalLike, shift
from .core.relative import resolve
from .formats import Format

TimeLike = Union[int, str, datetime, None]


def _to_native(value: TimeLike) -> datetime:
    if value is None:
        return datetime.now(default_tzinfo())
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, bool):
        raise TypeMismatchError(f"Cannot build a DateTime from {value!r}")
    elif isinstance(value, int):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    elif isinstance(value, str):
        dt = resolve(value, datetime.now(default_tzinfo()))
    else:
        raise TypeMismatchError(f"Cannot build a DateTime from {type(value).__name__}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=default_tzinfo())
    return dt


@functools.total_ordering
class DateTime:
    """
    An immutable DateTime object. Wraps a native ``datetime`` and keeps
    interface level compatibility with it to a degree.
    """

    ATOM = Format.ATOM
    COOKIE = Format.COOKIE
    ISO8601 = Format.ISO8601
    RFC822 = Format.RFC822
    RFC850 = Format.RFC850
    RFC1036 = Format.RFC1036
    RFC1123 = Format.RFC1123
    RFC2822 = Format.RFC2822
    RFC3339 = Format.RFC3339
    RSS = Format.RSS
    W3C = Format.W3C
    DEFAULT_FORMAT = Format.ISO8601

    __slots__ = ("_datetime", "_properties")

    def __init__(self, time: TimeLike = None):
        """
        Accepts a unix timestamp (placed in UTC), a free-form date string or
        a native datetime. Naive inputs get the default timezone.
        """
        self._datetime = _to_native(time)
        self._properties: Optional[FieldSet] = None

    @classmethod
    def create(cls, time: TimeLike = None) -> DateTime:
        """Fluent alias for ``DateTime(time)``."""
        return cls(time)

    @classmethod
    def create_from_format(
        cls,
        fmt: str,
        value: str,
        timezone: Optional[Union[str, tzinfo]] = None,
    ) -> DateTime:
        """
        Strictly parse *value* with the strptime pattern *fmt*. *timezone*
        applies when the parsed value carries no offset of its own.
        """
        try:
            dt = datetime.strptime(value, fmt)
        except ValueError as exc:
            raise ParseError(f"{value!r} does not match format {fmt!r}") from exc
        if dt.tzinfo is None and timezone is not None:
            dt = dt.replace(tzinfo=resolve_timezone(timezone))
        return cls(dt)

    def format(self, fmt: str = DEFAULT_FORMAT) -> str:
        return self._datetime.strftime(fmt)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._datetime.isoformat()!r})"

    @property
    def datetime(self) -> datetime:
        """A copy of the wrapped datetime; changing it does not affect this object."""
        return self._datetime.replace()

    @property
    def timestamp(self) -> int:
        return int(self._datetime.timestamp())

    @property
    def offset(self) -> int:
        """UTC offset in seconds."""
        return int(self._datetime.utcoffset().total_seconds())

    @property
    def timezone(self) -> tzinfo:
        return self._datetime.tzinfo

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------

    def properties(self) -> FieldSet:
        """
        Fields of the current moment. Weekdays start from Monday as 1 and
        days of the year from 1.

        Output is cached; safe to call multiple times.
        """
        if self._properties is None:
            self._properties = FieldSet.from_datetime(self._datetime)
        return self._properties

    def get_property(self, name: str) -> int:
        return self.properties().get(name)

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
        return self._datetime.isocalendar().week

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
    # Derivation (all return new values)
    # ---------------------------------------------------------

    def with_modification(self, modification: Callable[[datetime], datetime]) -> DateTime:
        """
        New DateTime from *modification* applied to the wrapped datetime.
        Every other ``with_*`` method goes through here.
        """
        return type(self)(modification(self._datetime))

    def with_properties(self, **changes: int) -> DateTime:
        """
        New DateTime with 'year', 'month', 'day_of_month', 'hour', 'minute'
        and 'second' replaced from *changes*. Out-of-range values roll over.
        """
        fields = self.properties().overlay(changes)
        return self.with_modification(lambda dt: compose_datetime(fields, dt.tzinfo))

    def with_date(self, year: int, month: int, day: int) -> DateTime:
        """Year, month and day. Hour, minute and second are kept."""
        return self.with_properties(year=year, month=month, day_of_month=day)

    def with_iso_date(self, year: int, week: int, day: int = 1) -> DateTime:
        """ISO 8601 year, week and day. Hour, minute and second are kept."""
        target = iso_week_date(year, week, day)
        return self.with_modification(
            lambda dt: dt.replace(year=target.year, month=target.month, day=target.day)
        )

    def with_time(self, hour: int, minute: int, second: int = 0) -> DateTime:
        """Hour, minute and second. The date is kept."""
        return self.with_properties(hour=hour, minute=minute, second=second)

    def with_year(self, year: int) -> DateTime:
        return self.with_properties(year=year)

    def with_month(self, month: int) -> DateTime:
        return self.with_properties(month=month)

    def with_day_of_month(self, day_of_month: int) -> DateTime:
        return self.with_properties(day_of_month=day_of_month)

    def with_day_of_year(self, yday: int) -> DateTime:
        return self.with_properties(month=1, day_of_month=yday)

    def with_week(self, week: int) -> DateTime:
        """With modified ISO 8601 week number."""
        return self.with_iso_date(self.year, week, self.day_of_week)

    def with_day_of_week(self, weekday: int) -> DateTime:
        """weekday: 1 (Monday) through 7 (Sunday)."""
        return self.with_iso_date(self.year, self.week, weekday)

    def with_hour(self, hour: int) -> DateTime:
        return self.with_properties(hour=hour)

    def with_minute(self, minute: int) -> DateTime:
        return self.with_properties(minute=minute)

    def with_second(self, second: int) -> DateTime:
        return self.with_properties(second=second)

    def with_addition(self, interval: IntervalLike) -> DateTime:
        """
        *interval* added. ints (seconds) and timedeltas count elapsed time;
        strings and relativedeltas count calendar units on the wall clock.
        """
        return self.with_modification(lambda dt: shift(dt, interval))

    def with_subtraction(self, interval: IntervalLike) -> DateTime:
        """*interval* subtracted, with the same rules as :meth:`with_addition`."""
        return self.with_modification(lambda dt: shift(dt, interval, -1))

    def modify(self, modification: str) -> DateTime:
        """New DateTime from a relative expression, e.g. ``"+1 year, 2 months"``."""
        return self.with_modification(lambda dt: resolve(modification, dt))

    def diff(self, other: Union[DateTime, datetime]) -> relativedelta:
        """Component-wise difference from this moment to *other*."""
        if isinstance(other, DateTime):
            other = other._datetime
        elif not isinstance(other, datetime):
            raise TypeMismatchError(f"Cannot diff a DateTime against {type(other).__name__}")
        elif other.tzinfo is None:
            other = other.replace(tzinfo=self._datetime.tzinfo)
        return relativedelta(other, self._datetime)

    # ---------------------------------------------------------
    # Comparison by instant
    # ---------------------------------------------------------

    def _instant(self) -> datetime:
        # Same-zone comparisons of aware datetimes ignore fold; UTC does not.
        return self._datetime.astimezone(timezone.utc)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant() == other._instant()

    def __lt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant() < other._instant()

    def __hash__(self) -> int:
        return hash(self._instant())
