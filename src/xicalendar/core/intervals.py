from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Union

from dateutil.relativedelta import relativedelta

from .errors import ParseError, TypeMismatchError
from .relative import parse_relative

IntervalLike = Union[int, str, relativedelta, timedelta]


def _is_elapsed(value: IntervalLike) -> bool:
    return isinstance(value, timedelta) or (isinstance(value, int) and not isinstance(value, bool))


def to_interval(value: IntervalLike) -> relativedelta:
    """
    Coerce *value* to a calendar interval.

    int          -> that many seconds
    str          -> relative expression, e.g. "1 hour 2 minutes 3 seconds"
    timedelta    -> same length, expressed in days/seconds
    relativedelta -> unchanged
    """
    if isinstance(value, relativedelta):
        return value
    if isinstance(value, timedelta):
        return relativedelta(days=value.days, seconds=value.seconds, microseconds=value.microseconds)
    if isinstance(value, bool):
        raise TypeMismatchError(f"Cannot use {value!r} as an interval")
    if isinstance(value, int):
        return relativedelta(seconds=value)
    if isinstance(value, str):
        interval = parse_relative(value)
        if interval is None:
            raise ParseError(f"Not an interval description: {value!r}")
        return interval
    raise TypeMismatchError(f"Cannot use {type(value).__name__} as an interval")


def shift(dt: datetime, value: IntervalLike, sign: int = 1) -> datetime:
    """
    *dt* moved by *value* (backwards when sign is negative).

    ints and timedeltas are elapsed time and are applied on the UTC timeline,
    so they stay exact across DST changes. Strings and relativedeltas are
    calendar units applied to the wall clock.
    """
    if _is_elapsed(value):
        elapsed = value if isinstance(value, timedelta) else timedelta(seconds=value)
        return (dt.astimezone(timezone.utc) + sign * elapsed).astimezone(dt.tzinfo)
    delta = to_interval(value)
    return dt + delta if sign >= 0 else dt - delta
