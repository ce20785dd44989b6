# tests/test_intervals.py

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest
from dateutil.relativedelta import relativedelta

from xicalendar.core.errors import ParseError, TypeMismatchError
from xicalendar.core.intervals import shift, to_interval

HEL = ZoneInfo("Europe/Helsinki")


def test_int_is_seconds():
    assert to_interval(10) == relativedelta(seconds=10)
    assert to_interval(3723) == relativedelta(hours=1, minutes=2, seconds=3)


def test_string_is_relative_expression():
    assert to_interval("1 hour 2 minutes 3 seconds") == relativedelta(hours=1, minutes=2, seconds=3)


def test_timedelta_is_converted():
    assert to_interval(timedelta(days=1, seconds=5)) == relativedelta(days=1, seconds=5)


def test_relativedelta_passes_through():
    rd = relativedelta(months=1)
    assert to_interval(rd) is rd


def test_unparseable_string():
    with pytest.raises(ParseError):
        to_interval("2011-02-03")


@pytest.mark.parametrize("value", [1.5, None, True, [10]])
def test_unsupported_types(value):
    with pytest.raises(TypeMismatchError):
        to_interval(value)


def test_shift_elapsed_time_across_spring_forward():
    # Clocks go from 03:00 to 04:00 on 2011-03-27.
    dt = datetime(2011, 3, 27, 2, 30, tzinfo=HEL)
    assert shift(dt, 3600) == datetime(2011, 3, 27, 4, 30, tzinfo=HEL)
    assert shift(dt, timedelta(hours=1)).utcoffset() == timedelta(hours=3)


def test_shift_calendar_units_keep_wall_clock():
    dt = datetime(2011, 3, 26, 12, 0, tzinfo=HEL)
    assert shift(dt, "1 day").hour == 12
    assert shift(dt, relativedelta(days=1)).hour == 12
    assert shift(dt, 86400).hour == 13


def test_shift_backwards():
    dt = datetime(2011, 3, 27, 4, 30, tzinfo=HEL)
    assert shift(dt, 3600, -1) == datetime(2011, 3, 27, 2, 30, tzinfo=HEL)
    assert shift(dt, "1 hour", -1).hour == 3


def test_shift_rejects_bool():
    with pytest.raises(TypeMismatchError):
        shift(datetime(2011, 3, 27, tzinfo=HEL), True)
