# tests/test_plain.py
#
# Dates are read in the process-local timezone, so every test pins it.

import time

import pytest

from xicalendar import CalendarSettings, Date, ParseError, UnknownFieldError, set_settings

SAMPLE_DATE = "2011-02-03 13:37:00"
SAMPLE_TS = 1296733020


@pytest.fixture
def sample(helsinki_tz) -> Date:
    return Date(SAMPLE_DATE)


def test_construct_from_string(sample):
    assert sample.timestamp == SAMPLE_TS


def test_construct_from_instant(helsinki_tz):
    assert Date(SAMPLE_TS).timestamp == SAMPLE_TS
    # A string that reads back as its own integer is a literal instant.
    assert Date(str(SAMPLE_TS)).timestamp == SAMPLE_TS


def test_construct_now(helsinki_tz):
    assert abs(Date().timestamp - time.time()) <= 2


def test_construct_relative_to_now(helsinki_tz):
    assert abs(Date("+1 day").timestamp - (time.time() + 86400)) <= 2


def test_construct_unparseable(helsinki_tz):
    with pytest.raises(ParseError):
        Date("not a date at all")


def test_fields(sample):
    assert sample.day_of_month == 3
    assert sample.days_in_month == 28
    assert sample.day_of_year == 34
    assert sample.week == 5
    assert sample.day_of_week == 4
    assert sample.year == 2011
    assert sample.month == 2
    assert sample.hour == 13
    assert sample.minute == 37
    assert sample.second == 0


def test_sunday_is_day_seven(helsinki_tz):
    assert Date("2011-02-06 12:00:00").day_of_week == 7


def test_get_property(sample):
    assert sample.get_property("day_of_year") == 34
    with pytest.raises(UnknownFieldError):
        sample.get_property("yday")


def test_set_properties_without_changes_keeps_instant(sample):
    assert sample.set_properties().timestamp == SAMPLE_TS


def test_set_property_returns_new_date(sample):
    d = sample.set_property("hour", 8)
    assert isinstance(d, Date)
    assert d.hour == 8
    assert d.minute == 37


def test_set_property_rejects_derived_fields(sample):
    with pytest.raises(UnknownFieldError):
        sample.set_property("day_of_week", 1)


def test_set_date_keeps_time(sample):
    d = sample.set_date(2011, 1, 2)
    assert (d.year, d.month, d.day_of_month) == (2011, 1, 2)
    assert (d.hour, d.minute, d.second) == (13, 37, 0)


def test_month_overflow_rolls_into_next_year(sample):
    d = sample.set_month(13)
    assert (d.year, d.month, d.day_of_month) == (2012, 1, 3)


def test_set_day_of_year(sample):
    d = sample.set_day_of_year(60)
    assert (d.month, d.day_of_month, d.day_of_year) == (3, 1, 60)
    assert sample.set_day_of_month(20).set_day_of_year(34).day_of_month == 3


def test_set_iso_date(sample):
    d = sample.set_iso_date(2011, 1, 1)
    assert (d.year, d.week, d.day_of_week) == (2011, 1, 1)
    assert (d.hour, d.minute, d.second) == (13, 37, 0)


def test_set_iso_date_defaults_to_monday(sample):
    assert sample.set_iso_date(2011, 10).day_of_week == 1


def test_set_week_keeps_weekday(sample):
    d = sample.set_week(10)
    assert (d.year, d.week, d.day_of_week) == (2011, 10, 4)
    assert (d.month, d.day_of_month) == (3, 10)


def test_set_day_of_week_keeps_week(sample):
    d = sample.set_day_of_week(7)
    assert (d.week, d.day_of_week) == (5, 7)
    assert (d.month, d.day_of_month) == (2, 6)


def test_set_time_fields(sample):
    d = sample.set_hour(1).set_minute(2).set_second(3)
    assert (d.hour, d.minute, d.second) == (1, 2, 3)
    assert (d.year, d.month, d.day_of_month) == (2011, 2, 3)


def test_set_year(sample):
    assert sample.set_year(2015).year == 2015


def test_receiver_is_unchanged(sample):
    sample.set_year(1999)
    sample.set_date(2000, 5, 6)
    sample.set_iso_date(2001, 1)
    sample.modify("+1 week")
    assert sample.timestamp == SAMPLE_TS
    assert (sample.year, sample.month, sample.day_of_month) == (2011, 2, 3)


def test_format(sample):
    assert sample.format() == SAMPLE_DATE
    assert str(sample) == SAMPLE_DATE
    assert sample.format("%d.%m.%Y") == "03.02.2011"


def test_set_format_returns_new_value(sample):
    d = sample.set_format("%H:%M")
    assert str(d) == "13:37"
    assert d.fmt == "%H:%M"
    assert sample.fmt == "%Y-%m-%d %H:%M:%S"
    assert d == sample


def test_format_is_carried_through_setters(sample):
    assert str(sample.set_format("%Y").set_year(2020)) == "2020"


def test_default_format_from_settings(helsinki_tz):
    set_settings(CalendarSettings(date_format="%Y/%m/%d"))
    assert str(Date(SAMPLE_TS)) == "2011/02/03"


def test_modify(helsinki_tz):
    d = Date("2011-01-01 00:00:00").modify("+1 year, 2 months, 3 days")
    assert (d.year, d.month, d.day_of_month) == (2012, 3, 4)


def test_modify_keyword(sample):
    d = sample.modify("tomorrow")
    assert (d.day_of_month, d.hour, d.minute) == (4, 0, 0)


def test_ordering(sample):
    later = sample.modify("+1 second")
    assert sample < later
    assert later > sample
    assert sample == Date(SAMPLE_TS)
    assert len({sample, Date(SAMPLE_TS), later}) == 2


def test_construct_with_keyword(helsinki_tz):
    assert Date(time=SAMPLE_TS).timestamp == SAMPLE_TS
    assert Date(time=SAMPLE_DATE, fmt="%Y").format() == "2011"


def test_set_iso_date_week_overflow_rolls_over(sample):
    # 2011 has 52 ISO weeks; W53 is the first week of 2012.
    d = sample.set_iso_date(2011, 53)
    assert (d.year, d.month, d.day_of_month) == (2012, 1, 2)
    assert (d.week, d.day_of_week) == (1, 1)
    assert (d.hour, d.minute) == (13, 37)


@pytest.mark.parametrize("week, day", [(5, 8), (54, 1)])
def test_set_iso_date_out_of_range(sample, week, day):
    with pytest.raises(ParseError):
        sample.set_iso_date(2011, week, day)


@pytest.mark.parametrize("ts", [1319934600, 1319938200])
def test_set_properties_keeps_repeated_hour_occurrence(helsinki_tz, ts):
    # Both are 03:30 on 2011-10-30, before and after clocks go back.
    d = Date(ts)
    assert (d.hour, d.minute) == (3, 30)
    assert d.set_properties().timestamp == ts
    assert d.set_minute(30).timestamp == ts
