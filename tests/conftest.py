"""Shared pytest fixtures for xicalendar tests."""

from __future__ import annotations

import os
import time

import pytest

from xicalendar.config.settings import CalendarSettings, reset_settings, set_settings

# POSIX rules, so no zoneinfo files are needed for the process timezone.
HELSINKI_POSIX = "EET-2EEST,M3.5.0/3,M10.5.0/4"
UTC_POSIX = "UTC0"


def _pin_process_tz(value: str):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")
    original = os.environ.get("TZ")
    os.environ["TZ"] = value
    time.tzset()
    try:
        yield
    finally:
        if original is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = original
        time.tzset()


@pytest.fixture
def helsinki_tz():
    """Process-local timezone pinned to Europe/Helsinki rules."""
    yield from _pin_process_tz(HELSINKI_POSIX)


@pytest.fixture
def utc_tz():
    """Process-local timezone pinned to UTC."""
    yield from _pin_process_tz(UTC_POSIX)


@pytest.fixture(autouse=True)
def _isolated_settings():
    """Every test starts from fresh settings and leaves none behind."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def helsinki_settings(_isolated_settings) -> CalendarSettings:
    settings = CalendarSettings(default_timezone="Europe/Helsinki")
    set_settings(settings)
    return settings
