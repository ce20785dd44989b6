"""Library settings — environment variables and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — ``CalendarSettings(default_timezone=...)``
  2. Env vars     — ``XICALENDAR_*`` prefix
  3. Code defaults

Uses Pydantic Settings v2. The active instance is process-wide and is only
read when a value is constructed without an explicit timezone or format.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.tz import tzlocal
from pydantic_settings import BaseSettings

from xicalendar.core.errors import ParseError
from xicalendar.formats import DATE_FORMAT


class CalendarSettings(BaseSettings):
    """Defaults applied when callers do not pass their own.

    Attributes:
        default_timezone: IANA zone name for DateTime values built without
            an explicit zone. ``None`` uses the system local zone.
        date_format: Presentation pattern of Date values.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "XICALENDAR_",
    }

    default_timezone: Optional[str] = None
    date_format: str = DATE_FORMAT


_settings: Optional[CalendarSettings] = None


def get_settings() -> CalendarSettings:
    global _settings
    if _settings is None:
        _settings = CalendarSettings()
    return _settings


def set_settings(settings: CalendarSettings) -> None:
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop the active settings; the next read reloads them from the environment."""
    global _settings
    _settings = None


def resolve_timezone(name: str | tzinfo) -> tzinfo:
    if isinstance(name, tzinfo):
        return name
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ParseError(f"Unknown timezone '{name}'") from exc


def default_tzinfo() -> tzinfo:
    name = get_settings().default_timezone
    if name is None:
        return tzlocal()
    return resolve_timezone(name)
