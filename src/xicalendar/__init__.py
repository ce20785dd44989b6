"""xicalendar public API.

Keep this surface small: users should mostly interact with the two value
types re-exported here.
"""

from .config.logging import configure_logging
from .config.settings import CalendarSettings, get_settings, reset_settings, set_settings
from .core.errors import CalendarError, ParseError, TypeMismatchError, UnknownFieldError
from .core.fields import FieldSet
from .formats import Format
from .plain import Date
from .zoned import DateTime

__all__ = [
    "Date",
    "DateTime",
    "FieldSet",
    "Format",
    "CalendarSettings",
    "get_settings",
    "set_settings",
    "reset_settings",
    "configure_logging",
    "CalendarError",
    "ParseError",
    "TypeMismatchError",
    "UnknownFieldError",
]
