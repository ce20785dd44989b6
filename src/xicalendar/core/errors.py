class CalendarError(Exception):
    """Base error."""

class ParseError(CalendarError, ValueError):
    """Raised when a date/time string cannot be resolved to an instant."""

class TypeMismatchError(CalendarError, TypeError):
    """Raised when an argument cannot be converted to an instant or interval."""

class UnknownFieldError(CalendarError, KeyError):
    """Raised when a field name is not writable (or does not exist)."""
