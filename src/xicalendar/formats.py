"""
Standard timestamp patterns, expressed as strftime/strptime directives.

``%:z`` renders the offset as +HH:MM (Python 3.12+); ``%z`` as +HHMM.
"""

from __future__ import annotations

from enum import StrEnum


class Format(StrEnum):
    ATOM = "%Y-%m-%dT%H:%M:%S%:z"
    COOKIE = "%A, %d-%b-%Y %H:%M:%S %Z"
    ISO8601 = "%Y-%m-%dT%H:%M:%S%z"
    RFC822 = "%a, %d %b %y %H:%M:%S %z"
    RFC850 = "%A, %d-%b-%y %H:%M:%S %Z"
    RFC1036 = "%a, %d %b %y %H:%M:%S %z"
    RFC1123 = "%a, %d %b %Y %H:%M:%S %z"
    RFC2822 = "%a, %d %b %Y %H:%M:%S %z"
    RFC3339 = "%Y-%m-%dT%H:%M:%S%:z"
    RSS = "%a, %d %b %Y %H:%M:%S %z"
    W3C = "%Y-%m-%dT%H:%M:%S%:z"


DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
