"""
xicalendar.core.relative
------------------------
Resolves free-form date descriptions against a base moment.

Accepted, in order of precedence:
  @1296733020                       absolute unix timestamp (UTC)
  +1 year, 2 months, 3 days         relative items, optionally suffixed "ago"
  tomorrow / next monday / noon     keywords
  2011-W05-4T13:37:00               ISO-8601, including week dates
  3 Feb 2011 13:37                  anything dateutil's parser accepts
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as _parser
from dateutil.relativedelta import MO, TU, WE, TH, FR, SA, SU, relativedelta

from .errors import ParseError

logger = logging.getLogger(__name__)

_TIMESTAMP_RE = re.compile(r"@([+-]?\d+)")

_ITEM_RE = re.compile(
    r"""
    [\s,]*
    (?:
        (?P<number>[+-]?\s*\d+)\s*(?P<unit>[a-z]+)
      | (?P<rel>next|last|previous|this)\s+(?P<relunit>[a-z]+)
      | (?P<word>[a-z]+)
    )
    [\s,]*
    """,
    re.VERBOSE,
)

_UNITS = {
    "sec": relativedelta(seconds=1),
    "second": relativedelta(seconds=1),
    "min": relativedelta(minutes=1),
    "minute": relativedelta(minutes=1),
    "hour": relativedelta(hours=1),
    "day": relativedelta(days=1),
    "week": relativedelta(weeks=1),
    "fortnight": relativedelta(weeks=2),
    "month": relativedelta(months=1),
    "year": relativedelta(years=1),
}

_WEEKDAYS = {
    "monday": MO, "mon": MO,
    "tuesday": TU, "tue": TU,
    "wednesday": WE, "wed": WE,
    "thursday": TH, "thu": TH,
    "friday": FR, "fri": FR,
    "saturday": SA, "sat": SA,
    "sunday": SU, "sun": SU,
}

_MIDNIGHT = relativedelta(hour=0, minute=0, second=0, microsecond=0)

_KEYWORDS = {
    "now": relativedelta(),
    "today": _MIDNIGHT,
    "midnight": _MIDNIGHT,
    "noon": relativedelta(hour=12, minute=0, second=0, microsecond=0),
    "tomorrow": _MIDNIGHT + relativedelta(days=+1),
    "yesterday": _MIDNIGHT + relativedelta(days=-1),
}

_DIRECTIONS = {"next": 1, "this": 0, "last": -1, "previous": -1}


def _unit(word: str) -> Optional[relativedelta]:
    if word in _UNITS:
        return _UNITS[word]
    if word.endswith("s") and word[:-1] in _UNITS:
        return _UNITS[word[:-1]]
    return None


def _scale(unit: relativedelta, n: int) -> relativedelta:
    return relativedelta(
        years=unit.years * n,
        months=unit.months * n,
        days=unit.days * n,
        hours=unit.hours * n,
        minutes=unit.minutes * n,
        seconds=unit.seconds * n,
    )


def _weekday(word: str, direction: int) -> relativedelta:
    wd = _WEEKDAYS[word]
    if direction > 0:
        return _MIDNIGHT + relativedelta(days=+1, weekday=wd(+1))
    if direction < 0:
        return _MIDNIGHT + relativedelta(days=-1, weekday=wd(-1))
    return _MIDNIGHT + relativedelta(weekday=wd(+1))


def parse_relative(description: str) -> Optional[relativedelta]:
    """
    Parse a relative expression into a relativedelta.

    Returns None when *description* is not (entirely) a relative expression.
    """
    text = description.strip().lower()
    ago = False
    if text.endswith(" ago"):
        ago = True
        text = text[:-4]
    if not text:
        return None

    total = relativedelta()
    pos = 0
    while pos < len(text):
        m = _ITEM_RE.match(text, pos)
        if m is None or m.end() == pos:
            return None
        pos = m.end()

        if m.group("number") is not None:
            unit = _unit(m.group("unit"))
            if unit is None:
                return None
            total += _scale(unit, int(m.group("number").replace(" ", "")))
        elif m.group("rel") is not None:
            direction = _DIRECTIONS[m.group("rel")]
            word = m.group("relunit")
            if word in _WEEKDAYS:
                total += _weekday(word, direction)
                continue
            unit = _unit(word)
            if unit is None:
                return None
            total += _scale(unit, direction)
        else:
            word = m.group("word")
            if word in _KEYWORDS:
                total += _KEYWORDS[word]
            elif word in _WEEKDAYS:
                total += _weekday(word, 0)
            else:
                return None

    return -total if ago else total


def resolve(description: str, base: datetime) -> datetime:
    """
    Resolve *description* against *base*.

    Naive results are placed in base's timezone when base is aware.
    Raises ParseError when nothing understands the description.
    """
    text = description.strip()

    m = _TIMESTAMP_RE.fullmatch(text)
    if m is not None:
        return datetime.fromtimestamp(int(m.group(1)), tz=timezone.utc)

    delta = parse_relative(text)
    if delta is not None:
        logger.debug("Relative expression %r -> %r", description, delta)
        return base + delta

    try:
        result = _parser.isoparse(text)
    except ValueError:
        try:
            result = _parser.parse(text, default=base.replace(tzinfo=None))
        except (ValueError, OverflowError) as exc:
            raise ParseError(f"Unable to parse date/time string {description!r}") from exc

    if result.tzinfo is None and base.tzinfo is not None:
        result = result.replace(tzinfo=base.tzinfo)
    logger.debug("Absolute expression %r -> %s", description, result.isoformat())
    return result
