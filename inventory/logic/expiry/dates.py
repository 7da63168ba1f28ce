"""Expiration date helpers.

Dates are stored as DD/MM/YYYY text. Anything that does not have exactly that
shape, or that names a day the calendar does not have, parses to None and is
treated as "no usable expiration" by the callers (fail-open).
"""
from __future__ import annotations
import calendar
import re
from datetime import date, datetime
from typing import Optional, Union

from inventory.utilities.constants import DATE_PATTERN

__all__ = [
    "EXPIRED", "EXPIRING_SOON", "OK",
    "parse_date", "format_date", "add_one_month", "classify_expiration",
]

EXPIRED = "expired"
EXPIRING_SOON = "expiring_soon"
OK = "ok"

_DATE_RE = re.compile(DATE_PATTERN)


def parse_date(text: Optional[str]) -> Optional[date]:
    """Return the calendar day for a DD/MM/YYYY string, or None if unparseable."""
    if not isinstance(text, str) or not _DATE_RE.fullmatch(text):
        return None
    day, month, year = (int(part) for part in text.split('/'))
    try:
        return date(year, month, day)
    except ValueError:
        # 31/02/2024, 00/01/2024, year 0000 ...
        return None


def format_date(value: date) -> str:
    # strftime does not zero-pad years below 1000 on every platform
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def add_one_month(day: date) -> date:
    """Same day next month, clamped to the last day when the month is shorter."""
    year, month = (day.year + 1, 1) if day.month == 12 else (day.year, day.month + 1)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def _today(now: Union[date, datetime, None]) -> date:
    if now is None:
        return date.today()
    if isinstance(now, datetime):
        return now.date()
    return now


def classify_expiration(text: Optional[str], now: Union[date, datetime, None] = None) -> str:
    """Classify an expiration date relative to `now` (defaults to today).

    Returns one of EXPIRED, EXPIRING_SOON, OK. Missing or malformed dates are OK.
    The one-month boundary is inclusive.
    """
    expires = parse_date(text)
    if expires is None:
        return OK
    today = _today(now)
    if expires < today:
        return EXPIRED
    if expires <= add_one_month(today):
        return EXPIRING_SOON
    return OK
