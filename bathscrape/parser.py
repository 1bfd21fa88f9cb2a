"""Conversions from scraped text to typed values."""
from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from .errors import FormatError

KICKOFF_PREFIX = "Kick Off "

_MONTHS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_FIXTURE_DATE = re.compile(r"^(?P<day>\d{1,2})\s+(?P<month>[A-Za-z]{3})\s+(?P<year>\d{4})$")
_CLOCK_TIME = re.compile(r"^(?P<hours>\d{1,2}):(?P<minutes>\d{2})$")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ].*)?$")


def parse_fixture_date(raw: str) -> date:
    """Parse fixture dates such as ``" 6 Sep 2014"`` or ``"13 Sep 2014"``."""

    text = (raw or "").strip()
    match = _FIXTURE_DATE.match(text)
    if not match:
        raise FormatError(f"Unrecognised fixture date: {raw!r}", raw=raw, field="date")
    month = _MONTHS.get(match.group("month").lower())
    if month is None:
        raise FormatError(f"Unknown month abbreviation in {raw!r}", raw=raw, field="date")
    try:
        return date(int(match.group("year")), month, int(match.group("day")))
    except ValueError as exc:
        raise FormatError(f"Invalid fixture date: {raw!r}", raw=raw, field="date") from exc


def parse_kickoff_offset(raw: str) -> timedelta:
    """Return the time of day in labels of the form ``"Kick Off 19:45"``."""

    text = (raw or "").strip()
    if not text.startswith(KICKOFF_PREFIX):
        raise FormatError(
            f"Kick-off label must start with {KICKOFF_PREFIX!r}: {raw!r}",
            raw=raw,
            field="kickoff",
        )
    match = _CLOCK_TIME.match(text[len(KICKOFF_PREFIX):].strip())
    if not match:
        raise FormatError(f"Unrecognised kick-off time: {raw!r}", raw=raw, field="kickoff")
    hours, minutes = int(match.group("hours")), int(match.group("minutes"))
    if hours >= 24 or minutes >= 60:
        raise FormatError(f"Invalid kick-off time: {raw!r}", raw=raw, field="kickoff")
    return timedelta(hours=hours, minutes=minutes)


def parse_home_win(raw: str) -> bool:
    # "Bath won 24-10" / "Bath lost 10-24"; anything without "won" counts as no win
    return "won" in (raw or "")


def parse_overflow_count(raw: str) -> int:
    """Extract N from overflow labels such as ``"View all 5 events"``."""

    digits = re.sub(r"[^0-9]", "", raw or "")
    if not digits:
        raise FormatError(f"No event count found in {raw!r}", raw=raw, field="overflow")
    return int(digits)


def coerce_date(value) -> date:
    """Accept a date, a datetime (or pandas Timestamp) or an ISO ``YYYY-MM-DD`` string."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not _ISO_DATE.match(text):
            raise FormatError(f"Expected a YYYY-MM-DD date, got {value!r}", raw=value, field="date")
        try:
            if len(text) > 10:
                return datetime.fromisoformat(text).date()
            return date.fromisoformat(text)
        except ValueError as exc:
            raise FormatError(f"Expected a YYYY-MM-DD date, got {value!r}", raw=value, field="date") from exc
    raise FormatError(f"Expected a date-like value, got {type(value).__name__}", raw=value, field="date")
