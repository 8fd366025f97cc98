"""Instant handling: canonical ISO text for visit entries, multi-format parsing for manual input."""

import re
from datetime import date, datetime
from typing import Optional, Union

from dateutil import parser as dateutil_parser
from dateutil import tz

DateLike = Union[str, date, datetime]


def as_utc(value: Union[date, datetime]) -> datetime:
    """Return an aware UTC datetime. Naive values and plain dates are taken as UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=tz.UTC)
        return value.astimezone(tz.UTC)
    return datetime(value.year, value.month, value.day, tzinfo=tz.UTC)


def to_iso(value: Union[date, datetime]) -> str:
    """Canonical entry form: 2024-01-15T00:00:00.000Z"""
    return as_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_instant(raw: str) -> datetime:
    """Parse an ISO-8601 entry date into an aware UTC datetime.

    Raises ValueError for text that is not ISO-8601; entry dates produced by
    this package always are.
    """
    return as_utc(dateutil_parser.isoparse(raw.strip()))


def parse_datetime(raw: Optional[str]) -> Optional[datetime]:
    """Parse a user-supplied date string in many formats, returning None if hopeless.

    Handles:
      - ISO-8601 dates and timestamps (2024-01-15, 2024-01-15T10:00:00Z)
      - DDMONYY / DDMONYYYY (e.g. 20JAN22, 09MAR2022)
      - MM/DD/YYYY
      - anything else dateutil understands (15 January 2024, Jan 15 2024)
    """
    if not raw or raw.strip().lower() in ("null", "none", "unknown", ""):
        return None

    raw = raw.strip()

    # 1. ISO-8601
    try:
        return as_utc(dateutil_parser.isoparse(raw))
    except ValueError:
        pass

    # 2. DDMONYY / DDMONYYYY
    m = re.match(r'^(\d{2})([A-Z]{3})(\d{2,4})$', raw, re.I)
    if m:
        day, mon, year = m.groups()
        year = year if len(year) == 4 else f"20{year}"
        try:
            return as_utc(datetime.strptime(f"{day}{mon.upper()}{year}", "%d%b%Y"))
        except ValueError:
            pass

    # 3. MM/DD/YYYY
    m = re.match(r'^(\d{1,2})/(\d{1,2})/(\d{4})$', raw)
    if m:
        try:
            return as_utc(datetime(int(m.group(3)), int(m.group(1)), int(m.group(2))))
        except ValueError:
            pass

    # 4. dateutil as general fallback
    try:
        return as_utc(dateutil_parser.parse(raw))
    except (ValueError, OverflowError):
        pass

    return None


def normalize_date(value: Optional[DateLike]) -> Optional[str]:
    """Bring a manual-entry date (string, date or datetime) to canonical ISO text."""
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return to_iso(value)
    parsed = parse_datetime(value)
    return to_iso(parsed) if parsed else None
