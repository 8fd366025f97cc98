"""Data models for the country-visit pipeline."""

from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


def new_id() -> str:
    return str(uuid.uuid4())


class EntrySource(str, Enum):
    CALENDAR = "calendar"
    MANUAL = "manual"


@dataclass(frozen=True)
class CalendarEvent:
    """A normalized calendar event, as handed over by the decoding layer."""
    uid: str
    summary: str
    start_date: Optional[date]  # date or datetime; None means a malformed event
    end_date: Optional[date] = None
    description: Optional[str] = None
    location: Optional[str] = None


@dataclass
class VisitEntry:
    start_date: str  # ISO-8601, UTC, e.g. 2024-01-15T00:00:00.000Z
    end_date: Optional[str] = None
    source: EntrySource = EntrySource.CALENDAR
    event_title: Optional[str] = None  # "; "-joined when entries were merged
    id: str = field(default_factory=new_id)


@dataclass
class CountryVisit:
    country_code: str  # ISO 3166-1 alpha-2
    country_name: str
    entries: List[VisitEntry] = field(default_factory=list)
    id: str = field(default_factory=new_id)
