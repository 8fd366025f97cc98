"""
Pytest configuration and shared fixtures.
Provides an event factory and small visit builders for all tests.
"""

import sys
import uuid
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from travel_countries.models import CalendarEvent, CountryVisit, EntrySource, VisitEntry  # noqa: E402


# ==================== Event Fixtures ====================

@pytest.fixture
def make_event():
    """Build a CalendarEvent; `days` sets the span from a fixed start date."""
    def _make(summary, days=0, start=datetime(2024, 1, 15), description=None, location=None, end=None):
        if end is None and days is not None:
            end = start + timedelta(days=days)
        return CalendarEvent(
            uid=str(uuid.uuid4()),
            summary=summary,
            start_date=start,
            end_date=end,
            description=description,
            location=location,
        )
    return _make


# ==================== Visit Fixtures ====================

@pytest.fixture
def make_entry():
    def _make(start, end=None, title=None, source=EntrySource.CALENDAR):
        return VisitEntry(start_date=start, end_date=end, source=source, event_title=title)
    return _make


@pytest.fixture
def make_visit():
    """CountryVisit with one manual entry per start date (the shape stats work on)."""
    def _make(code, name, dates):
        return CountryVisit(
            country_code=code,
            country_name=name,
            entries=[VisitEntry(start_date=d, source=EntrySource.MANUAL) for d in dates],
        )
    return _make
