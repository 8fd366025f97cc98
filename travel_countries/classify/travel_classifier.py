"""Decide whether a calendar event describes physical travel.

Signals, strongest first:
  virtual-meeting words   -> never travel (wins over everything below)
  flight / hotel / trip   -> travel
  known airport code      -> travel
  airline flight number   -> travel (summary only; "Ref: AB123" in notes is not a flight)
  multi-day + place name  -> travel
"""

import re
from datetime import timedelta
from typing import Optional

from travel_countries.config import MULTI_DAY_THRESHOLD_HOURS
from travel_countries.extract.country_extractor import CountryExtractor, default_extractor
from travel_countries.models import CalendarEvent
from travel_countries.normalize.date_parser import as_utc
from travel_countries.normalize.text import MatchText, event_text, whole_word
from travel_countries.reference.airlines import AIRLINE_CODES

VIRTUAL_KEYWORDS = [
    "virtual", "remote", "online", "zoom", "teams", "microsoft teams",
    "webinar", "webex", "google meet", "skype", "video call", "conference call",
]

FLIGHT_KEYWORDS = [
    "flight", "flying", "fly to", "depart", "arrive", "airline",
    "airways", "boarding", "takeoff", "landing", "layover",
]

HOTEL_KEYWORDS = [
    "hotel", "resort", "hostel", "airbnb", "booking", "check-in",
    "check in", "checkout", "check out", "accommodation", "stay at",
    # chains
    "marriott", "hilton", "hyatt", "sheraton", "westin", "radisson",
    "holiday inn", "best western", "ibis", "novotel", "accor", "ihg",
]

TRAVEL_KEYWORDS = [
    "trip", "travel", "vacation", "holiday", "visit", "tour",
    "excursion", "journey", "abroad",
]

FLIGHT_NUMBER_RE = r'(?<![A-Za-z0-9])([A-Z]{2,3})(\d{1,4})(?![A-Za-z0-9])'


class TravelClassifier:
    def __init__(self, extractor: Optional[CountryExtractor] = None):
        self.extractor = extractor or default_extractor()
        self.virtual_regex = [whole_word(k) for k in VIRTUAL_KEYWORDS]
        self.travel_regex = [
            whole_word(k) for k in FLIGHT_KEYWORDS + HOTEL_KEYWORDS + TRAVEL_KEYWORDS
        ]
        self.flight_number_regex = re.compile(FLIGHT_NUMBER_RE)
        self.multi_day = timedelta(hours=MULTI_DAY_THRESHOLD_HOURS)

    def is_travel(self, event: CalendarEvent) -> bool:
        full_text = event_text(event)
        text = MatchText.of(full_text)

        # 1. Virtual meetings mention cities all the time ("Zoom with Tokyo office")
        if any(reg.search(text.lowered) for reg in self.virtual_regex):
            return False

        # 2. Travel vocabulary
        if any(reg.search(text.lowered) for reg in self.travel_regex):
            return True

        # 3. Airport codes
        if self.extractor.airport_codes(full_text):
            return True

        # 4. Flight numbers (BA175, UAL920)
        if self.has_flight_number(event.summary):
            return True

        # 5. A place name only counts for events spanning more than a day
        return self.is_multi_day(event) and bool(self.extractor.place_names(text))

    def has_flight_number(self, summary: Optional[str]) -> bool:
        for m in self.flight_number_regex.finditer(summary or ""):
            if m.group(1) in AIRLINE_CODES:
                return True
        return False

    def is_multi_day(self, event: CalendarEvent) -> bool:
        if event.start_date is None or event.end_date is None:
            return False
        return as_utc(event.end_date) - as_utc(event.start_date) > self.multi_day


_default_classifier = None


def is_travel_event(event: CalendarEvent) -> bool:
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = TravelClassifier()
    return _default_classifier.is_travel(event)
