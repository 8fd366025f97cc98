"""Find the countries a calendar event refers to.

Sources, in the order they are consulted:
1. IATA airport codes (three uppercase letters standing alone: "JFK", "LHR")
2. country, city and railway-station names anywhere in summary/description/location
3. the same names in the location field on its own

Name matches go through the disambiguation rules before they count.
"""

import logging
import re
from typing import Dict, List, Set, Union

from travel_countries.extract.disambiguation import disambiguate
from travel_countries.models import CalendarEvent
from travel_countries.normalize.text import MatchText, PlaceMatcher, event_text
from travel_countries.reference.airports import AIRPORT_TO_COUNTRY
from travel_countries.reference.countries import MATCHABLE_COUNTRY_NAMES, is_known_country
from travel_countries.reference.places import CITY_TO_COUNTRY
from travel_countries.reference.stations import STATION_TO_COUNTRY

logger = logging.getLogger(__name__)

# Lookarounds rather than consuming boundaries so "JFK LHR" yields both codes
AIRPORT_CODE_RE = r'(?<![A-Za-z0-9])([A-Z]{3})(?![A-Za-z0-9])'

TextLike = Union[str, MatchText]


def _as_match_text(text: TextLike) -> MatchText:
    return text if isinstance(text, MatchText) else MatchText.of(text)


class CountryExtractor:
    def __init__(self):
        self.airport_regex = re.compile(AIRPORT_CODE_RE)
        self.matchers = [
            PlaceMatcher(MATCHABLE_COUNTRY_NAMES),
            PlaceMatcher(CITY_TO_COUNTRY),
            PlaceMatcher(STATION_TO_COUNTRY),
        ]
        logger.debug(
            "Place matchers ready: %s",
            ", ".join(str(len(m)) for m in self.matchers),
        )

    def airport_codes(self, text: str) -> List[str]:
        return [c for c in self.airport_regex.findall(text or "") if c in AIRPORT_TO_COUNTRY]

    def place_names(self, text: TextLike) -> Dict[str, str]:
        """Raw name matches (normalized name -> country code), before disambiguation."""
        match_text = _as_match_text(text)
        found: Dict[str, str] = {}
        for matcher in self.matchers:
            found.update(matcher.find(match_text))
        return found

    def countries_in_text(self, text: TextLike) -> Set[str]:
        match_text = _as_match_text(text)
        return set(disambiguate(self.place_names(match_text), match_text).values())

    def extract(self, event: CalendarEvent) -> Set[str]:
        full_text = event_text(event)

        codes = {AIRPORT_TO_COUNTRY[c] for c in self.airport_codes(full_text)}
        codes |= self.countries_in_text(full_text)
        if event.location:
            codes |= self.countries_in_text(event.location)

        return {c for c in codes if is_known_country(c)}


_default_extractor = None


def default_extractor() -> CountryExtractor:
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = CountryExtractor()
    return _default_extractor


def extract_countries(event: CalendarEvent) -> Set[str]:
    return default_extractor().extract(event)
