"""Aggregate statistics over a visit history."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from dateutil import tz

from travel_countries.models import CountryVisit
from travel_countries.normalize.date_parser import parse_instant
from travel_countries.normalize.text import collation_key
from travel_countries.reference.continents import CONTINENT_NAMES, COUNTRY_TO_CONTINENT


@dataclass
class CountryCount:
    code: str
    name: str
    count: int


@dataclass
class YearTrips:
    year: int
    trips: int
    countries: List[CountryCount] = field(default_factory=list)


@dataclass
class ContinentStats:
    continent: str
    visited: int
    trips: int
    country_codes: List[str] = field(default_factory=list)


def trips_per_year(
    visits: List[CountryVisit],
    start_year: Optional[int] = None,
    end_year: Optional[int] = None,
    current_year: Optional[int] = None,
) -> List[YearTrips]:
    """One row per year, gap years included, each entry counting as one trip.

    The range runs from the earliest entry year (or start_year) to the later
    of the latest entry year and the current year (or end_year). Years are
    taken from entry start dates in UTC.
    """
    by_year: Dict[int, Dict[str, int]] = {}
    for visit in visits:
        for entry in visit.entries:
            year = parse_instant(entry.start_date).year
            per_country = by_year.setdefault(year, {})
            per_country[visit.country_code] = per_country.get(visit.country_code, 0) + 1

    if not by_year:
        return []

    names = {v.country_code: v.country_name for v in visits}
    if current_year is None:
        current_year = datetime.now(tz.UTC).year

    first = start_year if start_year is not None else min(by_year)
    last = end_year if end_year is not None else max(max(by_year), current_year)

    rows = []
    for year in range(first, last + 1):
        per_country = by_year.get(year, {})
        countries = [
            CountryCount(code=code, name=names.get(code, code), count=count)
            for code, count in per_country.items()
        ]
        countries.sort(key=lambda c: (-c.count, collation_key(c.name)))
        rows.append(YearTrips(year=year, trips=sum(per_country.values()), countries=countries))
    return rows


def continent_coverage(visits: List[CountryVisit]) -> List[ContinentStats]:
    """Visited countries and trips per continent, most-visited continent first."""
    by_continent: Dict[str, ContinentStats] = {}
    for visit in visits:
        continent = COUNTRY_TO_CONTINENT.get(visit.country_code)
        if not continent:
            continue
        stats = by_continent.setdefault(continent, ContinentStats(continent, 0, 0))
        stats.visited += 1
        stats.trips += len(visit.entries)
        stats.country_codes.append(visit.country_code)

    trips_by_code = {v.country_code: len(v.entries) for v in visits}
    result = []
    for continent in CONTINENT_NAMES:
        stats = by_continent.get(continent)
        if stats is None:
            continue
        # stable sorts: equal counts keep visit order / CONTINENT_NAMES order
        stats.country_codes.sort(key=lambda code: -trips_by_code.get(code, 0))
        result.append(stats)
    result.sort(key=lambda s: -s.visited)
    return result
