"""Combine a stored visit history with a freshly extracted batch.

Re-importing the same calendar must not duplicate anything, so an incoming
entry is dropped when the country already holds an entry with the same title
and start date. Everything else is merged by date as usual.
"""

from dataclasses import replace
from typing import Dict, List

from travel_countries.assemble.merge import merge_overlapping
from travel_countries.models import CountryVisit, VisitEntry
from travel_countries.normalize.text import collation_key


def _copy_visit(visit: CountryVisit) -> CountryVisit:
    return replace(visit, entries=[replace(e) for e in visit.entries])


def _is_duplicate(entry: VisitEntry, entries: List[VisitEntry]) -> bool:
    return any(
        e.event_title == entry.event_title and e.start_date == entry.start_date
        for e in entries
    )


def merge_visit_sets(existing: List[CountryVisit], incoming: List[CountryVisit]) -> List[CountryVisit]:
    """Union two visit lists by country code; neither input is modified."""
    merged: Dict[str, CountryVisit] = {}
    for visit in existing:
        merged[visit.country_code] = _copy_visit(visit)

    for visit in incoming:
        current = merged.get(visit.country_code)
        if current is None:
            merged[visit.country_code] = _copy_visit(visit)
            continue

        for entry in visit.entries:
            if not _is_duplicate(entry, current.entries):
                current.entries.append(replace(entry))
        current.entries = merge_overlapping(current.entries)

    return sorted(merged.values(), key=lambda v: collation_key(v.country_name))
