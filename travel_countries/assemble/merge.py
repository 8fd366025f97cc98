"""Collapse one country's entries into non-overlapping visits."""

from dataclasses import replace
from datetime import timedelta
from typing import List, Optional

from travel_countries.config import MERGE_BUFFER_DAYS, TITLE_SEPARATOR
from travel_countries.models import VisitEntry
from travel_countries.normalize.date_parser import parse_instant


def _end_instant(entry: VisitEntry):
    return parse_instant(entry.end_date or entry.start_date)


def _join_titles(current: Optional[str], incoming: Optional[str]) -> Optional[str]:
    """Append incoming titles not already present; first appearance keeps its position."""
    if not incoming:
        return current
    if not current:
        return incoming
    titles = current.split(TITLE_SEPARATOR)
    for title in incoming.split(TITLE_SEPARATOR):
        if title not in titles:
            titles.append(title)
    return TITLE_SEPARATOR.join(titles)


def merge_overlapping(entries: List[VisitEntry]) -> List[VisitEntry]:
    """Merge entries that overlap or sit within MERGE_BUFFER_DAYS of each other.

    Entries are swept in start order; a run stays open while the next entry
    starts no later than the run's end plus the buffer. The merged entry keeps
    the first entry's id, source and start. Input entries are never modified.
    """
    if len(entries) <= 1:
        return [replace(e) for e in entries]

    buffer = timedelta(days=MERGE_BUFFER_DAYS)
    # sorted() is stable: equal starts keep their input order
    ordered = sorted(entries, key=lambda e: parse_instant(e.start_date))

    merged: List[VisitEntry] = []
    current = replace(ordered[0])

    for nxt in ordered[1:]:
        current_end = _end_instant(current)
        if parse_instant(nxt.start_date) <= current_end + buffer:
            if _end_instant(nxt) > current_end:
                current.end_date = nxt.end_date or nxt.start_date
            current.event_title = _join_titles(current.event_title, nxt.event_title)
        else:
            merged.append(current)
            current = replace(nxt)

    merged.append(current)
    return merged
