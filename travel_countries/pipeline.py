"""Orchestrates the batch: classify → extract → accumulate per country → merge."""

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional

from travel_countries.assemble.merge import merge_overlapping
from travel_countries.classify.travel_classifier import TravelClassifier
from travel_countries.config import PROGRESS_INTERVAL_SECONDS
from travel_countries.extract.country_extractor import CountryExtractor, default_extractor
from travel_countries.models import CalendarEvent, CountryVisit, EntrySource, VisitEntry
from travel_countries.normalize.date_parser import DateLike, normalize_date, parse_instant, to_iso
from travel_countries.normalize.text import collation_key
from travel_countries.reference.countries import country_name

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def display_order(visit: CountryVisit) -> str:
    return collation_key(visit.country_name)


def extract_visits(
    events: Iterable[CalendarEvent],
    on_progress: Optional[ProgressCallback] = None,
    classifier: Optional[TravelClassifier] = None,
    extractor: Optional[CountryExtractor] = None,
) -> List[CountryVisit]:
    """Turn a batch of calendar events into per-country visits.

    on_progress(processed, total) is called with (0, total) up front, then at
    most once per PROGRESS_INTERVAL_SECONDS, and always exactly once with
    processed == total when the pass is done (even for an empty batch).
    Exceptions raised by the callback propagate and abort the run.
    """
    events = list(events)
    total = len(events)
    extractor = extractor or default_extractor()
    classifier = classifier or TravelClassifier(extractor)

    accumulated: Dict[str, CountryVisit] = {}
    travel_count = 0
    skipped = 0

    last_report = time.monotonic()
    if on_progress and total > 0:
        on_progress(0, total)

    for i, event in enumerate(events, 1):
        if event.start_date is None:
            skipped += 1
            logger.debug("Skipping event %s without a start date", event.uid)
        elif classifier.is_travel(event):
            travel_count += 1
            for code in sorted(extractor.extract(event)):
                visit = accumulated.get(code)
                if visit is None:
                    visit = CountryVisit(country_code=code, country_name=country_name(code))
                    accumulated[code] = visit
                visit.entries.append(VisitEntry(
                    start_date=to_iso(event.start_date),
                    end_date=to_iso(event.end_date) if event.end_date else None,
                    source=EntrySource.CALENDAR,
                    event_title=event.summary,
                ))

        if on_progress and i < total:
            now = time.monotonic()
            if now - last_report >= PROGRESS_INTERVAL_SECONDS:
                last_report = now
                on_progress(i, total)

    for visit in accumulated.values():
        visit.entries = merge_overlapping(visit.entries)

    if on_progress:
        on_progress(total, total)

    visits = sorted(accumulated.values(), key=display_order)
    logger.info(
        "Processed %d events: %d travel, %d skipped, %d countries",
        total, travel_count, skipped, len(visits),
    )
    return visits


def create_manual_visit(
    country_code: str,
    start: DateLike,
    end: Optional[DateLike] = None,
    note: Optional[str] = None,
) -> Optional[CountryVisit]:
    """Build a single-entry visit for a country the user adds by hand.

    Returns None for an unrecognized country code, an unparseable date or an
    end date before the start date.
    """
    code = (country_code or "").strip().upper()
    name = country_name(code)
    if name is None:
        logger.warning("Unrecognized country code %r", country_code)
        return None

    start_date = normalize_date(start)
    if start_date is None:
        logger.warning("Unparseable start date %r for %s", start, code)
        return None

    end_date = None
    if end is not None:
        end_date = normalize_date(end)
        if end_date is None:
            logger.warning("Unparseable end date %r for %s", end, code)
            return None
        if parse_instant(end_date) < parse_instant(start_date):
            logger.warning("End date %s before start date %s for %s", end_date, start_date, code)
            return None

    return CountryVisit(
        country_code=code,
        country_name=name,
        entries=[VisitEntry(
            start_date=start_date,
            end_date=end_date,
            source=EntrySource.MANUAL,
            event_title=note or None,
        )],
    )
