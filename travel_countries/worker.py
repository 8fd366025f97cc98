"""Run extraction off the caller's thread, reporting progress through a queue.

Only the most recent run matters: submitting a new batch supersedes every
earlier run. A superseded run stops at its next progress checkpoint, posts no
result and its ExtractionRun.result() returns None.
"""

import logging
import queue
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from travel_countries.config import WORKER_THREADS
from travel_countries.models import CalendarEvent, CountryVisit
from travel_countries.pipeline import extract_visits

logger = logging.getLogger(__name__)


class RunMessageType(str, Enum):
    PROGRESS = "progress"
    COMPLETE = "complete"
    ERROR = "error"


@dataclass
class RunMessage:
    type: RunMessageType
    processed: Optional[int] = None
    total: Optional[int] = None
    visits: Optional[List[CountryVisit]] = None
    error: Optional[str] = None


class _Superseded(Exception):
    pass


class ExtractionRun:
    """Handle on one submitted batch."""

    def __init__(self, owner: "BackgroundExtractor", generation: int):
        self._owner = owner
        self.generation = generation
        self.messages: "queue.SimpleQueue[RunMessage]" = queue.SimpleQueue()
        self._future: Optional[Future] = None

    def _attach(self, future: Future):
        self._future = future

    @property
    def superseded(self) -> bool:
        return self._owner.current_generation != self.generation

    def done(self) -> bool:
        return self._future is not None and self._future.done()

    def result(self, timeout: Optional[float] = None) -> Optional[List[CountryVisit]]:
        """Block for the visits; None if the run was superseded. Re-raises run errors."""
        return self._future.result(timeout)

    def drain(self) -> List[RunMessage]:
        """Everything posted so far, without blocking."""
        drained = []
        while True:
            try:
                drained.append(self.messages.get_nowait())
            except queue.Empty:
                return drained


class BackgroundExtractor:
    def __init__(self, max_workers: int = WORKER_THREADS):
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="extract")
        self._lock = threading.Lock()
        self._generation = 0

    @property
    def current_generation(self) -> int:
        with self._lock:
            return self._generation

    def submit(self, events: Iterable[CalendarEvent]) -> ExtractionRun:
        events = list(events)
        with self._lock:
            self._generation += 1
            run = ExtractionRun(self, self._generation)
        run._attach(self.executor.submit(self._run, run, events))
        return run

    def _run(self, run: ExtractionRun, events: List[CalendarEvent]) -> Optional[List[CountryVisit]]:
        def report(processed: int, total: int):
            if run.superseded:
                raise _Superseded()
            run.messages.put(RunMessage(RunMessageType.PROGRESS, processed=processed, total=total))

        try:
            visits = extract_visits(events, on_progress=report)
        except _Superseded:
            logger.info("Extraction run %d superseded, discarding", run.generation)
            return None
        except Exception as e:
            logger.exception("Extraction run %d failed", run.generation)
            run.messages.put(RunMessage(RunMessageType.ERROR, error=str(e) or type(e).__name__))
            raise

        if run.superseded:
            logger.info("Extraction run %d superseded, discarding", run.generation)
            return None

        run.messages.put(RunMessage(RunMessageType.COMPLETE, visits=visits))
        return visits

    def shutdown(self, wait: bool = True):
        self.executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown(wait=True)
