# site_crawler/crawler/state.py
"""
Observable crawl state: status, ordered results and progress counters.

The orchestrator owns one :class:`CrawlState`; presentation code reads
snapshots or subscribes to results instead of touching crawler internals.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from site_crawler.crawler.models import PageResult
from site_crawler.logger import logger


class CrawlStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class CrawlProgress:
    scanned_count: int = 0
    total_found: int = 0


Subscriber = Callable[[PageResult, CrawlProgress], None]


class CrawlState:
    """Single owner of results and counters for the current crawl."""

    def __init__(self) -> None:
        self.status: CrawlStatus = CrawlStatus.IDLE
        self.error: Optional[BaseException] = None
        self.rounds: int = 0
        self._results: List[PageResult] = []
        self._scanned = 0
        self._found = 0
        self._subscribers: List[Subscriber] = []

    @property
    def results(self) -> Tuple[PageResult, ...]:
        return tuple(self._results)

    @property
    def progress(self) -> CrawlProgress:
        return CrawlProgress(scanned_count=self._scanned, total_found=self._found)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call *callback* for every new result. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def reset(self) -> None:
        self.status = CrawlStatus.IDLE
        self.error = None
        self.rounds = 0
        self._results = []
        self._scanned = 0
        self._found = 0

    def start(self) -> None:
        self.reset()
        self.status = CrawlStatus.RUNNING

    def finish(self, cancelled: bool = False) -> None:
        self.status = CrawlStatus.CANCELLED if cancelled else CrawlStatus.COMPLETED

    def fail(self, exc: BaseException) -> None:
        self.status = CrawlStatus.FAILED
        self.error = exc

    def record(self, result: PageResult) -> None:
        self._results.append(result)
        self._scanned += 1
        progress = self.progress
        for callback in list(self._subscribers):
            try:
                callback(result, progress)
            except Exception:
                logger.exception("Subscriber %r failed on %s", callback, result.url)

    def link_found(self) -> None:
        self._found += 1
