# site_crawler/crawler/frontier.py
"""
Frontier and de-duplication store for one crawl.

Methods never await, so on a single event loop every call is atomic with
respect to the concurrent fetches of a round.
"""
from __future__ import annotations

from typing import Dict, FrozenSet, List, Set


class Frontier:
    """Visited and pending URL sets; each URL is dispatched at most once."""

    def __init__(self) -> None:
        self._visited: Set[str] = set()
        # dict keeps insertion order, so batches come out oldest first
        self._pending: Dict[str, None] = {}

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    @property
    def visited(self) -> FrozenSet[str]:
        return frozenset(self._visited)

    @property
    def pending(self) -> FrozenSet[str]:
        return frozenset(self._pending)

    def mark_visited(self, url: str) -> None:
        self._pending.pop(url, None)
        self._visited.add(url)

    def is_visited(self, url: str) -> bool:
        return url in self._visited

    def is_pending(self, url: str) -> bool:
        return url in self._pending

    def offer(self, url: str) -> bool:
        """Queue *url* unless it was seen before. Returns True if queued."""
        if url in self._visited or url in self._pending:
            return False
        self._pending[url] = None
        return True

    def take_batch(self, n: int) -> List[str]:
        """Remove and return up to *n* pending URLs."""
        if n < 1:
            raise ValueError("batch size must be >= 1")
        batch = list(self._pending)[:n]
        for url in batch:
            del self._pending[url]
        return batch
