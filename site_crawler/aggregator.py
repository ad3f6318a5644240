# File: site_crawler/aggregator.py
"""site_crawler.aggregator: итоговый отчёт обхода для CLI и экспортёров."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from site_crawler.crawler.models import PageResult
from site_crawler.crawler.state import CrawlProgress, CrawlStatus

COLUMNS: Sequence[str] = ("url", "status", "title", "description")


@dataclass(slots=True)
class CrawlReport:
    """Результаты обхода в порядке получения и финальные счётчики."""

    seed_url: str
    status: CrawlStatus = CrawlStatus.COMPLETED
    results: List[PageResult] = field(default_factory=list)
    progress: CrawlProgress = field(default_factory=CrawlProgress)
    rounds: int = 0

    def rows(self) -> List[Dict[str, Any]]:
        """Строки таблицы с колонками url, status, title, description."""
        return [{col: getattr(r, col) for col in COLUMNS} for r in self.results]

    def summary(self) -> Dict[str, int]:
        """Число успешных страниц, 404 и прочих ошибок."""
        ok = sum(1 for r in self.results if r.status == 200)
        not_found = sum(1 for r in self.results if r.status == 404)
        return {"ok": ok, "not_found": not_found, "errors": len(self.results) - ok - not_found}

    def as_dict(self) -> Dict[str, Any]:
        return {
            "seed_url": self.seed_url,
            "status": self.status.value,
            "scanned_count": self.progress.scanned_count,
            "total_found": self.progress.total_found,
            "rounds": self.rounds,
            "summary": self.summary(),
            "results": self.rows(),
        }

    def json(self, *, pretty: bool = False) -> str:
        return json.dumps(self.as_dict(), ensure_ascii=False, indent=2 if pretty else None)


def build_report(
    seed_url: str,
    results: Sequence[PageResult],
    progress: CrawlProgress,
    *,
    status: CrawlStatus = CrawlStatus.COMPLETED,
    rounds: int = 0,
) -> CrawlReport:
    """Собирает CrawlReport из результатов краулера."""
    return CrawlReport(
        seed_url=seed_url,
        status=status,
        results=list(results),
        progress=progress,
        rounds=rounds,
    )
