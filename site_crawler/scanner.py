# === FILE: site_crawler/scanner.py ===
"""
Модуль-обёртка для функции запуска обхода.
"""
from typing import Optional

from site_crawler.aggregator import CrawlReport, build_report
from site_crawler.config import CrawlerConfig
from site_crawler.crawler.crawler import AsyncCrawler
from site_crawler.crawler.state import Subscriber


async def start_crawl(
    cfg: CrawlerConfig,
    seed_url: str,
    on_result: Optional[Subscriber] = None,
) -> CrawlReport:
    """
    Запускает асинхронный краулер в контексте и возвращает CrawlReport.

    Parameters
    ----------
    cfg : CrawlerConfig
        Конфигурация обхода.
    seed_url : str
        Стартовый URL; обходятся только страницы того же origin.
    on_result : callable, optional
        Вызывается для каждого PageResult сразу после его получения.

    Returns
    -------
    CrawlReport
        Результаты в порядке получения и финальные счётчики.
    """
    async with AsyncCrawler(cfg, seed_url) as crawler:
        if on_result is not None:
            crawler.subscribe(on_result)
        results = await crawler.crawl()
        state = crawler.state
        return build_report(
            seed_url,
            results,
            state.progress,
            status=state.status,
            rounds=state.rounds,
        )

__all__ = ["start_crawl"]
