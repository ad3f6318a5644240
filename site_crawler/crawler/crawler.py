# === FILE: site_crawler/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import List, Optional

from aiohttp import ClientSession, ClientTimeout

from site_crawler.config import CrawlerConfig
from site_crawler.crawler.fetcher import Fetcher, classify
from site_crawler.crawler.frontier import Frontier
from site_crawler.crawler.link_extractor import extract_links, url_origin, validate_seed
from site_crawler.crawler.models import CrawlError, FetchSuccess, InvalidSeedError, PageResult
from site_crawler.crawler.state import CrawlState, CrawlStatus, Subscriber
from site_crawler.logger import logger
from site_crawler.parser.html_parser import parse_html

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """Same-origin crawler that fetches the frontier in fixed-size concurrent rounds."""

    def __init__(self, config: CrawlerConfig, seed_url: str) -> None:
        self.config = config
        self.seed_url = seed_url
        self.session: Optional[ClientSession] = None
        self.state = CrawlState()
        self.frontier = Frontier()
        self._origin: Optional[str] = None
        self._fetcher: Optional[Fetcher] = None
        self._cancelled = False

    async def __aenter__(self) -> AsyncCrawler:
        timeout = ClientTimeout(total=self.config.timeout)
        self.session = ClientSession(
            timeout=timeout,
            headers=self.config.headers(),
            raise_for_status=False,
        )
        self._fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    def subscribe(self, callback: Subscriber):
        return self.state.subscribe(callback)

    def cancel(self) -> None:
        """Stop before the next round; the round in flight still completes."""
        self._cancelled = True

    async def crawl(self) -> List[PageResult]:
        if self._fetcher is None:
            raise RuntimeError("Session not initialized")
        if self.state.status is CrawlStatus.RUNNING:
            raise RuntimeError("Crawl already running")

        self._setup()
        logger.info("Crawl started: %s", self.seed_url)
        start = time.monotonic()
        stopped = False
        try:
            while self.frontier.has_pending:
                if self._cancelled:
                    logger.info("Crawl cancelled after %d rounds", self.state.rounds)
                    stopped = True
                    break
                batch = self.frontier.take_batch(self.config.batch_size)
                for url in batch:
                    self.frontier.mark_visited(url)
                self.state.rounds += 1
                logger.debug("Round %d: %d urls, %d pending", self.state.rounds, len(batch), len(self.frontier))
                # first failure cancels the rest of the round
                async with asyncio.TaskGroup() as round_tasks:
                    for url in batch:
                        round_tasks.create_task(self._visit(url))
        except asyncio.CancelledError:
            self.state.finish(cancelled=True)
            raise
        except Exception as exc:
            cause = exc.exceptions[0] if isinstance(exc, ExceptionGroup) else exc
            self.state.fail(cause)
            logger.error("Crawl failed: %s", cause)
            raise CrawlError(f"Crawl of {self.seed_url} failed: {cause}") from cause

        self.state.finish(cancelled=stopped)
        duration = time.monotonic() - start
        scanned = self.state.progress.scanned_count
        logger.info(
            "Finished: %d pages in %d rounds, %.2f s (%.2f pages/s)",
            scanned, self.state.rounds, duration, scanned / duration if duration else 0,
        )
        return list(self.state.results)

    def _setup(self) -> None:
        """Fresh stores for this run; a bad seed fails the crawl before any fetch."""
        self.state.start()
        self.frontier = Frontier()
        self._cancelled = False
        try:
            seed = validate_seed(self.seed_url)
            self._origin = url_origin(seed)
        except InvalidSeedError as exc:
            self.state.fail(exc)
            logger.error("%s", exc)
            raise
        except ValueError as exc:
            self.state.fail(exc)
            logger.error("Cannot start crawl of %s: %s", self.seed_url, exc)
            raise InvalidSeedError(self.seed_url, str(exc)) from exc
        self.frontier.offer(seed)

    async def _visit(self, url: str) -> None:
        assert self._fetcher is not None and self._origin is not None
        outcome = await self._fetcher.fetch(url)
        if not isinstance(outcome, FetchSuccess):
            self.state.record(classify(outcome))
            return

        page = parse_html(outcome.body)
        self.state.record(classify(outcome, page.metadata))
        for link in extract_links(url, page.hrefs, self._origin):
            if self.frontier.offer(link):
                self.state.link_found()
