# site_crawler/crawler/fetcher.py
"""
Fetcher module: one HTTP GET per page, no retries, every outcome classified.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientResponseError, ClientSession, TooManyRedirects

from site_crawler.config import CrawlerConfig
from site_crawler.crawler.models import (
    ERROR_STATUS,
    FetchOutcome,
    FetchSuccess,
    HttpError,
    PageMetadata,
    PageResult,
    TransportError,
)
from site_crawler.logger import logger

NOT_FOUND_TITLE = "Page Not Found"
ERROR_TITLE = "Error"


class Fetcher:
    """Fetches pages through a shared session and never raises on network errors."""

    def __init__(self, session: ClientSession, config: CrawlerConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> FetchOutcome:
        """
        GET *url* and return a tagged outcome.

        Only a 200 response has its body read. Timeouts, redirect loops and
        connection errors become TransportError.
        """
        max_redirects = self.config.max_redirects
        # aiohttp reads max_redirects=0 as "no limit"
        redirects = {"max_redirects": max_redirects} if max_redirects else {"allow_redirects": False}
        try:
            async with self.session.get(url, **redirects) as resp:
                if resp.status != 200:
                    logger.debug("HTTP %s for %s", resp.status, url)
                    return HttpError(url, resp.status)
                body = await resp.text(errors="replace")
                return FetchSuccess(url, resp.status, body)
        except asyncio.TimeoutError:
            outcome = TransportError(url, f"Request timed out after {self.config.timeout:g}s")
        except TooManyRedirects:
            outcome = TransportError(
                url, f"Maximum number of redirects ({self.config.max_redirects}) exceeded"
            )
        except ClientResponseError as exc:
            outcome = TransportError(url, exc.message or str(exc), exc.status or ERROR_STATUS)
        except ClientError as exc:
            outcome = TransportError(url, str(exc) or type(exc).__name__)
        logger.warning("Failed %s: %s", url, outcome.message)
        return outcome


def classify(outcome: FetchOutcome, metadata: Optional[PageMetadata] = None) -> PageResult:
    """Turn a fetch outcome into the PageResult recorded for its URL."""
    if isinstance(outcome, FetchSuccess):
        if metadata is None:
            raise ValueError("metadata is required for a successful fetch")
        return PageResult(outcome.url, outcome.status, metadata.title, metadata.description)
    if isinstance(outcome, HttpError):
        title = NOT_FOUND_TITLE if outcome.status == 404 else ERROR_TITLE
        return PageResult(outcome.url, outcome.status, title, f"HTTP {outcome.status}")
    return PageResult(outcome.url, outcome.status, ERROR_TITLE, outcome.message)
