# site_crawler/crawler/models.py
"""
Data models for the SiteCrawler crawler.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

ERROR_STATUS = "Error"

Status = Union[int, str]


class CrawlError(RuntimeError):
    """The crawl as a whole could not run to completion."""


class InvalidSeedError(CrawlError, ValueError):
    """The seed URL is not a well-formed absolute URL."""

    def __init__(self, url: str, reason: Optional[str] = None) -> None:
        self.url = url
        message = f"Invalid URL: {url!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class PageResult:
    """Recorded outcome of fetching one URL, successful or not."""

    url: str
    status: Status
    title: str
    description: str

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class PageMetadata:
    title: str
    description: str


@dataclass(frozen=True, slots=True)
class FetchSuccess:
    """HTTP 200 with the decoded body."""

    url: str
    status: int
    body: str


@dataclass(frozen=True, slots=True)
class HttpError:
    """The server answered with anything other than 200."""

    url: str
    status: int


@dataclass(frozen=True, slots=True)
class TransportError:
    """No usable response: timeout, DNS, refused connection, redirect loop."""

    url: str
    message: str
    status: Status = ERROR_STATUS


FetchOutcome = Union[FetchSuccess, HttpError, TransportError]
