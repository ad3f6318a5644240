# === FILE: site_crawler/parser/html_parser.py ===
"""HTML parsing utilities for SiteCrawler.

Every fetched page is parsed exactly once; :func:`parse_html` returns what
the crawler needs from it:

* title — document ``<title>`` text or ``"No title"``.
* description — ``<meta name="description" content="…">`` or
  ``"No description"``.
* hrefs — raw ``href`` values of all ``<a>`` tags in document order. They
  are resolved and filtered by :mod:`site_crawler.crawler.link_extractor`.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from bs4 import BeautifulSoup
from bs4.element import Tag

from site_crawler.crawler.models import PageMetadata

__all__: Sequence[str] = ("ParsedPage", "parse_html", "extract_metadata", "NO_TITLE", "NO_DESCRIPTION")

NO_TITLE = "No title"
NO_DESCRIPTION = "No description"


@dataclass(slots=True)
class ParsedPage:
    """Lightweight representation of an HTML page."""

    title: str
    description: str
    hrefs: list[str] = field(default_factory=list)

    @property
    def metadata(self) -> PageMetadata:
        return PageMetadata(title=self.title, description=self.description)


def _title(soup: BeautifulSoup) -> str:
    tag = soup.find("title")
    text = tag.get_text(strip=True) if isinstance(tag, Tag) else ""
    return text or NO_TITLE


def _description(soup: BeautifulSoup) -> str:
    tag = soup.find("meta", attrs={"name": "description"})
    if not isinstance(tag, Tag):
        return NO_DESCRIPTION
    content = tag.get("content")
    if isinstance(content, list):
        content = " ".join(content)
    return content or NO_DESCRIPTION


def _hrefs(soup: BeautifulSoup) -> list[str]:
    hrefs: list[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if isinstance(href, str):
            hrefs.append(href)
    return hrefs


def parse_html(html: str) -> ParsedPage:
    """Parse *html* once and return metadata plus raw link targets."""
    soup = BeautifulSoup(html, "html.parser")
    return ParsedPage(title=_title(soup), description=_description(soup), hrefs=_hrefs(soup))


def extract_metadata(html: str) -> PageMetadata:
    """Title and description of *html* with the crawler's defaults applied."""
    soup = BeautifulSoup(html, "html.parser")
    return PageMetadata(title=_title(soup), description=_description(soup))
