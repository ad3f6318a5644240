# site_crawler/crawler/link_extractor.py
"""
Link admission and URL normalization utilities for SiteCrawler.
"""
from __future__ import annotations

from typing import Iterable, List, Optional
from urllib.parse import quote, urldefrag, urljoin, urlsplit, urlunsplit

from site_crawler.crawler.models import InvalidSeedError

DEFAULT_PORTS = {"http": 80, "https": 443}

_PATH_SAFE = "/%:@!$&'()*+,;=-._~"
_QUERY_SAFE = _PATH_SAFE + "?"


def _netloc(scheme: str, host: str, port: Optional[int], userinfo: str = "") -> str:
    if ":" in host:
        host = f"[{host}]"
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        host = f"{host}:{port}"
    return f"{userinfo}@{host}" if userinfo else host


def normalize_url(base_url: str, href: Optional[str]) -> Optional[str]:
    """
    Resolve *href* against *base_url* into an absolute canonical URL.

    Scheme and host are lower-cased, default ports dropped, an empty path
    becomes ``/``. The fragment is kept so callers can reject it.
    Returns None when *href* is empty or cannot be parsed.
    """
    if not href:
        return None
    href = href.strip()
    if not href:
        return None
    try:
        parts = urlsplit(urljoin(base_url, href))
        scheme = parts.scheme.lower()
        host = parts.hostname
        if host:
            userinfo = parts.netloc.rpartition("@")[0]
            netloc = _netloc(scheme, host, parts.port, userinfo)
        else:
            netloc = parts.netloc
        path = quote(parts.path, safe=_PATH_SAFE)
        if netloc and not path:
            path = "/"
        query = quote(parts.query, safe=_QUERY_SAFE)
    except ValueError:
        return None
    return urlunsplit((scheme, netloc, path, query, parts.fragment))


def is_valid_url(url: str) -> bool:
    """True if *url* is a well-formed absolute URL with a scheme and host."""
    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError for a non-numeric port
    except (ValueError, TypeError, AttributeError):
        return False
    return bool(parts.scheme and parts.hostname)


def url_origin(url: str) -> str:
    """``scheme://host[:port]`` of *url*; ValueError if there is none."""
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = parts.hostname
    if not scheme or not host:
        raise ValueError(f"URL has no origin: {url!r}")
    return f"{scheme}://{_netloc(scheme, host, parts.port)}"


def is_same_domain(origin: str, url: str) -> bool:
    """Exact origin match. Subdomains count as different sites."""
    try:
        return url_origin(url) == origin
    except ValueError:
        return False


def admit_link(base_url: str, href: Optional[str], origin: str) -> Optional[str]:
    """Return the canonical form of *href* if it may enter the frontier."""
    if not href or "#" in href:
        return None
    candidate = normalize_url(base_url, href)
    if candidate is None or "#" in candidate:
        return None
    if not is_valid_url(candidate) or not is_same_domain(origin, candidate):
        return None
    return candidate


def extract_links(page_url: str, hrefs: Iterable[str], origin: str) -> List[str]:
    """Admitted links of a page in document order, without repeats."""
    links: List[str] = []
    seen: set[str] = set()
    for href in hrefs:
        link = admit_link(page_url, href, origin)
        if link and link not in seen:
            seen.add(link)
            links.append(link)
    return links


def validate_seed(url: str) -> str:
    """Canonical, fragment-free form of the seed or InvalidSeedError."""
    if not url or not url.strip():
        raise InvalidSeedError(url or "", "empty")
    url = url.strip()
    if not is_valid_url(url):
        raise InvalidSeedError(url)
    if urlsplit(url).scheme.lower() not in DEFAULT_PORTS:
        raise InvalidSeedError(url, "only http and https are supported")
    normalized = normalize_url(url, url)
    if normalized is None:
        raise InvalidSeedError(url)
    return urldefrag(normalized)[0]
