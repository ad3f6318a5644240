# File: tests/test_link_extractor.py
import pytest

from site_crawler.crawler.link_extractor import (
    admit_link,
    extract_links,
    is_same_domain,
    is_valid_url,
    normalize_url,
    url_origin,
    validate_seed,
)
from site_crawler.crawler.models import InvalidSeedError

BASE = "https://ex.com/dir/page"
ORIGIN = "https://ex.com"


@pytest.mark.parametrize(
    "href,expected",
    [
        ("other", "https://ex.com/dir/other"),
        ("/root", "https://ex.com/root"),
        ("../up", "https://ex.com/up"),
        ("//cdn.ex.com/x", "https://cdn.ex.com/x"),
        ("#top", "https://ex.com/dir/page#top"),
        ("HTTPS://Ex.COM:443/A", "https://ex.com/A"),
        ("http://ex.com:8080", "http://ex.com:8080/"),
        ("?q=1&b=2", "https://ex.com/dir/page?q=1&b=2"),
        ("/a b", "https://ex.com/a%20b"),
        ("  /trimmed  ", "https://ex.com/trimmed"),
    ],
)
def test_normalize_url_resolution(href, expected):
    assert normalize_url(BASE, href) == expected


@pytest.mark.parametrize("href", [None, "", "   ", "http://[::1"])
def test_normalize_url_skips_empty_and_malformed(href):
    assert normalize_url(BASE, href) is None


@pytest.mark.parametrize(
    "url",
    [
        "https://ex.com/",
        "https://ex.com/a%20b?x=1",
        "http://localhost:8080/path/",
    ],
)
def test_normalize_url_idempotent(url):
    once = normalize_url(url, url)
    assert once == url
    assert normalize_url(once, once) == once


@pytest.mark.parametrize(
    "url,valid",
    [
        ("https://ex.com", True),
        ("http://127.0.0.1:8000/x", True),
        ("/relative/path", False),
        ("ex.com", False),
        ("mailto:someone@ex.com", False),
        ("javascript:void(0)", False),
        ("http://ex.com:port/", False),
    ],
)
def test_is_valid_url(url, valid):
    assert is_valid_url(url) is valid


def test_url_origin():
    assert url_origin("https://ex.com/a/b?c") == "https://ex.com"
    assert url_origin("https://EX.com:443/") == "https://ex.com"
    assert url_origin("http://localhost:8080/x") == "http://localhost:8080"
    with pytest.raises(ValueError):
        url_origin("/no/origin")


@pytest.mark.parametrize(
    "url,same",
    [
        ("https://ex.com/page", True),
        ("https://ex.com:443/page", True),
        ("https://sub.ex.com/page", False),
        ("http://ex.com/page", False),
        ("https://ex.com:8443/page", False),
        ("https://other.com/", False),
        ("not a url", False),
    ],
)
def test_is_same_domain(url, same):
    assert is_same_domain(ORIGIN, url) is same


@pytest.mark.parametrize(
    "href,expected",
    [
        ("/a", "https://ex.com/a"),
        ("/a#frag", None),
        ("#", None),
        ("https://other.com/b", None),
        ("https://sub.ex.com/b", None),
        ("mailto:someone@ex.com", None),
        ("javascript:void(0)", None),
        ("", None),
    ],
)
def test_admit_link(href, expected):
    assert admit_link(BASE, href, ORIGIN) == expected


def test_extract_links_dedupes_in_document_order():
    hrefs = ["/b", "/a", "/a#frag", "https://other.com/b", "/a", "https://ex.com/b"]
    assert extract_links("https://ex.com/", hrefs, ORIGIN) == [
        "https://ex.com/b",
        "https://ex.com/a",
    ]


def test_validate_seed_normalizes():
    assert validate_seed("https://Ex.com") == "https://ex.com/"
    assert validate_seed("  https://ex.com/docs#intro ") == "https://ex.com/docs"


@pytest.mark.parametrize("seed", ["", "   ", "ex.com", "/path", "ftp://ex.com/", "http://[::1"])
def test_validate_seed_rejects(seed):
    with pytest.raises(InvalidSeedError):
        validate_seed(seed)
