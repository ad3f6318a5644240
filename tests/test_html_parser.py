# File: tests/test_html_parser.py
import pytest

from site_crawler.crawler.models import PageMetadata
from site_crawler.parser.html_parser import NO_DESCRIPTION, NO_TITLE, extract_metadata, parse_html


def test_extract_title_and_description():
    html = (
        "<html><head><title> Home page </title>"
        '<meta name="description" content="Everything about us">'
        "</head><body></body></html>"
    )
    assert extract_metadata(html) == PageMetadata("Home page", "Everything about us")


@pytest.mark.parametrize(
    "html",
    [
        "<html><head></head><body><h1>Hello</h1></body></html>",
        "<html><head><title></title></head></html>",
        "<html><head><title>   </title></head></html>",
        "",
    ],
)
def test_missing_title_defaults(html):
    assert extract_metadata(html).title == NO_TITLE == "No title"


@pytest.mark.parametrize(
    "html",
    [
        "<html><head><title>T</title></head></html>",
        '<html><head><meta name="description" content=""></head></html>',
        '<html><head><meta name="keywords" content="a, b"></head></html>',
        '<html><head><meta name="description"></head></html>',
    ],
)
def test_missing_description_defaults(html):
    assert extract_metadata(html).description == NO_DESCRIPTION == "No description"


def test_parse_html_collects_hrefs_in_order():
    html = (
        "<title>Links</title><body>"
        '<a href="/b">B</a><a name="anchor">no href</a>'
        '<a href="https://other.com/">X</a><a href="#top">top</a><a href="/b">B again</a>'
        "</body>"
    )
    page = parse_html(html)
    assert page.title == "Links"
    assert page.hrefs == ["/b", "https://other.com/", "#top", "/b"]
    assert page.metadata == PageMetadata("Links", NO_DESCRIPTION)

