# File: tests/conftest.py
from __future__ import annotations

import socket
from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
from contextlib import asynccontextmanager
from typing import Union

import pytest
from aiohttp import web

from site_crawler.config import CrawlerConfig

Route = Union[str, tuple[int, str], Callable[[web.Request], Awaitable[web.StreamResponse]]]


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


def html_page(title: str = "", body: str = "", description: str | None = None) -> str:
    head = f"<title>{title}</title>" if title else ""
    if description is not None:
        head += f'<meta name="description" content="{description}">'
    return f"<html><head>{head}</head><body>{body}</body></html>"


def build_app(routes: Mapping[str, Route]) -> web.Application:
    """
    Build an aiohttp app from ``path -> route``.

    A route is HTML text (served with 200), a ``(status, text)`` pair or a
    request handler.
    """
    app = web.Application()

    def make_handler(route: Route):
        if callable(route):
            return route
        status, text = route if isinstance(route, tuple) else (200, route)

        async def handler(_):
            return web.Response(status=status, text=text, content_type="text/html")

        return handler

    for path, route in routes.items():
        app.router.add_get(path, make_handler(route))
    return app


@asynccontextmanager
async def serve_app(app: web.Application) -> AsyncIterator[str]:
    """Start *app* on an ephemeral port, yield its base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    port = runner.addresses[0][1]
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def closed_port() -> int:
    """A local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """
    Return a CrawlerConfig with short timeouts for tests.
    """
    return CrawlerConfig(timeout=2.0, user_agent="TestAgent/1.0")
