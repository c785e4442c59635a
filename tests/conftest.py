# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Callable, Dict, Iterable, List, Optional

import pytest
from aiohttp import web

from chh_collector.config import CrawlerConfig
from chh_collector.crawler.models import Page
from chh_collector.errors import FetchError
from chh_collector.visitor import StopToken


class FakeFetcher:
    """In-memory fetcher: *site* maps a URL to the links found on that page."""

    def __init__(self, site: Dict[str, List[str]], failing: Iterable[str] = ()) -> None:
        self.site = site
        self.failing = set(failing)
        self.calls: List[str] = []

    async def fetch(self, url: str) -> Page:
        self.calls.append(url)
        if url in self.failing or url not in self.site:
            raise FetchError(url, "unreachable")
        return Page(url=url, location=url, html="<html></html>", links=list(self.site[url]))


class RecordingVisitor:
    """Visitor that records visited locations and optionally stops after N visits."""

    def __init__(
        self,
        stop_after: Optional[int] = None,
        accept: Callable[[str], bool] = lambda url: True,
    ) -> None:
        self.stop_after = stop_after
        self.accept = accept
        self.visited: List[str] = []

    def on_visit(self, page: Page, token: StopToken) -> None:
        self.visited.append(page.location)
        if self.stop_after is not None and len(self.visited) >= self.stop_after:
            token.stop()

    def should_visit(self, url: str) -> bool:
        return self.accept(url)


@pytest.fixture()
def make_config() -> Callable[..., CrawlerConfig]:
    """
    Return a factory for CrawlerConfig with no courtesy delay.
    """
    def _make(seed_urls: List[str], **overrides) -> CrawlerConfig:
        params = {"request_delay": 0.0, "timeout": 2.0}
        params.update(overrides)
        return CrawlerConfig(seed_urls=seed_urls, **params)

    return _make


@pytest.fixture()
def release_html() -> str:
    """
    A Rapzilla release page.
    """
    return (
        "<html><head><title>Free Download: Lecrae &amp; Andy Mineo – Never Land</title></head>"
        "<body><time>Created: 12 March 2016</time>"
        '<a href="/rz/music/freemp3s/4242-next-one">next</a></body></html>'
    )


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()
