# chh_collector/crawler/fetcher.py
"""
Fetcher module: one GET per URL with a courtesy delay and a fixed timeout.
"""
from __future__ import annotations

import asyncio
from typing import Final, Optional

from aiohttp import ClientError, ClientSession, ClientTimeout
from bs4 import BeautifulSoup

from chh_collector.crawler.link_extractor import extract_links
from chh_collector.crawler.models import Page
from chh_collector.errors import FetchError
from chh_collector.logger import get_logger

__all__ = ("Fetcher", "DEFAULT_TIMEOUT", "DEFAULT_REQUEST_DELAY")

#: connect/read timeout for a single request, seconds
DEFAULT_TIMEOUT: Final[float] = 3.0
#: pause before every request, seconds
DEFAULT_REQUEST_DELAY: Final[float] = 1.0

_XML_MIME_TYPES: Final = ("application/xhtml+xml", "application/xml")

log = get_logger("fetcher")


def _is_parseable(mime: str) -> bool:
    # a missing Content-Type is given the benefit of the doubt
    return not mime or mime.startswith("text/") or mime in _XML_MIME_TYPES or mime.endswith("+xml")


class Fetcher:
    """Fetches and parses pages one at a time. Use as ``async with Fetcher(...) as f``."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        request_delay: float = DEFAULT_REQUEST_DELAY,
        user_agent: Optional[str] = None,
        session: Optional[ClientSession] = None,
    ) -> None:
        self.timeout = timeout
        self.request_delay = request_delay
        self.user_agent = user_agent
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            headers = {"User-Agent": self.user_agent} if self.user_agent else None
            self.session = ClientSession(
                timeout=ClientTimeout(total=None, sock_connect=self.timeout, sock_read=self.timeout),
                headers=headers,
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self.session is not None and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> Page:
        """
        Sleep the courtesy delay, GET *url* and parse the body.

        Raises FetchError on network errors, timeouts, HTTP error statuses and
        content that is not HTML/XML.
        """
        if self.session is None:
            raise RuntimeError("Session not initialized")

        log.debug("Sleeping %.2f s before %s", self.request_delay, url)
        await asyncio.sleep(self.request_delay)

        try:
            async with self.session.get(url) as resp:
                if resp.status >= 400:
                    raise FetchError(url, f"HTTP status {resp.status}")
                mime = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
                if not _is_parseable(mime):
                    raise FetchError(url, f"unsupported content type {mime!r}")
                html = await resp.text()
                location = str(resp.url)
        except (ClientError, asyncio.TimeoutError, UnicodeDecodeError, ValueError) as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

        soup = BeautifulSoup(html, "html.parser")
        return Page(url=url, location=location, html=html, links=extract_links(html, location, soup))
