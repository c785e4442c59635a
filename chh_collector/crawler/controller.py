# === FILE: chh_collector/crawler/controller.py ===
from __future__ import annotations

from typing import Optional, Protocol

from chh_collector.config import CrawlerConfig
from chh_collector.crawler.fetcher import Fetcher
from chh_collector.crawler.frontier import UrlFrontier
from chh_collector.crawler.link_filter import should_visit
from chh_collector.crawler.models import CrawlState, CrawlStats, Page
from chh_collector.errors import FetchError
from chh_collector.logger import get_logger
from chh_collector.visitor import BaseVisitor, StopToken, Visitor

__all__ = ("CrawlController", "PageFetcher")

log = get_logger("controller")


class PageFetcher(Protocol):
    async def fetch(self, url: str) -> Page:
        ...


class CrawlController:
    """
    Sequential crawl loop: dequeue, fetch, visit, expand.

    The run ends when the frontier drains or the visitor stops the token.
    Fetch failures skip the URL; they are neither retried nor counted.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        visitor: Optional[Visitor] = None,
        fetcher: Optional[PageFetcher] = None,
    ) -> None:
        self.config = config
        self.visitor: Visitor = visitor if visitor is not None else BaseVisitor()
        self.fetcher = fetcher
        self.frontier = UrlFrontier(config.seed_urls)
        self.token = StopToken()
        self.stats = CrawlStats()
        self._state = CrawlState.IDLE

    @property
    def state(self) -> CrawlState:
        return self._state

    @property
    def total_links_visited(self) -> int:
        return self.stats.total_links_visited

    def stop(self) -> None:
        self.token.stop()

    async def crawl(self) -> CrawlStats:
        if self._state is not CrawlState.IDLE:
            raise RuntimeError(f"crawl() already ran (state: {self._state.value})")

        if self.fetcher is not None:
            await self._run(self.fetcher)
        else:
            async with Fetcher(
                timeout=self.config.timeout,
                request_delay=self.config.request_delay,
                user_agent=self.config.user_agent,
            ) as fetcher:
                await self._run(fetcher)
        return self.stats

    async def _run(self, fetcher: PageFetcher) -> None:
        self._transition(CrawlState.RUNNING)
        log.info("Starting the web crawler...")
        log.info("Seed urls: %s", ", ".join(self.config.seed_urls))

        try:
            while self.token.is_running and not self.frontier.is_empty():
                url = self.frontier.next_url()
                if url is None:
                    break

                try:
                    page = await fetcher.fetch(url)
                except FetchError as exc:
                    log.warning("Failed to fetch %s: %s", url, exc.reason)
                    continue

                self.stats.total_links_visited += 1

                if not self.config.scrape_seed_urls and self.config.is_seed(url):
                    log.debug("Seed url not scraped: %s", url)
                else:
                    self._visit(page)

                if not self.token.is_running:
                    break

                self._expand(page)
        finally:
            self._transition(CrawlState.DRAINING if self.token.is_running else CrawlState.STOPPED)
            self._transition(CrawlState.FINISHED)
        log.info("The web crawler has finished: %d links visited", self.stats.total_links_visited)

    def _visit(self, page: Page) -> None:
        try:
            self.visitor.on_visit(page, self.token)
        except Exception:
            log.exception("Visitor failed on %s", page.location)

    def _expand(self, page: Page) -> None:
        added = 0
        for link in page.links:
            if should_visit(link, self.config) and self._visitor_accepts(link):
                if self.frontier.add_url(link):
                    added += 1
        log.debug("%s: %d links found, %d queued", page.location, len(page.links), added)

    def _visitor_accepts(self, link: str) -> bool:
        try:
            return bool(self.visitor.should_visit(link))
        except Exception:
            log.exception("Visitor should_visit failed on %s; link rejected", link)
            return False

    def _transition(self, new_state: CrawlState) -> None:
        log.debug("Crawl state %s -> %s", self._state.value, new_state.value)
        self._state = new_state
