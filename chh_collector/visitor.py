"""
Visitor capability: site-specific logic plugged into the crawl loop.

A visitor is any object with ``on_visit(page, token)`` and
``should_visit(url)``. The controller hands each ``on_visit`` call the
run's :class:`StopToken`; calling ``token.stop()`` ends the crawl once
``on_visit`` returns.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from chh_collector.crawler.models import Page
from chh_collector.logger import get_logger

__all__ = ("StopToken", "Visitor", "BaseVisitor")

log = get_logger("visitor")


class StopToken:
    """Cooperative stop signal shared by the controller and its visitor."""

    __slots__ = ("_running",)

    def __init__(self) -> None:
        self._running = True

    @property
    def is_running(self) -> bool:
        return self._running

    def stop(self) -> None:
        if self._running:
            log.info("The web crawler is stopping...")
        self._running = False


@runtime_checkable
class Visitor(Protocol):
    def on_visit(self, page: Page, token: StopToken) -> None:
        """Handle a fetched page; may call ``token.stop()``."""
        ...

    def should_visit(self, url: str) -> bool:
        """Secondary, site-specific filter for candidate links."""
        ...


class BaseVisitor:
    """Visitor defaults: log the page, accept every link."""

    def on_visit(self, page: Page, token: StopToken) -> None:
        log.info("Currently visiting %s", page.location)

    def should_visit(self, url: str) -> bool:
        return True
