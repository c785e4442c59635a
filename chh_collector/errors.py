"""Exception types raised by the crawler."""
from __future__ import annotations

__all__ = ("CrawlerError", "FetchError")


class CrawlerError(Exception):
    """Base class for crawler errors."""


class FetchError(CrawlerError):
    """A single page could not be fetched or was not usable HTML."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
