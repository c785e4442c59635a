"""
Data models for the crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


@dataclass(slots=True)
class Page:
    """A fetched HTML page: requested URL, final location, body and absolute anchor targets."""

    url: str
    location: str
    html: str
    links: List[str] = field(default_factory=list)


@dataclass(slots=True)
class CrawlStats:
    """Counters for one crawl run."""

    total_links_visited: int = 0


class CrawlState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    DRAINING = "draining"
    STOPPED = "stopped"
    FINISHED = "finished"
