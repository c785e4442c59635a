# File: chh_collector/engine.py
"""chh_collector.engine: entry point used by the CLI to run one crawl."""

from __future__ import annotations

from typing import Optional

from chh_collector.config import CrawlerConfig
from chh_collector.crawler.controller import CrawlController
from chh_collector.crawler.models import CrawlStats
from chh_collector.logger import logger
from chh_collector.visitor import Visitor

__all__ = ["start_crawl"]


async def start_crawl(config: CrawlerConfig, visitor: Optional[Visitor] = None) -> CrawlStats:
    """
    Run a crawl with *visitor* and return its statistics.

    Parameters
    ----------
    config : CrawlerConfig
        Seeds and crawl policy.
    visitor : Visitor, optional
        Site-specific logic; defaults to :class:`~chh_collector.visitor.BaseVisitor`.
    """
    controller = CrawlController(config, visitor)
    stats = await controller.crawl()
    logger.info("Total links visited: %d", stats.total_links_visited)
    return stats
