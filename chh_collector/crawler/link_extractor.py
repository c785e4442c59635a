# chh_collector/crawler/link_extractor.py
"""
Link extraction for fetched pages.
"""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from chh_collector.logger import get_logger

__all__ = ("extract_links", "resolve_base")

log = get_logger("link_extractor")


def resolve_base(soup: BeautifulSoup, location: str) -> str:
    """Return the URL relative links resolve against: ``<base href>`` if present, else *location*."""
    base = soup.find("base", href=True)
    if isinstance(base, Tag):
        href = base.get("href")
        if isinstance(href, str) and href.strip():
            return urljoin(location, href.strip())
    return location


def extract_links(html: str, location: str, soup: Optional[BeautifulSoup] = None) -> List[str]:
    """
    Return the absolute ``href`` of every ``<a href>`` in document order.

    Duplicates are kept; scheme and host filtering is left to the link filter.
    """
    if soup is None:
        soup = BeautifulSoup(html, "html.parser")
    base = resolve_base(soup, location)
    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        try:
            absolute = urljoin(base, href_val.strip())
        except ValueError:
            log.debug("Cannot resolve href %r on %s", href_val, location)
            continue
        if absolute:
            links.append(absolute)
    return links
