"""
Scraper for Rapzilla's free-mp3 directory.

Each release page carries a ``<title>`` of the form
``Free Download: <artist> - <project>`` and a single
``<time>Created: <date></time>`` element.
"""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup

from chh_collector.crawler.models import Page
from chh_collector.logger import get_logger
from chh_collector.utils import replace_ampersand, replace_dashes
from chh_collector.visitor import StopToken

__all__ = (
    "MusicData",
    "RapzillaVisitor",
    "RELEASE_URL_RE",
    "scrape_artist",
    "scrape_project",
    "scrape_date",
)

log = get_logger("rapzilla")

RELEASE_URL_RE = re.compile(r"https?://www\.rapzilla\.com/rz/music/freemp3s/\d+.+")

_LABEL_RE = re.compile(r"^\s*Free[^:]*:\s*")
_CREATED_RE = re.compile(r"Created:\s*")


@dataclass(slots=True)
class MusicData:
    """One scraped release. Fields are None when the page did not yield them."""

    url: str
    project: Optional[str] = None
    artist: Optional[str] = None
    date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _single_text(soup: BeautifulSoup, tag_name: str) -> Optional[str]:
    tags = soup.find_all(tag_name)
    if len(tags) != 1:
        log.debug("Expected one <%s>, found %d", tag_name, len(tags))
        return None
    return tags[0].get_text()


def _title(soup: BeautifulSoup) -> Optional[str]:
    text = _single_text(soup, "title")
    if text is None:
        return None
    text = replace_ampersand(replace_dashes(text))
    if "-" not in text:
        log.debug("The title did not contain a dash: %r", text)
        return None
    return text


def scrape_artist(soup: BeautifulSoup) -> Optional[str]:
    """Artist: the title between the ``Free ...:`` label and the first dash."""
    title = _title(soup)
    if title is None:
        return None
    artist = _LABEL_RE.sub("", title).split("-", 1)[0].strip()
    return artist or None


def scrape_project(soup: BeautifulSoup) -> Optional[str]:
    """Project (song or album): the title after the last dash."""
    title = _title(soup)
    if title is None:
        return None
    project = title.rsplit("-", 1)[1].strip()
    return project or None


def scrape_date(soup: BeautifulSoup) -> Optional[str]:
    text = _single_text(soup, "time")
    if text is None:
        return None
    date = _CREATED_RE.sub("", text).strip()
    return date or None


class RapzillaVisitor:
    """
    Visitor that follows release links only and scrapes each release page.

    With *limit* set, the crawl is stopped once that many releases were scraped.
    """

    def __init__(self, limit: Optional[int] = None) -> None:
        if limit is not None and limit < 1:
            raise ValueError("limit must be >= 1")
        self.limit = limit
        self.records: List[MusicData] = []

    def should_visit(self, url: str) -> bool:
        return RELEASE_URL_RE.fullmatch(url) is not None

    def on_visit(self, page: Page, token: StopToken) -> None:
        log.info("Currently visiting url: %s", page.location)
        if RELEASE_URL_RE.fullmatch(page.location) is None:
            return

        soup = BeautifulSoup(page.html, "html.parser")
        record = MusicData(
            url=page.location,
            project=scrape_project(soup),
            artist=scrape_artist(soup),
            date=scrape_date(soup),
        )
        self.records.append(record)
        log.info("Scraped new music data: %s", record)

        if self.limit is not None and len(self.records) >= self.limit:
            token.stop()
