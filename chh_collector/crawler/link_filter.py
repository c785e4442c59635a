"""
Link filtering policy applied to every candidate link before it is queued.

A link is accepted only if it passes, in this order:

* the external-link policy (when external links are not followed, the link
  must start with one of the seed URLs, as a plain string prefix);
* the extension blacklist (stylesheets, scripts, images, audio, archives);
* syntactic validity (a well-formed absolute URI).

All checks are pure; the order only saves work on the common rejections.
"""
from __future__ import annotations

import re
from typing import Final, Iterable, Tuple
from urllib.parse import urlsplit

from chh_collector.config import CrawlerConfig
from chh_collector.logger import get_logger

__all__ = (
    "BLACKLISTED_EXTENSIONS",
    "SUPPORTED_SCHEMES",
    "is_external_link",
    "has_blacklisted_extension",
    "is_valid_url",
    "should_visit",
)

log = get_logger("link_filter")

BLACKLISTED_EXTENSIONS: Final[Tuple[str, ...]] = (
    ".css", ".js", ".gif", ".jpg", ".png", ".mp3", ".zip", ".gz",
)
SUPPORTED_SCHEMES: Final[Tuple[str, ...]] = ("http", "https", "ftp", "file")

# characters that may not appear unescaped anywhere in a URI
_ILLEGAL_CHARS_RE = re.compile(r'[\x00-\x20\x7f<>"{}|\\^`]')
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_external_link(url: str, seed_urls: Iterable[str]) -> bool:
    """True if *url* does not start with any seed URL."""
    return not any(url.startswith(seed) for seed in seed_urls)


def has_blacklisted_extension(url: str) -> bool:
    """True if the URL path ends with a blacklisted extension (case-sensitive)."""
    try:
        path = urlsplit(url).path
    except ValueError:
        # unparseable; is_valid_url rejects it
        return False
    return path.endswith(BLACKLISTED_EXTENSIONS)


def is_valid_url(url: str) -> bool:
    """
    Check that *url* is a well-formed absolute URI we know how to fetch.

    Never raises: a malformed URL simply yields False.
    """
    if not url or _ILLEGAL_CHARS_RE.search(url) or _BAD_ESCAPE_RE.search(url):
        return False
    try:
        parts = urlsplit(url)
        # .port raises ValueError on a non-numeric or out-of-range port
        parts.port
    except ValueError:
        return False
    if parts.scheme not in SUPPORTED_SCHEMES:
        return False
    if parts.scheme != "file" and not parts.hostname:
        return False
    return True


def should_visit(url: str, config: CrawlerConfig) -> bool:
    """Return True if *url* may be queued under *config*'s crawl policy."""
    if not config.follow_external_links and is_external_link(url, config.seed_urls):
        log.debug("Rejected external link: %s", url)
        return False
    if has_blacklisted_extension(url):
        log.debug("Rejected blacklisted extension: %s", url)
        return False
    if not is_valid_url(url):
        log.debug("Rejected malformed url: %s", url)
        return False
    return True
