"""
URL frontier: FIFO queue of pending URLs plus the set of URLs already handed out.

A URL is recorded as visited the moment it is dequeued, not when its fetch
succeeds, so a failed fetch drops the URL for the rest of the run.
"""
from __future__ import annotations

from collections import deque
from typing import AbstractSet, Deque, Iterable, Optional, Set

from chh_collector.logger import get_logger

__all__ = ("UrlFrontier",)

log = get_logger("frontier")


class UrlFrontier:
    """Visit-once URL queue."""

    def __init__(self, seeds: Iterable[str] = ()) -> None:
        self._pending: Deque[str] = deque()
        # mirrors _pending for O(1) membership checks
        self._pending_set: Set[str] = set()
        self._visited: Set[str] = set()
        for url in seeds:
            self.add_url(url)

    def add_url(self, url: Optional[str]) -> bool:
        """
        Append *url* to the tail of the queue unless it was already seen.

        Returns True if the URL was queued. Raises ValueError for an empty URL.
        """
        if not url:
            raise ValueError("url must be a non-empty string")
        if url in self._visited or url in self._pending_set:
            log.debug("Url already seen: %s", url)
            return False
        self._pending.append(url)
        self._pending_set.add(url)
        log.debug("Url added to queue: %s", url)
        return True

    def next_url(self) -> Optional[str]:
        """Pop the head of the queue and mark it visited; None when empty."""
        if not self._pending:
            return None
        url = self._pending.popleft()
        self._pending_set.discard(url)
        self._visited.add(url)
        return url

    def is_empty(self) -> bool:
        return not self._pending

    def is_visited(self, url: str) -> bool:
        return url in self._visited

    @property
    def visited(self) -> AbstractSet[str]:
        return frozenset(self._visited)

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, url: object) -> bool:
        return url in self._pending_set
