# link_scout/crawler/visited.py
"""
Deduplication guard shared by every task of one crawl.
"""
from __future__ import annotations

import threading
from typing import Set


class VisitedSet:
    """Set of URLs already claimed for crawling, with atomic check-and-mark."""

    def __init__(self) -> None:
        self._urls: Set[str] = set()
        self._lock = threading.Lock()

    def claim(self, url: str) -> bool:
        """
        Record *url* and return True if nobody claimed it before.

        Returns False without writing anything when *url* is already recorded.
        """
        with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._urls

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)


__all__ = ["VisitedSet"]
