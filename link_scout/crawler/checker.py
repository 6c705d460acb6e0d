# link_scout/crawler/checker.py
"""
Link health checking: one concurrent request per link, then a single fan-in.
"""
from __future__ import annotations

import asyncio
import logging
from contextlib import nullcontext
from dataclasses import replace
from typing import AsyncContextManager, List, Optional, Sequence

from aiohttp import ClientError, ClientSession
from link_scout.crawler.models import FETCH_FAILED, Link

BROKEN_STATUS = range(400, 600)


def is_broken(status: Optional[int]) -> bool:
    """Only explicit 4xx/5xx answers count; FETCH_FAILED and unset do not."""
    return status is not None and status in BROKEN_STATUS


class LinkChecker:
    """Classifies links by the status their URL answers with."""

    def __init__(
        self,
        session: ClientSession,
        verbose: bool = False,
        method: str = "GET",
        limiter: Optional[AsyncContextManager] = None,
    ) -> None:
        self.session = session
        self.verbose = verbose
        self.method = method.upper()
        self._limiter = limiter if limiter is not None else nullcontext()
        self.logger = logging.getLogger("LinkScout")

    async def check_links(self, links: Sequence[Link]) -> List[Link]:
        """
        Check every link concurrently and return the broken ones.

        Returns only after all checks have finished. The result holds copies
        of the input links with ``status`` set, in input order.
        """
        checked = await asyncio.gather(*(self.check_status(link) for link in links))
        return [link for link in checked if is_broken(link.status)]

    async def check_status(self, link: Link) -> Link:
        """Request *link* once and return a copy carrying the observed status."""
        self._trace("Fetching URL: %s", link.url)
        try:
            async with self._limiter:
                async with self.session.request(self.method, link.url) as resp:
                    status = resp.status
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            self.logger.warning("Error fetching URL: %s, Error: %r", link.url, exc)
            return replace(link, status=FETCH_FAILED)

        if is_broken(status):
            self._trace("Broken URL: %s, Status: %d", link.url, status)
        else:
            self._trace("Valid URL: %s, Status: %d", link.url, status)
        return replace(link, status=status)

    def _trace(self, msg: str, *args: object) -> None:
        self.logger.log(logging.INFO if self.verbose else logging.DEBUG, msg, *args)


__all__ = ["LinkChecker", "is_broken", "BROKEN_STATUS"]
