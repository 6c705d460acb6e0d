# === FILE: link_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Optional

from aiohttp import ClientSession, ClientTimeout, TCPConnector
from link_scout.config import CrawlConfig
from link_scout.crawler.checker import LinkChecker
from link_scout.crawler.fetcher import PageFetcher
from link_scout.crawler.models import Link, Page
from link_scout.crawler.resolver import resolve
from link_scout.crawler.visited import VisitedSet
from link_scout.errors import InvalidURL, LinkScoutError
from link_scout.report import CrawlReport, FetchFailure, PageResult

__all__ = ("SiteCrawler",)


class SiteCrawler:
    """
    Depth-bounded recursive crawler.

    Every claimed URL becomes one task in a TaskGroup; tasks spawn their
    children into the same group, so ``crawl()`` returns only once the whole
    task tree has finished. Requests are not capped unless ``max_concurrency``
    is configured.
    """

    def __init__(self, config: CrawlConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self._validate_config()
        self.visited = VisitedSet()
        self.session: Optional[ClientSession] = session
        self._owns_session = session is None
        self.logger = logging.getLogger("LinkScout")
        limit = self.config.max_concurrency
        self._limiter: Optional[asyncio.Semaphore] = asyncio.Semaphore(limit) if limit else None
        self._group: Optional[asyncio.TaskGroup] = None
        self._report: Optional[CrawlReport] = None
        self.fetcher: Optional[PageFetcher] = None
        self.checker: Optional[LinkChecker] = None
        if session is not None:
            self._bind(session)

    async def __aenter__(self) -> SiteCrawler:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                connector=TCPConnector(limit=self.config.max_concurrency or 0),
                raise_for_status=False,
            )
            self._bind(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    def _bind(self, session: ClientSession) -> None:
        self.fetcher = PageFetcher(session, limiter=self._limiter)
        self.checker = LinkChecker(
            session,
            verbose=self.config.verbose,
            method=self.config.check_method,
            limiter=self._limiter,
        )

    async def crawl(self) -> CrawlReport:
        if not self.session:
            raise RuntimeError("Session not initialized")
        root = self.config.root_url
        self.visited = VisitedSet()
        report = self._report = CrawlReport(root_url=root, max_depth=self.config.max_depth)
        self.logger.info("Starting crawl at: %s, Depth: %d", root, self.config.max_depth)
        start = time.monotonic()
        try:
            async with asyncio.TaskGroup() as group:
                self._group = group
                self.visit(root, 0)
        finally:
            self._group = None
        report.duration = time.monotonic() - start
        self.logger.info(
            "Crawl finished: %d pages fetched, %d failed, %d broken links in %.2f s",
            len(report.pages), len(report.failures), len(report.broken_links), report.duration,
        )
        return report

    def visit(self, url: str, depth: int) -> bool:
        """
        Claim *url* at *depth* and spawn its fetch task.

        Returns False when the URL is beyond the depth limit or already claimed.
        """
        if self._group is None:
            raise RuntimeError("visit() is only valid while crawl() is running")
        if depth > self.config.max_depth:
            return False
        if not self.visited.claim(url):
            return False
        self._group.create_task(self._process(url, depth))
        return True

    async def _process(self, url: str, depth: int) -> None:
        try:
            page = await self.fetcher.fetch(url)
        except LinkScoutError as exc:
            # the branch ends here, siblings keep going
            self.logger.warning("Error fetching page %s: %s", url, exc)
            self._report.failures.append(FetchFailure(url=url, depth=depth, error=str(exc)))
            return

        self.logger.info("Fetched: %s, Depth: %d", page.url, depth)
        children = self._resolve_links(page)
        broken = await self.checker.check_links(children)
        self.logger.info("Broken Links on %s:", page.url)
        for link in broken:
            self.logger.info("- %s (Status: %d)", link.url, link.status)
        self._report.pages.append(
            PageResult(url=page.url, depth=depth, links_found=len(page.links), broken=broken)
        )

        for link in children:
            self.visit(link.url, depth + 1)

    def _resolve_links(self, page: Page) -> List[Link]:
        """Absolute form of every link on *page*; unresolvable ones are dropped."""
        resolved: List[Link] = []
        for link in page.links:
            try:
                resolved.append(Link(url=resolve(page.url, link.url)))
            except InvalidURL as exc:
                self.logger.debug("Skipping %r on %s: %s", link.url, page.url, exc)
        return resolved

    def _validate_config(self) -> None:
        required = ("root_url", "max_depth", "verbose", "timeout", "max_concurrency", "check_method")
        for f in required:
            if not hasattr(self.config, f):
                raise AttributeError(f"config missing '{f}'")
        if self.config.max_depth < 0:
            raise ValueError("max_depth must be >= 0")
