# File: link_scout/engine.py
"""link_scout.engine: entry point that runs one crawl for the CLI and for tests."""

from __future__ import annotations

from link_scout.config import CrawlConfig
from link_scout.crawler.crawler import SiteCrawler
from link_scout.logger import logger
from link_scout.report import CrawlReport

__all__ = ["start_crawl"]


async def start_crawl(cfg: CrawlConfig) -> CrawlReport:
    """
    Run a SiteCrawler inside its own HTTP session and return the report.

    Parameters
    ----------
    cfg : CrawlConfig
        Validated crawl settings.
    """
    async with SiteCrawler(cfg) as crawler:
        report = await crawler.crawl()
    if report.failures and not report.pages:
        logger.error("Root page could not be fetched: %s", report.failures[0].error)
    return report
