"""link_scout.crawler: fetch, extract, check and recurse."""
from link_scout.crawler.checker import LinkChecker, is_broken
from link_scout.crawler.crawler import SiteCrawler
from link_scout.crawler.fetcher import PageFetcher
from link_scout.crawler.link_extractor import extract_links
from link_scout.crawler.models import FETCH_FAILED, Link, Page
from link_scout.crawler.resolver import resolve
from link_scout.crawler.visited import VisitedSet

__all__ = [
    "FETCH_FAILED",
    "Link",
    "LinkChecker",
    "Page",
    "PageFetcher",
    "SiteCrawler",
    "VisitedSet",
    "extract_links",
    "is_broken",
    "resolve",
]
