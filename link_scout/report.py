# File: link_scout/report.py
"""link_scout.report: in-memory summary of one crawl (nothing is written to disk)."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from link_scout.crawler.models import Link


@dataclass(slots=True)
class PageResult:
    """A page that was fetched, with the broken subset of its links."""

    url: str
    depth: int
    links_found: int
    broken: List[Link] = field(default_factory=list)


@dataclass(slots=True)
class FetchFailure:
    """A claimed URL whose branch ended because the page fetch failed."""

    url: str
    depth: int
    error: str


@dataclass(slots=True)
class CrawlReport:
    """Everything one crawl observed."""

    root_url: str
    max_depth: int
    pages: List[PageResult] = field(default_factory=list)
    failures: List[FetchFailure] = field(default_factory=list)
    duration: float = 0.0

    @property
    def fetched_urls(self) -> List[str]:
        return [p.url for p in self.pages]

    @property
    def broken_links(self) -> List[Link]:
        """Broken links of all pages, flattened; the same URL may appear once per page."""
        return [link for page in self.pages for link in page.broken]

    def json(self, *, pretty: bool = False) -> str:
        """JSON view of the report for the CLI."""
        output = asdict(self)
        output["broken_links"] = len(self.broken_links)
        return json.dumps(output, ensure_ascii=False, indent=2 if pretty else None)


__all__ = ["PageResult", "FetchFailure", "CrawlReport"]
