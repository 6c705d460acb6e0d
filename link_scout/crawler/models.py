# link_scout/crawler/models.py
"""
Data models for the LinkScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

#: status recorded for a link whose health check got no HTTP response
FETCH_FAILED: int = 0


@dataclass(slots=True)
class Link:
    """A hyperlink as written on a page; ``status`` is set only by the health check."""

    url: str
    status: Optional[int] = None


@dataclass(slots=True)
class Page:
    """A fetched page and the links found on it, in document order."""

    url: str
    links: List[Link] = field(default_factory=list)
