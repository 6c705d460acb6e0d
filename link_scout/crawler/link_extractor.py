# link_scout/crawler/link_extractor.py
"""
Link extraction over a parsed HTML document.
"""
from __future__ import annotations

from typing import List

from bs4.element import Tag
from link_scout.crawler.models import Link


def extract_links(document: Tag) -> List[Link]:
    """
    Collect the href of every anchor element in document order.

    Anchors without an href contribute nothing. The tree is not modified.
    """
    links: List[Link] = []
    for tag in document.find_all("a"):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        links.append(Link(url=href_val.strip()))
    return links


__all__ = ["extract_links"]
