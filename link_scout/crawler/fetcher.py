# link_scout/crawler/fetcher.py
"""
Fetcher module: retrieves one page and turns it into a Page with its raw links.
"""
from __future__ import annotations

import asyncio
import logging
from contextlib import nullcontext
from typing import AsyncContextManager, Optional

from aiohttp import ClientError, ClientSession
from link_scout.crawler.link_extractor import extract_links
from link_scout.crawler.models import Page
from link_scout.errors import HTTPStatusError, TransportError
from link_scout.parser.html_parser import parse_html

HTML_MIME_TYPES = ("text/html", "application/xhtml+xml")


class PageFetcher:
    """Issues a single GET per page; no retries, no caching."""

    def __init__(
        self,
        session: ClientSession,
        limiter: Optional[AsyncContextManager] = None,
    ) -> None:
        self.session = session
        self._limiter = limiter if limiter is not None else nullcontext()
        self.logger = logging.getLogger("LinkScout")

    async def fetch(self, url: str) -> Page:
        """
        Fetch *url* and extract its links.

        Raises TransportError when no response arrives, HTTPStatusError for
        anything but 200 and ParseError when the body is rejected by the parser.
        A 200 response that is not HTML yields a Page without links.
        """
        try:
            async with self._limiter:
                async with self.session.get(url) as resp:
                    if resp.status != 200:
                        raise HTTPStatusError(resp.status, url, resp.reason)
                    mime = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
                    if mime and mime not in HTML_MIME_TYPES:
                        self.logger.debug("Skipping non-HTML content %s (%s)", url, mime)
                        return Page(url=url)
                    body = await resp.read()
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise TransportError(f"failed to fetch the URL: {exc!r}", url) from exc

        document = parse_html(body, url)
        return Page(url=url, links=extract_links(document))
