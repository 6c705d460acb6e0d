# link_scout/errors.py
"""
Error kinds raised inside a crawl.

Every one of them is handled by the unit of work where it occurs; none of
them crosses a task boundary.
"""
from __future__ import annotations

from typing import Optional


class LinkScoutError(Exception):
    """Base class for crawl-time failures."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        self.message = message
        self.url = url
        super().__init__(message)


class InvalidURL(LinkScoutError, ValueError):
    """A base URL or a link reference could not be parsed."""


class TransportError(LinkScoutError):
    """The request could not be sent or no response was received."""


class HTTPStatusError(LinkScoutError):
    """A page fetch answered with something other than 200."""

    def __init__(self, status: int, url: Optional[str] = None, reason: Optional[str] = None) -> None:
        self.status = status
        self.reason = reason
        text = f"HTTP status {status}" + (f" {reason}" if reason else "")
        super().__init__(text, url)


class ParseError(LinkScoutError):
    """The document parser rejected the response body."""


__all__ = ["LinkScoutError", "InvalidURL", "TransportError", "HTTPStatusError", "ParseError"]
