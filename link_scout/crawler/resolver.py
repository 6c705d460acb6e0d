# link_scout/crawler/resolver.py
"""
Resolution of link references against the page they were found on.
"""
from __future__ import annotations

from urllib.parse import SplitResult, urljoin, urlsplit

from link_scout.errors import InvalidURL


def _split(url: str) -> SplitResult:
    parts = urlsplit(url)
    # the port is only validated on attribute access
    _ = parts.port
    return parts


def resolve(base: str, href: str) -> str:
    """
    Return *href* resolved against the absolute URL *base*.

    Raises InvalidURL when either string cannot be parsed or *base* has no scheme.
    """
    try:
        if not _split(base).scheme:
            raise InvalidURL(f"base URL is not absolute: {base!r}", base)
        _split(href)
        absolute = urljoin(base, href)
        _split(absolute)
    except InvalidURL:
        raise
    except ValueError as exc:
        raise InvalidURL(f"cannot resolve {href!r} against {base!r}: {exc}", href) from exc
    return absolute


__all__ = ["resolve"]
