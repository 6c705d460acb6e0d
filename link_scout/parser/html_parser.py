# === FILE: link_scout/parser/html_parser.py ===
"""HTML parsing for LinkScout.

The crawler only needs a traversable tree of typed nodes (element name,
attributes, children); BeautifulSoup with the stdlib ``html.parser`` backend
provides exactly that, so the rest of the project depends on
:class:`bs4.BeautifulSoup` and nothing else.

Two details matter for link extraction:

* repeated attributes keep their *first* value, so
  ``<a href="/a" href="/b">`` is seen as a link to ``/a``;
* markup the backend refuses is reported as :class:`~link_scout.errors.ParseError`
  instead of leaking a bs4-specific exception.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from link_scout.errors import ParseError

__all__: Sequence[str] = ("HTML_PARSER", "parse_html")

HTML_PARSER = "html.parser"


def parse_html(markup: Union[str, bytes], url: Optional[str] = None) -> BeautifulSoup:
    """Parse *markup* into a document tree.

    Parameters
    ----------
    markup
        Raw response body. Bytes are decoded by BeautifulSoup's own encoding
        detection, so a wrong ``charset`` header does not break parsing.
    url
        Only used to make the error message useful.
    """
    try:
        return BeautifulSoup(markup, HTML_PARSER, on_duplicate_attribute="ignore")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"error parsing HTML: {exc}", url) from exc
