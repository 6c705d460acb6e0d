"""HTML parsing front-end used by the page fetcher."""
from link_scout.parser.html_parser import parse_html

__all__ = ["parse_html"]
