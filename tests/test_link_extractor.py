# File: tests/test_link_extractor.py
from link_scout.crawler.link_extractor import extract_links
from link_scout.crawler.models import Link
from link_scout.parser.html_parser import parse_html

HTML = """
<html>
  <head><link href="/style.css"></head>
  <body>
    <a href="/first">1</a>
    <div>
      <a name="anchor-only">no href</a>
      <p><a href=" /nested ">2</a></p>
    </div>
    <a href="/dup-a" href="/dup-b">3</a>
    <a href="">empty</a>
    <A HREF="http://other.com/upper">4</A>
  </body>
</html>
"""


def test_links_in_document_order():
    links = extract_links(parse_html(HTML))
    assert [link.url for link in links] == [
        "/first",
        "/nested",
        "/dup-a",
        "",
        "http://other.com/upper",
    ]


def test_links_have_no_status():
    links = extract_links(parse_html(HTML))
    assert all(link.status is None for link in links)


def test_anchor_without_href_is_skipped():
    assert extract_links(parse_html('<a name="x">x</a><a id="y"></a>')) == []


def test_first_href_wins():
    assert extract_links(parse_html('<a href="/a" href="/b">x</a>')) == [Link("/a")]


def test_extraction_is_idempotent():
    doc = parse_html(HTML)
    before = str(doc)
    first = extract_links(doc)
    second = extract_links(doc)
    assert first == second
    assert str(doc) == before


def test_parse_bytes_body():
    doc = parse_html(b'<p><a href="/bytes">x</a></p>')
    assert extract_links(doc) == [Link("/bytes")]
