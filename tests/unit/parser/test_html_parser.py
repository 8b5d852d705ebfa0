"""Tests for reelfeed.parser.html - parser and sanitizer."""

from __future__ import annotations

from reelfeed.parser.html import SoupDocumentParser
from reelfeed.protocols.parser import DocumentParser


class TestSoupDocumentParser:
    """Tests for parsing and sanitizing."""

    def test_implements_protocol(self):
        assert isinstance(SoupDocumentParser(), DocumentParser)

    def test_empty_markup_is_none(self):
        parser = SoupDocumentParser()

        assert parser.parse("") is None
        assert parser.parse("  \n ") is None

    def test_unsafe_elements_removed(self):
        soup = SoupDocumentParser().parse(
            "<head><base href='https://evil/'><script src='x.js'></script></head>"
            "<body><section><object data='x'></object><embed src='y'><p>ok</p></section></body>"
        )

        assert soup.find_all(["base", "script", "object", "embed"]) == []
        assert soup.section.p.string == "ok"

    def test_event_handlers_removed(self):
        soup = SoupDocumentParser().parse('<section onload="a()" ONCLICK="b()" class="c">x</section>')

        assert soup.section.attrs == {"class": ["c"]}

    def test_javascript_urls_removed(self):
        soup = SoupDocumentParser().parse(
            '<a href=" JavaScript:alert(1)">a</a><form action="javascript:x"></form><a href="ok.html">b</a>'
        )

        links = soup.find_all("a")
        assert "href" not in links[0].attrs
        assert "action" not in soup.form.attrs
        assert links[1]["href"] == "ok.html"

    def test_sanitize_disabled(self):
        soup = SoupDocumentParser(sanitize=False).parse("<script>1</script>")

        assert soup.script is not None

    def test_scan_empty_markup(self):
        visited = []

        SoupDocumentParser().scan("", visited.append)

        assert visited == []
