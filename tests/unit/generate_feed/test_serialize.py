"""Tests for generate_feed.assemble_feed.serialize module."""

from pathlib import Path

import feedparser
import pytest
from lxml import etree

from generate_feed.assemble_feed.serialize import CONTENT_NS, feed_to_xml, write_feed
from generate_feed.errors import FeedWriteError
from generate_feed.models import FeedDocument, FeedItem


def make_feed(*items: FeedItem) -> FeedDocument:
    return FeedDocument(
        title="Field Notes",
        description="Notes from the field",
        link="https://example.com/book/",
        generator="book-rss 0.1.0",
        items=list(items),
    )


def make_item(**overrides) -> FeedItem:
    fields = {
        "title": "Intro",
        "description": "Where it starts",
        "author": "Ann Lee",
        "pub_date": "2023-05-01",
        "link": "https://example.com/book/intro.html",
        "content": "<p>Hello</p>",
    }
    fields.update(overrides)
    return FeedItem(**fields)


class TestFeedToXml:
    def test_parses_as_rss(self) -> None:
        parsed = feedparser.parse(feed_to_xml(make_feed(make_item())))
        assert not parsed.bozo
        assert parsed.version == "rss20"
        assert parsed.feed.title == "Field Notes"
        assert parsed.feed.generator == "book-rss 0.1.0"
        entry = parsed.entries[0]
        assert entry.title == "Intro"
        assert entry.link == "https://example.com/book/intro.html"
        assert entry.content[0].value == "<p>Hello</p>"

    def test_items_in_document_order(self) -> None:
        feed = make_feed(
            make_item(title="B", link="https://example.com/book/b.html"),
            make_item(title="A", link="https://example.com/book/a.html"),
        )
        parsed = feedparser.parse(feed_to_xml(feed))
        assert [e.title for e in parsed.entries] == ["B", "A"]

    def test_pub_date_written_verbatim(self) -> None:
        root = etree.fromstring(feed_to_xml(make_feed(make_item(pub_date="2023-05-01"))))
        assert root.findtext("channel/item/pubDate") == "2023-05-01"

    def test_content_encoded(self) -> None:
        root = etree.fromstring(feed_to_xml(make_feed(make_item())))
        assert root.findtext(f"channel/item/{{{CONTENT_NS}}}encoded") == "<p>Hello</p>"

    def test_missing_description_omitted(self) -> None:
        root = etree.fromstring(feed_to_xml(make_feed(make_item(description=None))))
        assert root.find("channel/item/description") is None

    def test_empty_author_omitted(self) -> None:
        root = etree.fromstring(feed_to_xml(make_feed(make_item(author=""))))
        assert root.find("channel/item/author") is None

    def test_guid_is_permalink(self) -> None:
        root = etree.fromstring(feed_to_xml(make_feed(make_item())))
        guid = root.find("channel/item/guid")
        assert guid.text == "https://example.com/book/intro.html"
        assert guid.get("isPermaLink") == "true"

    def test_xml_invalid_characters_dropped(self) -> None:
        xml = feed_to_xml(make_feed(make_item(content="<p>page\x0cbreak</p>")))
        root = etree.fromstring(xml)
        assert root.findtext(f"channel/item/{{{CONTENT_NS}}}encoded") == "<p>pagebreak</p>"

    def test_empty_feed(self) -> None:
        parsed = feedparser.parse(feed_to_xml(make_feed()))
        assert not parsed.bozo
        assert parsed.entries == []

    def test_xml_declaration(self) -> None:
        assert feed_to_xml(make_feed()).startswith(b"<?xml version='1.0'")


class TestWriteFeed:
    def test_writes_file(self, tmp_path: Path) -> None:
        path = tmp_path / "rss.xml"
        assert write_feed(make_feed(make_item()), path) == path
        assert feedparser.parse(path.read_bytes()).entries[0].title == "Intro"

    def test_overwrites_previous_feed(self, tmp_path: Path) -> None:
        path = tmp_path / "rss.xml"
        path.write_text("stale")
        write_feed(make_feed(), path)
        assert path.read_bytes().startswith(b"<?xml")

    def test_unwritable_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FeedWriteError):
            write_feed(make_feed(), tmp_path / "missing" / "rss.xml")
