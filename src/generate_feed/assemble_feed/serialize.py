"""RSS 2.0 serialization of the feed document."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from lxml import etree

from generate_feed.errors import FeedWriteError
from generate_feed.models import FeedDocument, FeedItem

logger = logging.getLogger(__name__)

CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"

# Code points XML 1.0 does not allow in text
_XML_INVALID = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def feed_to_xml(feed: FeedDocument) -> bytes:
    """Serialize the feed as an RSS 2.0 document.

    Item dates are written exactly as extracted from the chapter.
    """
    rss = etree.Element("rss", version="2.0", nsmap={"content": CONTENT_NS})
    channel = etree.SubElement(rss, "channel")
    _text(channel, "title", feed.title)
    _text(channel, "link", feed.link)
    _text(channel, "description", feed.description)
    _text(channel, "generator", feed.generator)

    for item in feed.items:
        channel.append(_item_element(item))

    return etree.tostring(rss, xml_declaration=True, encoding="utf-8", pretty_print=True)


def _item_element(item: FeedItem) -> etree._Element:
    element = etree.Element("item")
    _text(element, "title", item.title)
    _text(element, "link", item.link)
    if item.description is not None:
        _text(element, "description", item.description)
    if item.author:
        _text(element, "author", item.author)
    guid = _text(element, "guid", item.link)
    guid.set("isPermaLink", "true")
    _text(element, "pubDate", item.pub_date)
    _text(element, f"{{{CONTENT_NS}}}encoded", item.content)
    return element


def _text(parent: etree._Element, tag: str, value: str) -> etree._Element:
    element = etree.SubElement(parent, tag)
    element.text = _XML_INVALID.sub("", value)
    return element


def write_feed(feed: FeedDocument, path: Path) -> Path:
    """Write the feed to path, replacing any previous feed.

    Raises:
        FeedWriteError: the file could not be written.
    """
    data = feed_to_xml(feed)
    logger.info("Writing feed with %d items to %s", len(feed.items), path)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise FeedWriteError(f"could not write feed to {path}: {e}") from e
    return path
