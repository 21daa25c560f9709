"""Chapter selection and feed item extraction."""

from __future__ import annotations

import logging

from generate_feed.errors import (
    ChapterSkipped,
    DraftChapter,
    GlobMismatch,
    InvalidFrontMatter,
    LinkError,
    MissingPublishDate,
    NotAChapter,
    RenderError,
)
from generate_feed.models import Book, BookItem, Chapter, FeedItem, ResolvedConfig
from generate_feed.process_chapters.front_matter import (
    FrontMatterParseError,
    parse_front_matter,
    split_front_matter,
)
from generate_feed.process_chapters.links import chapter_link
from generate_feed.process_chapters.publish_date import resolve_publish_date
from generate_feed.process_chapters.render import render_html

logger = logging.getLogger(__name__)


def process_book(book: Book, config: ResolvedConfig) -> list[FeedItem]:
    """Build feed items for every qualifying chapter, in traversal order.

    Chapter bodies that carry front matter are rewritten in place without it.
    """
    items = []
    for book_item in book.iter_items():
        item = process_item(book_item, config)
        if item is not None:
            items.append(item)

    logger.info("Collected %d feed items", len(items))
    return items


def process_item(book_item: BookItem, config: ResolvedConfig) -> FeedItem | None:
    """Feed item for one book item, or None when it is left out of the feed."""
    try:
        if not isinstance(book_item, Chapter):
            raise NotAChapter(repr(book_item), "not a chapter")
        logger.debug("Processing chapter: %s", book_item)
        return build_feed_item(book_item, config)
    except NotAChapter as e:
        logger.debug("Skipping %s", e)
    except DraftChapter as e:
        logger.info("Skipping draft chapter %s", e.chapter)
    except GlobMismatch as e:
        logger.info("Skipping chapter %s: %s", e.chapter, e.reason)
    except ChapterSkipped as e:
        logger.warning("Not including chapter %s in feed: %s", e.chapter, e.reason)
    return None


def build_feed_item(chapter: Chapter, config: ResolvedConfig) -> FeedItem:
    """Build the feed item for a chapter.

    Raises:
        ChapterSkipped: a subclass naming the rule that rejected the chapter.
    """
    name = str(chapter)
    path = chapter.path
    if path is None:
        raise DraftChapter(name, "no source file")

    if not config.files_glob.is_match(path):
        raise GlobMismatch(
            name, f"{path} does not match files glob {config.files_glob.glob}"
        )

    block, body = split_front_matter(chapter.content)
    front_matter = None
    if block is not None:
        # Later preprocessors and renderers see the chapter without its front matter.
        chapter.content = body
        try:
            front_matter = parse_front_matter(block)
        except FrontMatterParseError as e:
            raise InvalidFrontMatter(name, f"{path}: {e}") from e

    pub_date = resolve_publish_date(front_matter, path, config.date_pattern)
    if not pub_date.resolved:
        raise MissingPublishDate(
            name,
            f"no front matter date and file name of {path} does not match "
            f"date pattern {config.date_pattern.pattern}",
        )

    try:
        link = chapter_link(path, config.url_base)
    except (UnicodeEncodeError, ValueError) as e:
        raise LinkError(name, f"cannot build link for {path!r}: {e}") from e

    try:
        content = render_html(body)
    except Exception as e:
        raise RenderError(name, f"rendering {path} failed: {e}") from e

    return FeedItem(
        title=chapter.name,
        description=front_matter.description if front_matter is not None else None,
        author=config.author,
        pub_date=pub_date.value,
        link=link,
        content=content,
    )
