"""Generate the book's RSS feed from its chapters."""

import logging
from pathlib import Path

from common.utils import get_path
from generate_feed.assemble_feed.assemble_feed import assemble_feed
from generate_feed.assemble_feed.serialize import write_feed
from generate_feed.constants import (
    DEFAULT_BOOK_SRC,
    PREPROCESSOR_NAME,
    RSS_FILE_NAME,
    SUPPORTED_RENDERERS,
)
from generate_feed.models import Book, PreprocessorContext
from generate_feed.process_chapters.process_chapters import process_book
from generate_feed.resolve_config.resolve_config import resolve_config

logger = logging.getLogger(__name__)


def supports_renderer(renderer: str) -> bool:
    return renderer in SUPPORTED_RENDERERS


def feed_path(ctx: PreprocessorContext) -> Path:
    """Location of the feed file: rss.xml in the book's source directory."""
    src = get_path(ctx.config, "book", "src") or DEFAULT_BOOK_SRC
    return Path(ctx.root) / src / RSS_FILE_NAME


def generate_feed(
    ctx: PreprocessorContext,
    book: Book,
    preprocessor_name: str = PREPROCESSOR_NAME,
) -> Book:
    """Write the feed for this book and return the book for the next stage.

    Chapters whose front matter was read come back without it. For renderers
    other than HTML the book is returned untouched and no feed is written.
    """
    if not supports_renderer(ctx.renderer):
        logger.info("Renderer %s is not supported, leaving book unchanged", ctx.renderer)
        return book

    config = resolve_config(ctx.config, preprocessor_name)

    items = process_book(book, config)
    if not items:
        logger.warning("No chapters qualified for the feed, writing an empty feed")

    feed = assemble_feed(config, items)
    write_feed(feed, feed_path(ctx))
    return book
