"""Helper functions for the generate_feed CLI."""

from __future__ import annotations

import argparse
import json
import logging
from typing import IO

from generate_feed.constants import SUPPORTED_MDBOOK_VERSION, TOOL_NAME
from generate_feed.errors import HostInputError
from generate_feed.models import Book, PreprocessorContext

logger = logging.getLogger(__name__)


def parse_generate_feed_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for generate_feed.'''

    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description="mdBook preprocessor that writes an RSS feed of the book's chapters.",
    )
    subparsers = parser.add_subparsers(dest="command")
    supports = subparsers.add_parser(
        "supports",
        help="Check whether a renderer is supported by this preprocessor.",
    )
    supports.add_argument("renderer")
    return parser.parse_args(argv)


def read_preprocessor_input(stream: IO[str]) -> tuple[PreprocessorContext, Book]:
    '''Read the [context, book] pair the host writes to stdin.'''

    try:
        payload = json.load(stream)
    except json.JSONDecodeError as e:
        raise HostInputError(f"preprocessor input is not valid JSON: {e}") from e

    if not isinstance(payload, list) or len(payload) != 2:
        raise HostInputError("preprocessor input must be a [context, book] pair")

    raw_ctx, raw_book = payload
    if not isinstance(raw_ctx, dict) or not isinstance(raw_book, dict):
        raise HostInputError("preprocessor context and book must be JSON objects")

    try:
        book = Book.from_dict(raw_book)
    except ValueError as e:
        raise HostInputError(str(e)) from e
    return PreprocessorContext.from_dict(raw_ctx), book


def write_book(book: Book, stream: IO[str]) -> None:
    json.dump(book.to_dict(), stream, ensure_ascii=False)


def check_mdbook_version(version: str) -> bool:
    '''Warn when the host's mdBook release line differs from ours.'''

    host_line = ".".join(version.split(".")[:2])
    if host_line != SUPPORTED_MDBOOK_VERSION:
        logger.warning(
            "%s was written against mdBook %s but is being called from mdBook %s",
            TOOL_NAME,
            SUPPORTED_MDBOOK_VERSION,
            version or "unknown",
        )
        return False
    return True
