"""CLI for generating a book's RSS feed as an mdBook preprocessor."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from generate_feed.errors import GenerateFeedError
from generate_feed.generate_feed import generate_feed, supports_renderer
from generate_feed.helpers import (
    check_mdbook_version,
    parse_generate_feed_args,
    read_preprocessor_input,
    write_book,
)

load_dotenv()

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    args = parse_generate_feed_args(argv)

    # The host asks once per renderer; the exit status is the answer.
    if args.command == "supports":
        sys.exit(0 if supports_renderer(args.renderer) else 1)

    try:
        ctx, book = read_preprocessor_input(sys.stdin)
        check_mdbook_version(ctx.mdbook_version)
        book = generate_feed(ctx, book)
    except GenerateFeedError as e:
        logger.error("%s", e)
        sys.exit(1)

    write_book(book, sys.stdout)


if __name__ == "__main__":
    main()
