"""Feed document assembly."""

from __future__ import annotations

import logging

from generate_feed.constants import TOOL_NAME, TOOL_VERSION
from generate_feed.errors import AssemblyError
from generate_feed.models import FeedDocument, FeedItem, ResolvedConfig

logger = logging.getLogger(__name__)


def generator_name() -> str:
    return f"{TOOL_NAME} {TOOL_VERSION}"


def assemble_feed(config: ResolvedConfig, items: list[FeedItem]) -> FeedDocument:
    """Build the feed document, keeping items in the order given.

    Raises:
        AssemblyError: config or items break an invariant that resolution and
            chapter processing should already guarantee.
    """
    if not config.title or not config.description:
        raise AssemblyError("feed title and description must not be empty")

    for index, item in enumerate(items):
        if not isinstance(item, FeedItem):
            raise AssemblyError(f"item {index} is {type(item).__name__}, expected FeedItem")
        if not item.link:
            raise AssemblyError(f"item {index} ({item.title}) has no link")

    logger.debug("Assembling feed with %d items", len(items))
    return FeedDocument(
        title=config.title,
        description=config.description,
        link=config.url_base,
        generator=generator_name(),
        items=list(items),
    )
