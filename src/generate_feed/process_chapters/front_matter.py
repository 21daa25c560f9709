"""Front matter split and parse.

Front matter is a YAML block fenced by ``---`` lines at the very start of a
chapter. Every scalar is read as a string so dates reach the feed exactly as
written.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import yaml
from frontmatter.default_handlers import YAMLHandler

from generate_feed.models import FrontMatter

logger = logging.getLogger(__name__)

_HANDLER = YAMLHandler()


class FrontMatterParseError(ValueError):
    pass


def split_front_matter(text: str) -> tuple[Optional[str], str]:
    """Split a chapter body into (front matter block, remainder).

    The block is None when the body does not open with a fenced block; the
    remainder is then the body unchanged. An opening fence without a closing
    one is treated as ordinary body text.
    """
    if not _HANDLER.detect(text):
        return None, text
    try:
        block, remainder = _HANDLER.split(text)
    except ValueError:
        logger.debug("Opening front matter fence without a closing fence, treating as body")
        return None, text
    return block, remainder.lstrip("\r\n")


def parse_front_matter(block: str) -> FrontMatter:
    """Parse a front matter block into FrontMatter.

    Raises:
        FrontMatterParseError: the block is not valid YAML, not a mapping, has no
            ``date`` or has a field of the wrong type.
    """
    try:
        data = _HANDLER.load(block, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise FrontMatterParseError(f"front matter is not valid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterParseError(f"front matter must be a mapping, got {type(data).__name__}")

    date = data.get("date")
    if date is None:
        raise FrontMatterParseError("front matter has no 'date' field")
    return FrontMatter(
        date=_string_field(data, "date"),
        description=_string_field(data, "description") if "description" in data else None,
    )


def _string_field(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise FrontMatterParseError(f"front matter field '{key}' must be a string")
    return value
