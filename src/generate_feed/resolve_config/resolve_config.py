"""Resolve feed configuration from book settings.

The host hands over book.toml as a loosely typed mapping. Each field is pulled
out and checked on its own; the first unusable field raises a ConfigError
subclass naming it.
"""

from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import urlsplit

from common.utils import get_path, get_value
from generate_feed.constants import DEFAULT_DATE_PATTERN
from generate_feed.errors import (
    InvalidConfigField,
    MissingBookMetadata,
    MissingPreprocessorConfig,
)
from generate_feed.models import GlobMatcher, ResolvedConfig
from generate_feed.resolve_config.glob import compile_glob

logger = logging.getLogger(__name__)


def resolve_config(book_settings: Any, preprocessor_name: str) -> ResolvedConfig:
    """Build the feed configuration for one run.

    Args:
        book_settings: The book configuration (``book``, ``preprocessor``, ...)
            as a mapping or an object with matching attributes.
        preprocessor_name: Section name under ``preprocessor``.

    Returns:
        ResolvedConfig for this run.

    Raises:
        MissingBookMetadata: book title or description is not set.
        MissingPreprocessorConfig: the preprocessor section is absent.
        InvalidConfigField: files-glob, date-pattern or url-base is missing
            or unusable.
    """
    book = get_value(book_settings, "book")
    title = _book_string(book, "title")
    description = _book_string(book, "description")
    author = _author(book)

    section = get_path(book_settings, "preprocessor", preprocessor_name)
    if section is None:
        raise MissingPreprocessorConfig(preprocessor_name)

    config = ResolvedConfig(
        title=title,
        description=description,
        author=author,
        files_glob=_files_glob(section),
        date_pattern=_date_pattern(section),
        url_base=_url_base(section),
    )
    logger.debug(
        "Resolved feed config: glob=%s date-pattern=%s url-base=%s",
        config.files_glob.glob,
        config.date_pattern.pattern,
        config.url_base,
    )
    return config


def _book_string(book: Any, key: str) -> str:
    value = get_value(book, key) if book is not None else None
    if not isinstance(value, str) or not value:
        raise MissingBookMetadata(key)
    return value


def _author(book: Any) -> str:
    authors = get_value(book, "authors") if book is not None else None
    if not authors:
        return ""
    if isinstance(authors, str):
        return authors
    return ", ".join(str(a) for a in authors)


def _files_glob(section: Any) -> GlobMatcher:
    value = get_value(section, "files-glob")
    if value is None:
        raise InvalidConfigField("files-glob", "required to select chapters but not set")
    if not isinstance(value, str):
        raise InvalidConfigField("files-glob", f"expected a string, got {type(value).__name__}")
    try:
        return compile_glob(value)
    except (ValueError, re.error) as e:
        raise InvalidConfigField("files-glob", f"invalid glob {value!r}: {e}") from e


def _date_pattern(section: Any) -> re.Pattern:
    value = get_value(section, "date-pattern")
    if value is None:
        return re.compile(DEFAULT_DATE_PATTERN)
    if not isinstance(value, str):
        raise InvalidConfigField("date-pattern", f"expected a string, got {type(value).__name__}")
    try:
        return re.compile(value)
    except re.error as e:
        raise InvalidConfigField("date-pattern", f"invalid pattern {value!r}: {e}") from e


def _url_base(section: Any) -> str:
    value = get_value(section, "url-base")
    if value is None:
        raise InvalidConfigField("url-base", "required to build chapter links but not set")
    if not isinstance(value, str):
        raise InvalidConfigField("url-base", f"expected a string, got {type(value).__name__}")
    try:
        parts = urlsplit(value)
    except ValueError as e:
        raise InvalidConfigField("url-base", f"invalid URL {value!r}: {e}") from e
    if not parts.scheme or not parts.netloc:
        raise InvalidConfigField("url-base", f"{value!r} is not an absolute URL")

    if not parts.path.endswith("/"):
        logger.warning(
            "url-base %s does not end with '/'; chapter links will replace its last path segment",
            value,
        )
    return value
