"""Chapter link construction."""

from __future__ import annotations

from pathlib import PurePosixPath
from urllib.parse import quote, urljoin

from generate_feed.constants import RENDERED_EXTENSION


def chapter_link(chapter_path: str, url_base: str) -> str:
    """Absolute URL of the rendered chapter.

    The source extension is swapped for the rendered one and the result is
    joined onto url_base with standard relative-URL rules.

    Raises:
        UnicodeEncodeError: the path holds characters with no UTF-8 encoding,
            such as surrogates left by an undecodable file name.
    """
    rendered = PurePosixPath(chapter_path).with_suffix(RENDERED_EXTENSION)
    return urljoin(url_base, quote(rendered.as_posix(), safe="/"))
