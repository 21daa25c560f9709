"""Publish date resolution: front matter first, then the file name."""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Optional

from generate_feed.models import DateSource, FrontMatter, PublishDate


def resolve_publish_date(
    front_matter: Optional[FrontMatter],
    chapter_path: str,
    date_pattern: re.Pattern,
) -> PublishDate:
    """Pick the publish date for a chapter.

    The front matter date wins when front matter is present. Otherwise the first
    match of date_pattern in the file name (not the directories above it) is
    used.
    """
    if front_matter is not None:
        return PublishDate(value=front_matter.date, source=DateSource.FRONT_MATTER)

    file_name = PurePosixPath(chapter_path).name
    match = date_pattern.search(file_name)
    if match is None:
        return PublishDate(value=None, source=DateSource.UNRESOLVED)
    return PublishDate(value=match.group(0), source=DateSource.FILENAME)
