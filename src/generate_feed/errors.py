"""Exceptions raised while generating the feed.

Two tiers:

- ``GenerateFeedError`` subclasses are fatal and abort the run.
- ``ChapterSkipped`` subclasses reject a single chapter; the pipeline logs them
  and carries on with the rest of the book.
"""

from __future__ import annotations


class GenerateFeedError(Exception):
    """Base class for errors that abort feed generation."""


class HostInputError(GenerateFeedError):
    """The host handed over input that is not a preprocessor payload."""


class ConfigError(GenerateFeedError):
    """A configuration field is missing or unusable."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class MissingBookMetadata(ConfigError):
    def __init__(self, field: str) -> None:
        super().__init__(f"book.{field}", "required for the feed but not set")


class MissingPreprocessorConfig(ConfigError):
    def __init__(self, name: str) -> None:
        super().__init__(f"preprocessor.{name}", "section not found in book configuration")


class InvalidConfigField(ConfigError):
    pass


class AssemblyError(GenerateFeedError):
    """Feed assembly hit an internal invariant violation."""


class FeedWriteError(GenerateFeedError):
    """The feed file could not be written."""


class ChapterSkipped(Exception):
    """A book item was left out of the feed."""

    def __init__(self, chapter: str, reason: str) -> None:
        super().__init__(f"{chapter}: {reason}")
        self.chapter = chapter
        self.reason = reason


class NotAChapter(ChapterSkipped):
    pass


class DraftChapter(ChapterSkipped):
    pass


class GlobMismatch(ChapterSkipped):
    pass


class InvalidFrontMatter(ChapterSkipped):
    pass


class MissingPublishDate(ChapterSkipped):
    pass


class LinkError(ChapterSkipped):
    pass


class RenderError(ChapterSkipped):
    pass
