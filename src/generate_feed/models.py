"""Data models for the generate_feed pipeline stage."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional, Union


@dataclass
class Chapter:
    """A book chapter as handed over by the host.

    ``path`` is the source-relative path of the chapter file, or ``None`` for
    draft chapters that only exist in SUMMARY.md. Host fields this stage does
    not use are kept in ``extra`` so the chapter round-trips unchanged.
    """
    name: str
    content: str
    number: Optional[list[int]] = None
    sub_items: list[BookItem] = field(default_factory=list)
    path: Optional[str] = None
    source_path: Optional[str] = None
    parent_names: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.number:
            return f"{'.'.join(str(n) for n in self.number)}. {self.name}"
        return self.name

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Chapter:
        known = {"name", "content", "number", "sub_items", "path", "source_path", "parent_names"}
        return cls(
            name=data.get("name", ""),
            content=data.get("content", ""),
            number=data.get("number"),
            sub_items=[book_item_from_dict(item) for item in data.get("sub_items") or []],
            path=data.get("path"),
            source_path=data.get("source_path"),
            parent_names=list(data.get("parent_names") or []),
            extra={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        data = {
            "name": self.name,
            "content": self.content,
            "number": self.number,
            "sub_items": [book_item_to_dict(item) for item in self.sub_items],
            "path": self.path,
            "source_path": self.source_path,
            "parent_names": self.parent_names,
        }
        data.update(self.extra)
        return data


@dataclass
class Separator:
    """Horizontal rule between book sections."""


@dataclass
class PartTitle:
    """Heading that groups the chapters following it."""
    title: str


BookItem = Union[Chapter, Separator, PartTitle]


def book_item_from_dict(data: Any) -> BookItem:
    if data == "Separator":
        return Separator()
    if isinstance(data, dict):
        if "Chapter" in data:
            return Chapter.from_dict(data["Chapter"])
        if "PartTitle" in data:
            return PartTitle(title=data["PartTitle"])
    raise ValueError(f"Unknown book item: {data!r}")


def book_item_to_dict(item: BookItem) -> Any:
    if isinstance(item, Chapter):
        return {"Chapter": item.to_dict()}
    if isinstance(item, PartTitle):
        return {"PartTitle": item.title}
    return "Separator"


@dataclass
class Book:
    """Ordered forest of book items."""
    sections: list[BookItem] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def iter_items(self) -> Iterator[BookItem]:
        """Yield every item depth-first, each chapter before its sub-items."""
        stack = list(reversed(self.sections))
        while stack:
            item = stack.pop()
            yield item
            if isinstance(item, Chapter):
                stack.extend(reversed(item.sub_items))

    def chapters(self) -> Iterator[Chapter]:
        for item in self.iter_items():
            if isinstance(item, Chapter):
                yield item

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Book:
        return cls(
            sections=[book_item_from_dict(item) for item in data.get("sections") or []],
            extra={k: v for k, v in data.items() if k != "sections"},
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"sections": [book_item_to_dict(item) for item in self.sections]}
        data.update(self.extra)
        return data


@dataclass
class PreprocessorContext:
    """Run context the host sends alongside the book."""
    root: str
    config: dict[str, Any]
    renderer: str
    mdbook_version: str
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PreprocessorContext:
        known = {"root", "config", "renderer", "mdbook_version"}
        return cls(
            root=data.get("root", "."),
            config=data.get("config") or {},
            renderer=data.get("renderer", ""),
            mdbook_version=data.get("mdbook_version", ""),
            extra={k: v for k, v in data.items() if k not in known},
        )


@dataclass(frozen=True)
class GlobMatcher:
    """Compiled file-selection pattern that remembers its source glob."""
    glob: str
    regex: re.Pattern

    def is_match(self, path: str) -> bool:
        return self.regex.fullmatch(path) is not None


@dataclass(frozen=True)
class ResolvedConfig:
    """Feed settings resolved once per run."""
    title: str
    description: str
    author: str
    files_glob: GlobMatcher
    date_pattern: re.Pattern
    url_base: str


@dataclass(frozen=True)
class FrontMatter:
    """Metadata block at the top of a chapter."""
    date: str
    description: Optional[str] = None


class DateSource(Enum):
    FRONT_MATTER = "front_matter"
    FILENAME = "filename"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class PublishDate:
    """Publish date together with where it came from."""
    value: Optional[str]
    source: DateSource

    @property
    def resolved(self) -> bool:
        return self.source is not DateSource.UNRESOLVED


@dataclass(frozen=True)
class FeedItem:
    """One feed entry built from a chapter."""
    title: str
    description: Optional[str]
    author: str
    pub_date: str
    link: str
    content: str


@dataclass
class FeedDocument:
    """Assembled feed, items in book traversal order."""
    title: str
    description: str
    link: str
    generator: str
    items: list[FeedItem] = field(default_factory=list)
