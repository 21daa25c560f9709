"""Tests for generate_feed.helpers module."""

import io
import json
import logging

import pytest

from generate_feed.errors import HostInputError
from generate_feed.helpers import (
    check_mdbook_version,
    parse_generate_feed_args,
    read_preprocessor_input,
    write_book,
)
from generate_feed.models import Book, Chapter

CONTEXT = {"root": "/book", "config": {}, "renderer": "html", "mdbook_version": "0.4.40"}
BOOK = {"sections": [{"Chapter": {"name": "Intro", "content": "Hi", "path": "intro.md"}}]}


class TestParseGenerateFeedArgs:
    def test_no_subcommand(self) -> None:
        assert parse_generate_feed_args([]).command is None

    def test_supports(self) -> None:
        args = parse_generate_feed_args(["supports", "html"])
        assert args.command == "supports"
        assert args.renderer == "html"

    def test_supports_requires_renderer(self) -> None:
        with pytest.raises(SystemExit):
            parse_generate_feed_args(["supports"])


class TestReadPreprocessorInput:
    def test_reads_context_and_book(self) -> None:
        ctx, book = read_preprocessor_input(io.StringIO(json.dumps([CONTEXT, BOOK])))
        assert ctx.renderer == "html"
        assert ctx.mdbook_version == "0.4.40"
        assert isinstance(book.sections[0], Chapter)

    def test_invalid_json(self) -> None:
        with pytest.raises(HostInputError):
            read_preprocessor_input(io.StringIO("{not json"))

    def test_wrong_shape(self) -> None:
        with pytest.raises(HostInputError):
            read_preprocessor_input(io.StringIO(json.dumps({"book": BOOK})))

    def test_non_object_members(self) -> None:
        with pytest.raises(HostInputError):
            read_preprocessor_input(io.StringIO(json.dumps([CONTEXT, []])))

    def test_unknown_book_item(self) -> None:
        bad_book = {"sections": [{"Mystery": {}}]}
        with pytest.raises(HostInputError):
            read_preprocessor_input(io.StringIO(json.dumps([CONTEXT, bad_book])))


class TestWriteBook:
    def test_writes_json(self) -> None:
        out = io.StringIO()
        write_book(Book(sections=[Chapter(name="Intro", content="Hi")]), out)
        data = json.loads(out.getvalue())
        assert data["sections"][0]["Chapter"]["name"] == "Intro"

    def test_keeps_non_ascii(self) -> None:
        out = io.StringIO()
        write_book(Book(sections=[Chapter(name="Café", content="")]), out)
        assert "Café" in out.getvalue()


class TestCheckMdbookVersion:
    def test_same_release_line(self) -> None:
        assert check_mdbook_version("0.4.37")

    def test_different_release_line_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING)
        assert not check_mdbook_version("0.5.0")
        assert "0.5.0" in caplog.text

    def test_unknown_version_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING)
        assert not check_mdbook_version("")
        assert "unknown" in caplog.text
