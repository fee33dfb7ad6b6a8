import pytest
from hypothesis import given

from _stendhalio.tokenizer.errors import IncompleteOrMissingFrontmatter
from _stendhalio.tokenizer.frontmatter import parse_frontmatter
from _stendhalio.tokenizer.token import Metadata

from .generators.book_contents import metadata_values


@given(metadata_values, metadata_values)
def test_parse_frontmatter(title, author):
    lines = iter([f"title: {title}", f"author: {author}", "pages:"])
    assert parse_frontmatter(lines) == (Metadata.title(title), Metadata.author(author))


def test_parse_frontmatter_keeps_white_space():
    lines = iter(["title:   spaced  out ", "author: a", "pages:"])
    title, _ = parse_frontmatter(lines)
    assert title == Metadata.title("  spaced  out ")


def test_parse_frontmatter_consumes_three_lines():
    lines = iter(["title: t", "author: a", "pages:", "#- first page"])
    parse_frontmatter(lines)
    assert list(lines) == ["#- first page"]


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["title: t"],
        ["title: t", "author: a"],
    ],
)
def test_incomplete_frontmatter(lines):
    with pytest.raises(IncompleteOrMissingFrontmatter, match="ended before"):
        parse_frontmatter(iter(lines))


@pytest.mark.parametrize(
    "lines",
    [
        ["Title: t", "author: a", "pages:"],
        ["title:t", "author: a", "pages:"],
        ["author: a", "title: t", "pages:"],
        ["title: t", "writer: a", "pages:"],
        ["title: t", "author: a", "pages: 3"],
        ["title: t", "author: a", "pages"],
        ["title: t", "author: a", ""],
        ["title: t", "author: a", "#- a page"],
    ],
)
def test_malformed_frontmatter(lines):
    with pytest.raises(IncompleteOrMissingFrontmatter, match="expected"):
        parse_frontmatter(iter(lines))
