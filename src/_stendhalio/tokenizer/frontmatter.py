from _stendhalio.tokenizer.common import strip_prefix
from _stendhalio.tokenizer.errors import IncompleteOrMissingFrontmatter
from _stendhalio.tokenizer.token import Metadata

TITLE_PREFIX = "title: "
AUTHOR_PREFIX = "author: "
PAGES_MARKER = "pages:"

FRONTMATTER_LENGTH = 3


def take_line(lines, description):
    try:
        return next(lines)
    except StopIteration:
        raise IncompleteOrMissingFrontmatter(
            f"frontmatter ended before the {description} line"
        ) from None


def take_prefixed_line(lines, prefix, description):
    line = take_line(lines, description)
    value = strip_prefix(line, prefix)
    if value is None:
        raise IncompleteOrMissingFrontmatter(
            f"expected {description} line starting with {prefix!r}, found {line!r}"
        )
    return value


def parse_frontmatter(lines):
    """
    Parse the frontmatter of a book, that is the first three lines:

    title: <title>
    author: <author>
    pages:

    :param lines: Iterator of lines without line terminators. Exactly
        three lines are consumed from it on success.
    :returns: Tuple of Metadata.title and Metadata.author.
    :raises IncompleteOrMissingFrontmatter: If lines ends before the
        frontmatter does or any of the lines are malformed.
    """
    title = take_prefixed_line(lines, TITLE_PREFIX, "title")
    author = take_prefixed_line(lines, AUTHOR_PREFIX, "author")
    pages = take_line(lines, "pages")
    if pages != PAGES_MARKER:
        raise IncompleteOrMissingFrontmatter(
            f"expected pages line {PAGES_MARKER!r}, found {pages!r}"
        )
    return (Metadata.title(title), Metadata.author(author))
