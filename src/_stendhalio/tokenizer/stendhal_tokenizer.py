import logging
import warnings

from _stendhalio.token_list import TokenList
from _stendhalio.tokenizer.abstract_tokenizer import AbstractTokenizer
from _stendhalio.tokenizer.format_code import lookup_format
from _stendhalio.tokenizer.frontmatter import parse_frontmatter
from _stendhalio.tokenizer.line import parse_line, strip_page_marker

logger = logging.getLogger(__name__)


class StendhalTokenizer(AbstractTokenizer):
    """
    Tokenizer for books exported in the stendhal format:

    title: <title>
    author: <author>
    pages:
    #- <first line of page one>
    <second line of page one>
    #- <first line of page two>

    The first three lines make up the frontmatter. Every following line
    becomes the tokens of its text followed by a line break, lines starting
    with "#- " (or "##- " etc.) additionally start a new page, see
    _stendhalio.tokenizer.line.tokenize_line.

    >>> tokenizer = StendhalTokenizer()
    >>> token_list = tokenizer.tokenize_string("title: t\\nauthor: a\\npages:\\n#- hi")
    >>> token_list.tokens
    (Token(THEMATIC_BREAK), Token(TEXT, 'hi'), Token(LINE_BREAK))

    """

    def __init__(self, lookup=lookup_format, encoding="utf-8"):
        """
        :param lookup: The format code table, a function taking the
            character following '§' and returning a Format, or None if
            there is no such format. Defaults to the Minecraft format codes.
        :param encoding: The encoding used to decode binary streams
            given to tokenize_reader.
        """
        self.lookup = lookup
        self.encoding = encoding

    def tokenize_lines(self, lines):
        metadata = parse_frontmatter(lines)
        logger.debug("Parsed frontmatter %s", metadata)

        tokens = []
        has_page = False
        has_warned = False
        for line_number, line in enumerate(lines, start=4):
            if strip_page_marker(line) is not None:
                has_page = True
            elif line and not has_page and not has_warned:
                has_warned = True
                warnings.warn(
                    f"Line {line_number} has content before the first page "
                    "marker '#- ', it is tokenized as part of an unmarked page."
                )
            parse_line(tokens, line, self.lookup)

        logger.debug("Tokenized book body into %d tokens", len(tokens))
        return TokenList(metadata, tokens)
