from dataclasses import dataclass
from typing import Any

from _stendhalio.tokenizer.token_kind import MetadataKind, TokenKind


@dataclass(frozen=True)
class Token:
    """
    A lexical token of a book, either a run of text, a format
    marker or some kind of white space.

    The value of a token is the text for kind=TokenKind.TEXT, the
    Format for kind=TokenKind.FORMAT and None for all other kinds.
    Use the constructors Token.text and Token.format, and the
    constants SPACE, LINE_BREAK, PARAGRAPH_BREAK and THEMATIC_BREAK
    rather than creating tokens directly.
    """

    kind: TokenKind
    value: Any = None

    def __post_init__(self):
        if self.kind == TokenKind.TEXT:
            if not isinstance(self.value, str) or not self.value:
                raise ValueError(
                    f"Text tokens require a non-empty string, got {self.value!r}"
                )
        elif self.kind != TokenKind.FORMAT and self.value is not None:
            raise ValueError(f"{self.kind} tokens do not carry a value")

    @classmethod
    def text(cls, text):
        return cls(TokenKind.TEXT, text)

    @classmethod
    def format(cls, format_tag):
        return cls(TokenKind.FORMAT, format_tag)

    @property
    def is_text(self):
        return self.kind == TokenKind.TEXT

    @property
    def is_break(self):
        """
        Whether the token is a line, paragraph or page break.
        """
        return self.kind in TokenKind.breaks()

    @property
    def is_white_space(self):
        """
        Whether the token is a space or any kind of break.
        """
        return self.kind in TokenKind.white_space()

    def __repr__(self):
        if self.value is None:
            return f"Token({self.kind.name})"
        return f"Token({self.kind.name}, {self.value!r})"


SPACE = Token(TokenKind.SPACE)
LINE_BREAK = Token(TokenKind.LINE_BREAK)
PARAGRAPH_BREAK = Token(TokenKind.PARAGRAPH_BREAK)
THEMATIC_BREAK = Token(TokenKind.THEMATIC_BREAK)


@dataclass(frozen=True)
class Metadata:
    """
    Metadata about a book, found in its frontmatter.
    """

    kind: MetadataKind
    value: str

    @classmethod
    def title(cls, title):
        return cls(MetadataKind.TITLE, title)

    @classmethod
    def author(cls, author):
        return cls(MetadataKind.AUTHOR, author)
