from contextlib import contextmanager
from enum import Enum, auto, unique


class StendhalError(Exception):
    """
    Base class for the fine-grained errors raised while reading a
    stendhal book. The tokenizer entry points report these as a
    TokenizeError, see TokenizeError.from_error.
    """

    pass


class InvalidFormatCodeString(StendhalError):
    """
    Raised when a format code string is not a two character
    string starting with '§', ie. "§ o" instead of "§o".
    """

    def __init__(self, code_string):
        self.code_string = code_string
        super().__init__(
            f"expected a two character string starting with §, received {code_string!r}"
        )


class NoSuchFormatCode(StendhalError):
    """
    Raised when '§' is followed by a character that is not
    a known format code.
    """

    def __init__(self, code):
        self.code = code
        super().__init__(f"no such format code {code!r}")


class MissingFormatCode(StendhalError):
    """
    Raised when '§' is the last character of a line.
    """

    def __init__(self):
        super().__init__("expected a format code after '§'")


class NoSuchCharLiteral(StendhalError):
    """
    Raised by renderers when there is no entity associated
    with a character.
    """

    def __init__(self, char):
        self.char = char
        super().__init__(f"no entity associated with character {char!r}")


class UnexpectedEndOfIter(StendhalError):
    """
    Raised when a source of lines ends before its consumer is finished.
    """

    def __init__(self, message="expected iterator to be longer"):
        super().__init__(message)


class IncompleteOrMissingFrontmatter(StendhalError):
    """
    Raised when the title, author and pages lines at the start
    of a book are missing, incomplete or malformed.
    """

    def __init__(self, message="frontmatter is not present or incomplete"):
        super().__init__(message)


class UnexpectedToken(StendhalError):
    """
    Raised when a valid token is found where it is not accepted.
    """

    def __init__(self, token):
        self.token = token
        super().__init__(f"did not expect token {token!r}")


class FormatLookupError(StendhalError):
    """
    Raised when the format code table fails while looking up a code,
    the error raised by the table is kept as __cause__.
    """

    def __init__(self, code):
        self.code = code
        super().__init__(f"format code table failed to look up {code!r}")


class FormattingError(StendhalError):
    """
    Raised by renderers when formatting of an item fails.
    """

    pass


@unique
class TokenizeErrorKind(Enum):
    MALFORMED_SYNTAX_ITEM = auto()
    NO_SUCH_SYNTAX_ITEM = auto()
    UNEXPECTED_SYNTAX_ITEM = auto()
    IO = auto()
    ENCODING = auto()
    FORMATTING = auto()
    OTHER = auto()

    @property
    def description(self):
        return {
            TokenizeErrorKind.MALFORMED_SYNTAX_ITEM: "malformed syntax item",
            TokenizeErrorKind.NO_SUCH_SYNTAX_ITEM: "no such syntax item",
            TokenizeErrorKind.UNEXPECTED_SYNTAX_ITEM: "did not expect syntax item here",
            TokenizeErrorKind.IO: "could not perform I/O action",
            TokenizeErrorKind.ENCODING: "invalid text encoding",
            TokenizeErrorKind.FORMATTING: "could not format item",
            TokenizeErrorKind.OTHER: "tokenization failed",
        }[self]


# Map from cause to the kind of error reported by the tokenizer,
# resolved along the mro of the cause so that subclasses (ie.
# UnicodeDecodeError, FileNotFoundError) are covered.
error_kinds = {
    InvalidFormatCodeString: TokenizeErrorKind.MALFORMED_SYNTAX_ITEM,
    NoSuchFormatCode: TokenizeErrorKind.MALFORMED_SYNTAX_ITEM,
    MissingFormatCode: TokenizeErrorKind.MALFORMED_SYNTAX_ITEM,
    UnexpectedEndOfIter: TokenizeErrorKind.MALFORMED_SYNTAX_ITEM,
    IncompleteOrMissingFrontmatter: TokenizeErrorKind.MALFORMED_SYNTAX_ITEM,
    NoSuchCharLiteral: TokenizeErrorKind.NO_SUCH_SYNTAX_ITEM,
    UnexpectedToken: TokenizeErrorKind.UNEXPECTED_SYNTAX_ITEM,
    FormattingError: TokenizeErrorKind.FORMATTING,
    FormatLookupError: TokenizeErrorKind.OTHER,
    OSError: TokenizeErrorKind.IO,
    UnicodeError: TokenizeErrorKind.ENCODING,
}


def error_kind(error):
    """
    :returns: The TokenizeErrorKind the given exception is reported as.
    """
    for cls in type(error).__mro__:
        if cls in error_kinds:
            return error_kinds[cls]
    return TokenizeErrorKind.OTHER


class TokenizeError(Exception):
    """
    The error raised by the tokenizer entry points. The kind
    categorizes the failure, and the underlying exception is
    kept as cause (and as __cause__ when raised with
    TokenizeError.from_error).
    """

    def __init__(self, kind, cause=None):
        self.kind = kind
        self.cause = cause
        message = kind.description
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)

    @classmethod
    def from_error(cls, error):
        """
        Categorize any exception as a TokenizeError.

        >>> TokenizeError.from_error(NoSuchFormatCode("z")).kind
        <TokenizeErrorKind.MALFORMED_SYNTAX_ITEM: 1>

        """
        if isinstance(error, TokenizeError):
            return error
        return cls(error_kind(error), error)


@contextmanager
def reported_as_tokenize_error():
    """
    Context manager that re-raises errors from reading and tokenizing
    a book as TokenizeError.
    """
    try:
        yield
    except (StendhalError, OSError, UnicodeError) as err:
        raise TokenizeError.from_error(err) from err
