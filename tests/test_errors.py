import pytest

from _stendhalio.tokenizer.errors import (
    FormatLookupError,
    FormattingError,
    IncompleteOrMissingFrontmatter,
    InvalidFormatCodeString,
    MissingFormatCode,
    NoSuchCharLiteral,
    NoSuchFormatCode,
    TokenizeError,
    TokenizeErrorKind,
    UnexpectedEndOfIter,
    UnexpectedToken,
    reported_as_tokenize_error,
)
from _stendhalio.tokenizer.token import SPACE


@pytest.mark.parametrize(
    "error, expected_kind",
    [
        (InvalidFormatCodeString("§ o"), TokenizeErrorKind.MALFORMED_SYNTAX_ITEM),
        (NoSuchFormatCode("z"), TokenizeErrorKind.MALFORMED_SYNTAX_ITEM),
        (MissingFormatCode(), TokenizeErrorKind.MALFORMED_SYNTAX_ITEM),
        (UnexpectedEndOfIter(), TokenizeErrorKind.MALFORMED_SYNTAX_ITEM),
        (IncompleteOrMissingFrontmatter(), TokenizeErrorKind.MALFORMED_SYNTAX_ITEM),
        (NoSuchCharLiteral("<"), TokenizeErrorKind.NO_SUCH_SYNTAX_ITEM),
        (UnexpectedToken(SPACE), TokenizeErrorKind.UNEXPECTED_SYNTAX_ITEM),
        (FormattingError("could not write"), TokenizeErrorKind.FORMATTING),
        (FormatLookupError("o"), TokenizeErrorKind.OTHER),
        (OSError("disk on fire"), TokenizeErrorKind.IO),
        (FileNotFoundError("book.txt"), TokenizeErrorKind.IO),
        (
            UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"),
            TokenizeErrorKind.ENCODING,
        ),
        (RuntimeError("?"), TokenizeErrorKind.OTHER),
    ],
)
def test_error_kinds(error, expected_kind):
    tokenize_error = TokenizeError.from_error(error)
    assert tokenize_error.kind == expected_kind
    assert tokenize_error.cause is error


def test_from_tokenize_error_is_identity():
    error = TokenizeError(TokenizeErrorKind.OTHER)
    assert TokenizeError.from_error(error) is error


def test_message_contains_cause():
    error = TokenizeError.from_error(NoSuchFormatCode("z"))
    assert str(error) == "malformed syntax item: no such format code 'z'"


def test_reported_as_tokenize_error():
    with pytest.raises(TokenizeError) as err:
        with reported_as_tokenize_error():
            raise MissingFormatCode()
    assert err.value.kind == TokenizeErrorKind.MALFORMED_SYNTAX_ITEM
    assert isinstance(err.value.__cause__, MissingFormatCode)


def test_reported_as_tokenize_error_does_not_wrap_other_errors():
    with pytest.raises(KeyError):
        with reported_as_tokenize_error():
            raise KeyError("a")
