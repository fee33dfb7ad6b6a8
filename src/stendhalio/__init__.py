import stendhalio.version
from _stendhalio.reading import read, tokenize_reader, tokenize_string
from _stendhalio.token_list import TokenList
from _stendhalio.tokenizer import StendhalTokenizer
from _stendhalio.tokenizer.errors import (
    FormatLookupError,
    IncompleteOrMissingFrontmatter,
    InvalidFormatCodeString,
    MissingFormatCode,
    NoSuchFormatCode,
    StendhalError,
    TokenizeError,
    TokenizeErrorKind,
)
from _stendhalio.tokenizer.format_code import Format, lookup_format
from _stendhalio.tokenizer.token import Metadata, Token
from _stendhalio.tokenizer.token_kind import MetadataKind, TokenKind

__version__ = stendhalio.version.version

__all__ = [
    "Format",
    "FormatLookupError",
    "IncompleteOrMissingFrontmatter",
    "InvalidFormatCodeString",
    "Metadata",
    "MetadataKind",
    "MissingFormatCode",
    "NoSuchFormatCode",
    "StendhalError",
    "StendhalTokenizer",
    "Token",
    "TokenKind",
    "TokenList",
    "TokenizeError",
    "TokenizeErrorKind",
    "lookup_format",
    "read",
    "tokenize_reader",
    "tokenize_string",
]
