import logging
import pathlib

from _stendhalio.tokenizer import StendhalTokenizer
from _stendhalio.tokenizer.errors import reported_as_tokenize_error
from _stendhalio.tokenizer.format_code import lookup_format

logger = logging.getLogger(__name__)


def tokenize_string(text, lookup=lookup_format):
    """
    Tokenize a book in the stendhal format given as a string, ie.

    >>> token_list = tokenize_string("title: t\\nauthor: a\\npages:\\n")
    >>> token_list.metadata[0].value
    't'

    :param lookup: The format code table, see StendhalTokenizer.
    :raises TokenizeError: If the book could not be tokenized.
    """
    return StendhalTokenizer(lookup).tokenize_string(text)


def tokenize_reader(stream, lookup=lookup_format, encoding="utf-8"):
    """
    Tokenize a book in the stendhal format from an opened binary or text
    stream. The stream is read line by line and not closed.

    :param lookup: The format code table, see StendhalTokenizer.
    :param encoding: Encoding used for decoding binary streams.
    :raises TokenizeError: If the book could not be read or tokenized.
    """
    return StendhalTokenizer(lookup, encoding).tokenize_reader(stream)


def read(filelike, lookup=lookup_format, encoding="utf-8"):
    """
    Reads a book in the stendhal format and returns its TokenList,
    ie. token_list = read("/my/book.stendhal").

    :param filelike: A file-like object, (string to path, pathlib.Path
        or opened stream). Streams given are not closed.
    :param lookup: The format code table, see StendhalTokenizer.
    :param encoding: Encoding of the file.
    :raises TokenizeError: If the file could not be opened, read
        or tokenized.
    """
    if isinstance(filelike, (str, pathlib.Path)):
        logger.debug("Reading book from %s", filelike)
        with reported_as_tokenize_error():
            file_stream = open(filelike, "rb")
        with file_stream:
            return tokenize_reader(file_stream, lookup, encoding)

    return tokenize_reader(filelike, lookup, encoding)
