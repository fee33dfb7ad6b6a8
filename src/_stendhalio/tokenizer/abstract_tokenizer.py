from abc import ABC, abstractmethod

from _stendhalio.tokenizer.common import read_lines, split_lines
from _stendhalio.tokenizer.errors import reported_as_tokenize_error


class AbstractTokenizer(ABC):
    """
    A tokenizer turns the lines of a book into a TokenList. Errors
    are raised as TokenizeError, with the kind of error categorizing
    the underlying cause.

    This is an abstract class which doesn't implement the specifics
    of the book format, only where the lines are read from.
    """

    encoding = "utf-8"

    @abstractmethod
    def tokenize_lines(self, lines):
        """
        :param lines: Iterator of lines without line terminators.
        :returns: The TokenList for the given lines.
        """
        pass

    def tokenize_string(self, text):
        """
        Tokenize a complete book given as a string.
        """
        with reported_as_tokenize_error():
            return self.tokenize_lines(iter(split_lines(text)))

    def tokenize_reader(self, stream):
        """
        Tokenize a book from a text or binary stream, ie. an opened file.
        Lines of binary streams are decoded with the tokenizer's encoding.

        :raises TokenizeError: With kind=TokenizeErrorKind.IO if
            reading from the stream fails, and
            kind=TokenizeErrorKind.ENCODING if the stream can not
            be decoded.
        """
        with reported_as_tokenize_error():
            return self.tokenize_lines(read_lines(stream, self.encoding))
