"""
In this module, a tokenizer takes the text of a book, either as a string or
as a stream of lines, and produces a TokenList: the metadata found in the
frontmatter of the book and the tokens of its body.

Each line of the body is tokenized independently (see line.tokenize_line),
every line ends with a line break token so no state is carried from one
line to the next. If an error occurs, no TokenList is produced and a
TokenizeError is raised, categorizing the underlying error.

The format codes ('§' followed by one character) are looked up in a format
code table, by default the Minecraft format codes, see format_code.Format.
"""

from .stendhal_tokenizer import StendhalTokenizer

__all__ = ["StendhalTokenizer"]
