from _stendhalio.tokenizer.errors import (
    FormatLookupError,
    MissingFormatCode,
    NoSuchFormatCode,
)
from _stendhalio.tokenizer.format_code import FORMAT_CODE_PREFIX, lookup_format
from _stendhalio.tokenizer.token import LINE_BREAK, SPACE, THEMATIC_BREAK, Token

PAGE_MARKER = "#"
PAGE_MARKER_END = "- "


def strip_page_marker(line):
    """
    Lines starting with one or more '#' followed by "- " start a
    new page, ie. "#- text" and "##- text" (nested pages).

    :returns: The rest of the line following the page marker or
        None if the line does not start a page.
    """
    rest = line.lstrip(PAGE_MARKER)
    if len(rest) < len(line) and rest.startswith(PAGE_MARKER_END):
        return rest[len(PAGE_MARKER_END) :]
    return None


def tokenize_line(line, lookup=lookup_format):
    """
    Tokenize one line of a book body, ie.
    tokenize_line("a§ob") yields
    [Token.text("a"), Token.format(Format.ITALIC), Token.text("b"), LINE_BREAK].

    Every line ends with exactly one LINE_BREAK, also empty lines.
    Formats are not reset at the end of the line, the break itself
    ends any active format.

    :param line: A line without line terminator.
    :param lookup: The format code table, takes the character following
        '§' and returns a Format or None.
    :raises MissingFormatCode: If '§' is the last character of the line.
    :raises NoSuchFormatCode: If lookup has no Format for the
        character following '§'.
    :raises FormatLookupError: If lookup raises.
    """
    content = strip_page_marker(line)
    if content is None:
        content = line
    else:
        yield THEMATIC_BREAK

    text = []
    characters = iter(content)
    for char in characters:
        if char == FORMAT_CODE_PREFIX:
            code = next(characters, None)
            if code is None:
                raise MissingFormatCode()
            try:
                format_tag = lookup(code)
            except Exception as err:
                raise FormatLookupError(code) from err
            if format_tag is None:
                raise NoSuchFormatCode(code)
            if text:
                yield Token.text("".join(text))
                text.clear()
            yield Token.format(format_tag)
        elif char == " ":
            if text:
                yield Token.text("".join(text))
                text.clear()
            yield SPACE
        else:
            text.append(char)

    if text:
        yield Token.text("".join(text))
    yield LINE_BREAK


def parse_line(tokens, line, lookup=lookup_format):
    """
    Append the tokens of line to the list of tokens. If the line
    can not be tokenized, tokens is left unchanged.

    See tokenize_line.
    """
    tokens.extend(list(tokenize_line(line, lookup)))
