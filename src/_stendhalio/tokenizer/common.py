def strip_prefix(line, prefix):
    """
    :returns: The remainder of line following prefix, or None if
        line does not start with prefix, ie. strip_prefix("title: A book",
        "title: ") is "A book".
    """
    if line.startswith(prefix):
        return line[len(prefix) :]
    return None


def strip_line_ending(line):
    """
    Remove a "\\n" or "\\r\\n" line terminator from the end of line.
    """
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def split_lines(text):
    """
    Split text into lines terminated by "\\n" or "\\r\\n". A terminator
    at the end of text does not start another line, so
    split_lines("a\\nb\\n") is ["a", "b"] and split_lines("") is [].
    An unterminated last line is kept as is, like strip_line_ending
    does, so split_lines("a\\r") is ["a\\r"].
    """
    *terminated, last = text.split("\n")
    lines = [line[:-1] if line.endswith("\r") else line for line in terminated]
    if last:
        lines.append(last)
    return lines


def read_lines(stream, encoding="utf-8"):
    """
    Given a binary or text stream, generate its lines without
    terminators. Lines read from a binary stream are decoded
    with the given encoding.

    :raises UnicodeDecodeError: If a line is not valid in the encoding.
    :raises OSError: If reading from the stream fails.
    """
    for line in stream:
        if hasattr(line, "decode"):
            line = line.decode(encoding)
        yield strip_line_ending(line)
