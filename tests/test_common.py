import io

import pytest

from _stendhalio.tokenizer.common import read_lines, split_lines


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\nb\n", ["a", "b"]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\n\nb", ["a", "", "b"]),
        ("a\r", ["a\r"]),
        ("a\r\nb\r", ["a", "b\r"]),
        ("a\rb\n", ["a\rb"]),
        ("\n", [""]),
    ],
)
def test_split_lines_agrees_with_read_lines(text, expected):
    assert split_lines(text) == expected
    assert list(read_lines(io.BytesIO(text.encode("utf-8")))) == expected
    assert list(read_lines(io.StringIO(text))) == expected
