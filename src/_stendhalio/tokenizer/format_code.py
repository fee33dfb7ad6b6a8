from enum import Enum, unique

from _stendhalio.tokenizer.errors import InvalidFormatCodeString, NoSuchFormatCode

FORMAT_CODE_PREFIX = "§"


@unique
class Format(Enum):
    """
    The legacy Minecraft formatting codes. The value of each
    member is the character following '§' in a format code,
    ie. "§o" is Format.ITALIC.

    Colors and decorations apply until the next Format.RESET
    or the end of the line.
    """

    BLACK = "0"
    DARK_BLUE = "1"
    DARK_GREEN = "2"
    DARK_AQUA = "3"
    DARK_RED = "4"
    DARK_PURPLE = "5"
    GOLD = "6"
    GRAY = "7"
    DARK_GRAY = "8"
    BLUE = "9"
    GREEN = "a"
    AQUA = "b"
    RED = "c"
    LIGHT_PURPLE = "d"
    YELLOW = "e"
    WHITE = "f"
    OBFUSCATED = "k"
    BOLD = "l"
    STRIKETHROUGH = "m"
    UNDERLINE = "n"
    ITALIC = "o"
    RESET = "r"

    @classmethod
    def colors(cls):
        return tuple(f for f in cls if f.value in "0123456789abcdef")

    @classmethod
    def decorations(cls):
        return (
            cls.OBFUSCATED,
            cls.BOLD,
            cls.STRIKETHROUGH,
            cls.UNDERLINE,
            cls.ITALIC,
        )

    @classmethod
    def from_code(cls, code):
        """
        :param code: The character following '§' in a format code.
        :raises NoSuchFormatCode: If code is not a format code.
        """
        format_tag = lookup_format(code)
        if format_tag is None:
            raise NoSuchFormatCode(code)
        return format_tag

    @classmethod
    def from_code_string(cls, code_string):
        """
        Parse a complete format code, ie. Format.from_code_string("§o")
        is Format.ITALIC.

        :raises InvalidFormatCodeString: If code_string is not two
            characters starting with '§'.
        :raises NoSuchFormatCode: If the second character is not a format code.
        """
        if len(code_string) != 2 or not code_string.startswith(FORMAT_CODE_PREFIX):
            raise InvalidFormatCodeString(code_string)
        return cls.from_code(code_string[1])

    @property
    def code(self):
        return self.value

    @property
    def code_string(self):
        return FORMAT_CODE_PREFIX + self.value

    @property
    def is_color(self):
        return self in Format.colors()

    @property
    def is_decoration(self):
        return self in Format.decorations()


_formats_by_code = {f.value: f for f in Format}


def lookup_format(code):
    """
    The default format code table.

    :param code: The character following '§' in a format code.
    :returns: The Format for the given code, or None if there is no such format.
    """
    return _formats_by_code.get(code)
