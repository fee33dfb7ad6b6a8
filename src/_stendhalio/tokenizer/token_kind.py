from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    TEXT = auto()
    FORMAT = auto()
    SPACE = auto()
    LINE_BREAK = auto()
    PARAGRAPH_BREAK = auto()
    THEMATIC_BREAK = auto()

    @classmethod
    def breaks(cls):
        return (
            cls.LINE_BREAK,
            cls.PARAGRAPH_BREAK,
            cls.THEMATIC_BREAK,
        )

    @classmethod
    def white_space(cls):
        return (cls.SPACE,) + cls.breaks()


@unique
class MetadataKind(Enum):
    TITLE = auto()
    AUTHOR = auto()
