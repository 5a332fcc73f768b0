from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    COMMAND = auto()
    COMMENT = auto()
    TEXT = auto()
    ENDLINE = auto()
    B_DISPLAY_MATH = auto()
    E_DISPLAY_MATH = auto()
    T_DISPLAY_MATH = auto()
    INLINE_MATH = auto()
    WHITESPACE = auto()
    NEWLINE = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()

    @classmethod
    def value_kinds(cls):
        return (
            cls.COMMAND,
            cls.COMMENT,
            cls.TEXT,
            cls.WHITESPACE,
        )

    @classmethod
    def math_delimiters(cls):
        # Matching order: $$ has to be tried before $
        return {
            cls.B_DISPLAY_MATH: "\\[",
            cls.E_DISPLAY_MATH: "\\]",
            cls.T_DISPLAY_MATH: "$$",
            cls.INLINE_MATH: "$",
        }

    @classmethod
    def delimiters(cls):
        return {
            cls.LBRACE: "{",
            cls.RBRACE: "}",
            cls.LBRACKET: "[",
            cls.RBRACKET: "]",
        }

    @property
    def has_value(self):
        return self in TokenKind.value_kinds()

    @property
    def value_offset(self):
        """
        Number of leading characters of a token of this kind which are
        not part of its value, ie. the backslash of a command.
        """
        if self in (TokenKind.COMMAND, TokenKind.COMMENT):
            return 1
        return 0
