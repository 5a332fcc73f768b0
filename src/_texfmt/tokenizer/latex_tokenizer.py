from functools import cached_property
from string import ascii_letters

from _texfmt.tokenizer.combinators import one_of, repeated
from _texfmt.tokenizer.common import tokenize_word
from _texfmt.tokenizer.errors import TokenizationError
from _texfmt.tokenizer.token import Token
from _texfmt.tokenizer.token_kind import TokenKind

# Characters that end a text run unless escaped
STRUCTURAL_CHARACTERS = "\\%{}$ \t\n"
# Characters that may follow a backslash inside a text run
ESCAPABLE_CHARACTERS = "%{}$&,; !"
SPACE_CHARACTERS = " \t"


class LatexTokenizer:
    """
    The latex tokenizer is an iterable for tokens for a given text stream of
    (La)TeX source. Iteration stops at the end of the stream or at the first
    position where no token can be matched, the stream is then left at that
    position.

    >>> stream = io.StringIO("\\\\cmd{arg}")
    >>> [t.kind.name for t in LatexTokenizer(stream)]
    ['COMMAND', 'LBRACE', 'TEXT', 'RBRACE']

    """

    def __init__(self, stream):
        """
        :param stream: A seekable text stream containing (La)TeX source.
        """
        self.stream = stream

    def __iter__(self):
        return repeated(self.tokenize_token)()

    @cached_property
    def tokenize_token(self):
        """
        Tokenize exactly one token. The order of the alternatives decides
        which token is produced when several could match.
        """
        return one_of(
            self.tokenize_command,
            self.tokenize_comment,
            self.tokenize_endline,
            self.tokenize_math,
            self.tokenize_whitespace,
            self.tokenize_newline,
            self.tokenize_delimiter,
            self.tokenize_text,
        )

    @cached_property
    def tokenize_endline(self):
        return tokenize_word(self.stream, "\\\\", TokenKind.ENDLINE)

    @cached_property
    def tokenize_math(self):
        return one_of(
            *[
                tokenize_word(self.stream, word, kind)
                for kind, word in TokenKind.math_delimiters().items()
            ]
        )

    @cached_property
    def tokenize_newline(self):
        return one_of(
            tokenize_word(self.stream, "\r\n", TokenKind.NEWLINE),
            tokenize_word(self.stream, "\n", TokenKind.NEWLINE),
        )

    @cached_property
    def tokenize_delimiter(self):
        return one_of(
            *[
                tokenize_word(self.stream, word, kind)
                for kind, word in TokenKind.delimiters().items()
            ]
        )

    def tokenize_command(self):
        """
        Tokenize a command, yields
        Token(TokenKind.COMMAND, 0, 8) for stream
        containing "\\section{".
        """
        start = self.stream.tell()
        read_char = self.stream.read(1)
        if read_char != "\\":
            self.stream.seek(start)
            raise TokenizationError(f"Expected command at {start}")

        end = self.stream.tell()
        read_char = self.stream.read(1)
        while read_char and read_char in ascii_letters:
            end = self.stream.tell()
            read_char = self.stream.read(1)

        if end - start < 2:
            self.stream.seek(start)
            raise TokenizationError(f"Expected command name at {start + 1}")
        self.stream.seek(end)
        yield Token(TokenKind.COMMAND, start, end)

    def tokenize_comment(self):
        """
        Tokenize a comment, yields
        Token(TokenKind.COMMENT, 0, 6) for stream
        containing "% note\\n". The line break is not part of the comment.

        A carriage return which does not start a "\\r\\n" line break is not
        allowed in a comment.
        """
        start = self.stream.tell()
        read_char = self.stream.read(1)
        if read_char != "%":
            self.stream.seek(start)
            raise TokenizationError(f"Expected comment at {start}")

        while True:
            end = self.stream.tell()
            read_char = self.stream.read(1)
            if not read_char or read_char == "\n":
                break
            if read_char == "\r":
                if self.stream.read(1) == "\n":
                    break
                self.stream.seek(start)
                raise TokenizationError(
                    f"Expected line ending after carriage return at {end}"
                )
        self.stream.seek(end)
        yield Token(TokenKind.COMMENT, start, end)

    def tokenize_whitespace(self):
        start = self.stream.tell()
        end = start
        read_char = self.stream.read(1)
        while read_char and read_char in SPACE_CHARACTERS:
            end = self.stream.tell()
            read_char = self.stream.read(1)

        self.stream.seek(end)
        if end == start:
            raise TokenizationError(f"Expected space at {start}, got {read_char!r}")
        yield Token(TokenKind.WHITESPACE, start, end)

    def tokenize_text(self):
        """
        Tokenize a run of text, yields
        Token(TokenKind.TEXT, 0, 4) for stream
        containing "50\\% off".

        A backslash followed by one of ESCAPABLE_CHARACTERS is kept in the
        text together with the escaped character.
        """
        start = self.stream.tell()
        end = start
        while True:
            read_char = self.stream.read(1)
            if read_char == "\\":
                escaped = self.stream.read(1)
                if not escaped or escaped not in ESCAPABLE_CHARACTERS:
                    break
            elif not read_char or read_char in STRUCTURAL_CHARACTERS:
                break
            end = self.stream.tell()

        self.stream.seek(end)
        if end == start:
            raise TokenizationError(f"Expected text at {start}")
        yield Token(TokenKind.TEXT, start, end)
