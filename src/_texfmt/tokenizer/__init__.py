"""
In this module, a tokenizer is a generator that takes a stream and generates
tokens. If an error occurs, the function winds back the stream to the position
to where it started generating and raises an Error.

Token combinator is any function which returns a tokenizer.

(La)TeX lexing only requires looking at most a couple of characters ahead of
the current position, so backtracking is only ever needed for at most one
token. This means that there is no bookkeeping of backtracking points.

Tokens only store offsets into the stream, the text of a token is read back
from the source with Token.get_text or Token.get_value.

The tokenizers have to be given a seekable text stream whose positions are
character offsets, such as io.StringIO.
"""

from .errors import LexicalError, TokenizationError
from .latex_tokenizer import LatexTokenizer
from .token import Token
from .token_kind import TokenKind

__all__ = [
    "LatexTokenizer",
    "LexicalError",
    "Token",
    "TokenKind",
    "TokenizationError",
]
