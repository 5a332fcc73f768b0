import texfmt.version
from _texfmt.lexing import lazy_tokenize, tokenize, tokenize_strict, untokenize
from _texfmt.tokenizer import LexicalError, Token, TokenizationError, TokenKind

__author__ = """Federico Stra"""
__email__ = "stra.federico@gmail.com"

__version__ = texfmt.version.version

__all__ = [
    "LexicalError",
    "Token",
    "TokenKind",
    "TokenizationError",
    "lazy_tokenize",
    "tokenize",
    "tokenize_strict",
    "untokenize",
]
