import io
import logging
import pathlib
from contextlib import contextmanager

from _texfmt.tokenizer import LatexTokenizer, LexicalError

logger = logging.getLogger(__name__)


def tokenize(text):
    """
    Tokenizes a (La)TeX source and returns the tokens together
    with the part of the source that could not be tokenized,
    ie. tokens, rest = tokenize("\\section{Intro}").

    Tokenization stops at the first position where no token
    matches, so rest is empty if and only if the whole source
    was tokenized. Tokens refer to offsets into text, see
    Token.get_value.
    """
    tokens = list(LatexTokenizer(io.StringIO(text)))
    offset = tokens[-1].end if tokens else 0
    logger.debug(
        "Tokenized %d tokens, stopped at %d of %d", len(tokens), offset, len(text)
    )
    return tokens, text[offset:]


def tokenize_strict(text):
    """
    Like tokenize, but raises LexicalError with the offset of the first
    character that could not be tokenized instead of returning the rest.
    """
    tokens, rest = tokenize(text)
    if rest:
        raise LexicalError(len(text) - len(rest), rest)
    return tokens


def untokenize(tokens, source):
    """
    Reconstructs the text covered by the given tokens. For the tokens of a
    fully tokenized source, untokenize(tokens, source) == source.
    """
    return "".join(token.get_text(source) for token in tokens)


def read_source(filelike):
    """
    Reads a whole (La)TeX source from a path or an open text stream.
    Line endings are kept as they are in the file.
    """
    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "r", encoding="utf-8", newline="") as stream:
            return stream.read()
    return filelike.read()
@contextmanager
def lazy_tokenize(filelike):
    """
    Context manager giving the tokens of a (La)TeX file,
    tokenized as they are consumed:

    >>> with lazy_tokenize("/my/file.tex") as tokens:
    ...     commands = [
    ...         t.get_value(tokens.stream)
    ...         for t in tokens
    ...         if t.kind == TokenKind.COMMAND
    ...     ]

    filelike is either a path or a seekable text stream, which is
    tokenized from its current position. A file given by path is read
    without translating line endings and closed on exit. Token values are
    read from tokens.stream.

    Iteration stops at the end of the source or at the first position
    where no token matches, which is the end of the last token.
    """
    stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        did_open = True
        stream = io.StringIO(read_source(filelike))

    try:
        yield LatexTokenizer(stream)
    finally:
        if did_open:
            stream.close()
