import io

import hypothesis.strategies as st
import pytest
from hypothesis import given

from _texfmt.tokenizer import LatexTokenizer
from _texfmt.tokenizer.errors import TokenizationError
from _texfmt.tokenizer.token_kind import TokenKind

from .generators.latex_contents import (
    command_names,
    comments,
    text_runs,
    whitespace,
)


@pytest.fixture
def latex_tokenizer():
    def make_tokenizer(contents):
        return LatexTokenizer(io.StringIO(contents))

    return make_tokenizer


@given(command_names, st.sampled_from(["", "{", " ", "1", "\\\\", "_"]))
def test_tokenize_command(name, following):
    stream = io.StringIO("\\" + name + following)
    tokenizer = LatexTokenizer(stream)

    token = next(tokenizer.tokenize_command())

    assert token.kind == TokenKind.COMMAND
    assert token.get_value(stream) == name
    assert token.get_text(stream) == "\\" + name
    assert stream.tell() == len(name) + 1


@pytest.mark.parametrize("contents", ["\\\\cmd", "\\1", "\\", "cmd", "\\{"])
def test_tokenize_command_rejects(latex_tokenizer, contents):
    tokenizer = latex_tokenizer(contents)

    with pytest.raises(TokenizationError):
        next(tokenizer.tokenize_command())

    assert tokenizer.stream.tell() == 0


@pytest.mark.parametrize(
    "contents, value",
    [
        ("% hello world", " hello world"),
        ("% hello world\n", " hello world"),
        ("% hello world\r\nnext", " hello world"),
        ("%", ""),
        ("%%\\cmd{", "%\\cmd{"),
    ],
)
def test_tokenize_comment(latex_tokenizer, contents, value):
    tokenizer = latex_tokenizer(contents)

    token = next(tokenizer.tokenize_comment())

    assert token.kind == TokenKind.COMMENT
    assert token.get_value(tokenizer.stream) == value
    assert tokenizer.stream.tell() == len(value) + 1


@pytest.mark.parametrize("contents", ["%a\rb", "%a\r", "%\r\r\n", "\\%"])
def test_tokenize_comment_rejects(latex_tokenizer, contents):
    tokenizer = latex_tokenizer(contents)

    with pytest.raises(TokenizationError):
        next(tokenizer.tokenize_comment())

    assert tokenizer.stream.tell() == 0


@given(comments)
def test_tokenize_generated_comment(comment):
    stream = io.StringIO(comment + "\n")

    token = next(LatexTokenizer(stream).tokenize_comment())

    assert token.get_text(stream) == comment
    assert stream.read() == "\n"


@pytest.mark.parametrize("contents, rest", [(r"\\cmd", "cmd"), (r"\\\cmd", r"\cmd")])
def test_tokenize_endline(latex_tokenizer, contents, rest):
    tokenizer = latex_tokenizer(contents)

    token = next(tokenizer.tokenize_endline())

    assert token.kind == TokenKind.ENDLINE
    assert token.get_value(tokenizer.stream) is None
    assert tokenizer.stream.read() == rest


@pytest.mark.parametrize(
    "contents, kind, rest",
    [
        ("\\[1+2\\]", TokenKind.B_DISPLAY_MATH, "1+2\\]"),
        ("\\]asd", TokenKind.E_DISPLAY_MATH, "asd"),
        ("$$1+2$$", TokenKind.T_DISPLAY_MATH, "1+2$$"),
        ("$1+2$", TokenKind.INLINE_MATH, "1+2$"),
    ],
)
def test_tokenize_math(latex_tokenizer, contents, kind, rest):
    tokenizer = latex_tokenizer(contents)

    token = next(tokenizer.tokenize_math())

    assert token.kind == kind
    assert tokenizer.stream.read() == rest


@given(whitespace, st.sampled_from(["", "\n", "a", "\\cmd"]))
def test_tokenize_whitespace(space, following):
    stream = io.StringIO(space + following)

    token = next(LatexTokenizer(stream).tokenize_whitespace())

    assert token.kind == TokenKind.WHITESPACE
    assert token.get_value(stream) == space
    assert stream.read() == following


@pytest.mark.parametrize("contents", ["", "\n", "a"])
def test_tokenize_whitespace_rejects(latex_tokenizer, contents):
    tokenizer = latex_tokenizer(contents)

    with pytest.raises(TokenizationError, match="Expected space"):
        next(tokenizer.tokenize_whitespace())

    assert tokenizer.stream.tell() == 0


@pytest.mark.parametrize("newline", ["\n", "\r\n"])
def test_tokenize_newline(latex_tokenizer, newline):
    tokenizer = latex_tokenizer(newline + "\n")

    tokens = list(tokenizer.tokenize_newline())

    assert [t.kind for t in tokens] == [TokenKind.NEWLINE]
    assert tokens[0].get_text(tokenizer.stream) == newline
    assert tokenizer.stream.read() == "\n"


@pytest.mark.parametrize(
    "expected_kind, word",
    TokenKind.delimiters().items(),
)
def test_tokenize_delimiter(latex_tokenizer, expected_kind, word):
    tokenizer = latex_tokenizer(word + word)

    token = next(tokenizer.tokenize_delimiter())

    assert token.kind == expected_kind
    assert token.get_text(tokenizer.stream) == word
    assert tokenizer.stream.tell() == 1


@pytest.mark.parametrize(
    "contents, value",
    [
        ("asd$", "asd"),
        ("1+2$", "1+2"),
        (r"(\,\&\;)\[", r"(\,\&\;)"),
        ("50\\% off", "50\\%"),
        ("a\\ b", "a\\ b"),
        ("\\{\\%\\} ", "\\{\\%\\}"),
        ("a[b]{", "a[b]"),
        ("a\rb\n", "a\rb"),
        ("end\\", "end"),
        ("x\\\\", "x"),
        ("x\\cmd", "x"),
    ],
)
def test_tokenize_text(latex_tokenizer, contents, value):
    tokenizer = latex_tokenizer(contents)

    token = next(tokenizer.tokenize_text())

    assert token.kind == TokenKind.TEXT
    assert token.get_value(tokenizer.stream) == value
    assert tokenizer.stream.tell() == len(value)


@pytest.mark.parametrize("contents", ["", " ", "\\", "\\[", "%", "$", "{", "\n"])
def test_tokenize_text_rejects(latex_tokenizer, contents):
    tokenizer = latex_tokenizer(contents)

    with pytest.raises(TokenizationError, match="Expected text"):
        next(tokenizer.tokenize_text())

    assert tokenizer.stream.tell() == 0


@given(text_runs())
def test_tokenize_generated_text(text):
    stream = io.StringIO(text + "$")

    token = next(LatexTokenizer(stream).tokenize_text())

    assert token.get_value(stream) == text


@pytest.mark.parametrize(
    "contents, expected_kind",
    [
        ("\\cmd", TokenKind.COMMAND),
        ("\\\\", TokenKind.ENDLINE),
        ("\\[", TokenKind.B_DISPLAY_MATH),
        ("\\%", TokenKind.TEXT),
        ("%\\cmd", TokenKind.COMMENT),
        ("$$", TokenKind.T_DISPLAY_MATH),
        ("\t", TokenKind.WHITESPACE),
        ("\r\n", TokenKind.NEWLINE),
        ("[", TokenKind.LBRACKET),
        ("]", TokenKind.RBRACKET),
        ("a]", TokenKind.TEXT),
    ],
)
def test_tokenize_token_precedence(latex_tokenizer, contents, expected_kind):
    tokenizer = latex_tokenizer(contents)

    tokens = list(tokenizer.tokenize_token())

    assert [t.kind for t in tokens] == [expected_kind]


def test_iteration_stops_at_unknown_input(latex_tokenizer):
    tokenizer = latex_tokenizer("a \\@b")

    tokens = list(tokenizer)

    assert [t.kind for t in tokens] == [TokenKind.TEXT, TokenKind.WHITESPACE]
    assert tokenizer.stream.read() == "\\@b"


def test_get_value_keeps_stream_position(latex_tokenizer):
    tokenizer = latex_tokenizer("\\cmd{arg}")
    tokens = iter(tokenizer)

    command = next(tokens)
    assert command.get_value(tokenizer.stream) == "cmd"
    assert tokenizer.stream.tell() == 4

    assert next(tokens).kind == TokenKind.LBRACE
