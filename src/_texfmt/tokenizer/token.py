from dataclasses import dataclass

from _texfmt.tokenizer.token_kind import TokenKind


def read_span(source, start, end):
    """
    :param source: The string or text stream the span refers to.
    :returns: The characters between start and end in source. For streams,
        the position of the stream is left unchanged.
    """
    if isinstance(source, str):
        return source[start:end]
    go_back = source.tell()
    source.seek(start)
    value = source.read(end - start)
    source.seek(go_back)
    return value


@dataclass(frozen=True)
class Token:
    """
    A token in a (La)TeX source. start and end are the offsets of
    the full text covered by the token, so that for a command
    source[start:end] == "\\section".
    """

    kind: TokenKind
    start: int
    end: int

    @property
    def value_start(self):
        return self.start + self.kind.value_offset

    def get_text(self, source):
        """
        :returns: The text in source covered by the token, e.g. "\\section"
            for a command token, "{" for TokenKind.LBRACE, and either "\\n" or
            "\\r\\n" for TokenKind.NEWLINE.
        """
        return read_span(source, self.start, self.end)

    def get_value(self, source):
        """
        :returns: The value of the token, e.g. "section" for the command
            \\section or " note" for the comment "% note". Tokens without a
            value, such as kind=TokenKind.LBRACE, give None.
        """
        if not self.kind.has_value:
            return None
        return read_span(source, self.value_start, self.end)
