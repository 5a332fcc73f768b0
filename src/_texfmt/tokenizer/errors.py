class TokenizationError(Exception):
    """
    A tokenizer will throw a TokenizationError if the expected token
    is not found at the start of the stream (however, it could be that
    any other valid token not covered by that tokenizer is at the
    start of the stream).
    """

    pass


class LexicalError(TokenizationError):
    """
    Thrown when a source could not be tokenized to the end. offset is the
    position of the first character no token could be matched at.
    """

    def __init__(self, offset, remainder=""):
        self.offset = offset
        self.remainder = remainder
        super().__init__(
            f"Could not tokenize source at offset {offset}: {remainder[:20]!r}"
        )
