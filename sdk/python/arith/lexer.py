"""On-demand tokenizer for infix arithmetic expressions."""

from typing import Iterator

from .token import EndOfInput, Integer, LeftParen, Operator, OPERATORS, RightParen, Token

INT64_MAX = 2**63 - 1

_DIGITS = "0123456789"


class LexError(SyntaxError):
    """A character that does not begin any valid token."""

    def __init__(self, message: str, char: str, pos: int):
        super().__init__(message)
        self.char = char
        self.pos = pos


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def next_token(self) -> Token:
        """Return the next token; EndOfInput forever once input is exhausted."""
        self._skip_whitespace()

        if self.pos >= len(self.text):
            return EndOfInput(pos=len(self.text))

        ch = self.text[self.pos]
        start = self.pos

        # str.isdigit() also accepts non-ASCII digits like '²'
        if ch in _DIGITS:
            return self._integer()
        if ch in OPERATORS:
            self.pos += 1
            return Operator(ch, pos=start)
        if ch == "(":
            self.pos += 1
            return LeftParen(pos=start)
        if ch == ")":
            self.pos += 1
            return RightParen(pos=start)

        raise LexError(f"unexpected character {ch!r} at position {start}", ch, start)

    def tokens(self) -> Iterator[Token]:
        """Yield tokens lazily, ending with a single EndOfInput."""
        while True:
            tok = self.next_token()
            yield tok
            if isinstance(tok, EndOfInput):
                return

    def _integer(self) -> Integer:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in _DIGITS:
            self.pos += 1
        digits = self.text[start:self.pos]
        # int() refuses very long digit strings, leading zeros included
        significant = digits.lstrip("0") or "0"
        if len(significant) > 19 or int(significant) > INT64_MAX:
            raise LexError(
                f"integer literal out of range at position {start}: {digits}",
                digits[0],
                start,
            )
        return Integer(int(significant), pos=start)

    def _skip_whitespace(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1


def tokenize(text: str) -> list[Token]:
    return list(Lexer(text).tokens())
