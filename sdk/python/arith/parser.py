"""Recursive-descent parser for infix arithmetic expressions.

Grammar, one rule per precedence level:

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := INTEGER | '(' expression ')'

Each loop iteration nests the tree built so far as the left child of the
new node, which makes both levels left-associative.
"""

import logging
from typing import Optional

from .lexer import Lexer
from .token import EndOfInput, Integer, LeftParen, Operator, RightParen, Token, kind_name
from .types import MAX_NESTING, BinaryOpNode, DepthExceeded, Node, NumberNode

logger = logging.getLogger(__name__)


class ParseError(SyntaxError):
    """Token stream does not match the grammar at the current position."""

    def __init__(self, expected: str, found: Token):
        self.expected = expected
        self.found = kind_name(found)
        self.pos = found.pos
        super().__init__(f"expected {expected} but found {self.found} at position {self.pos}")


class Parser:
    def __init__(self, text: str, max_nesting: int = MAX_NESTING):
        self.lexer = Lexer(text)
        self.max_nesting = max_nesting
        self.depth = 0
        self.current_token: Token = self.lexer.next_token()

    def advance(self, expected: Optional[type] = None) -> Token:
        """Consume the lookahead token and return it.

        Args:
            expected: Token class the lookahead must be, if given

        Raises:
            ParseError: the lookahead is not of the expected kind
        """
        tok = self.current_token
        if expected is not None and not isinstance(tok, expected):
            raise ParseError(kind_name(expected), tok)
        self.current_token = self.lexer.next_token()
        return tok

    def parse(self) -> Node:
        """Parse a complete expression; trailing tokens are an error."""
        node = self.expression()
        self.advance(EndOfInput)
        return node

    def expression(self) -> Node:
        node = self.term()
        while self._at_operator("+", "-"):
            op = self.advance().symbol
            node = BinaryOpNode(op, node, self.term())
        return node

    def term(self) -> Node:
        node = self.factor()
        while self._at_operator("*", "/"):
            op = self.advance().symbol
            node = BinaryOpNode(op, node, self.factor())
        return node

    def factor(self) -> Node:
        tok = self.current_token
        if isinstance(tok, Integer):
            self.advance()
            return NumberNode(tok.value)
        if isinstance(tok, LeftParen):
            self.advance()
            self.depth += 1
            if self.depth > self.max_nesting:
                raise DepthExceeded(f"max parenthesis nesting exceeded at position {tok.pos}")
            try:
                node = self.expression()
            finally:
                self.depth -= 1
            self.advance(RightParen)
            return node
        raise ParseError("Integer or LeftParen", tok)

    def _at_operator(self, *symbols: str) -> bool:
        tok = self.current_token
        return isinstance(tok, Operator) and tok.symbol in symbols


def parse(src: str, max_nesting: int = MAX_NESTING) -> Node:
    """Parse an arithmetic expression string into an AST."""
    node = Parser(src, max_nesting=max_nesting).parse()
    logger.debug("parsed %r", src)
    return node
