"""Lexical token types produced by the lexer.

Tokens form a closed union; consumers dispatch on the concrete class.
Every token records the offset where it starts in the source text.
"""

from dataclasses import dataclass, field
from typing import Union

OPERATORS = ("+", "-", "*", "/")


@dataclass(frozen=True)
class Integer:
    value: int
    pos: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Operator:
    symbol: str
    pos: int = field(default=0, compare=False)

    def __post_init__(self):
        if self.symbol not in OPERATORS:
            raise ValueError(f"invalid operator: {self.symbol!r}")


@dataclass(frozen=True)
class LeftParen:
    pos: int = field(default=0, compare=False)


@dataclass(frozen=True)
class RightParen:
    pos: int = field(default=0, compare=False)


@dataclass(frozen=True)
class EndOfInput:
    pos: int = field(default=0, compare=False)


Token = Union[Integer, Operator, LeftParen, RightParen, EndOfInput]


def kind_name(token) -> str:
    """Name of a token's kind, accepting either an instance or a class."""
    cls = token if isinstance(token, type) else type(token)
    return cls.__name__
