from dataclasses import dataclass
from typing import Any, Optional, Union

from .token import OPERATORS

# Parser recursion costs three frames per parenthesis level
MAX_NESTING = 100


class DepthExceeded(RuntimeError):
    pass


@dataclass(frozen=True)
class NumberNode:
    value: int


@dataclass(frozen=True)
class BinaryOpNode:
    op: str
    left: "Node"
    right: "Node"

    def __post_init__(self):
        if self.op not in OPERATORS:
            raise ValueError(f"invalid operator: {self.op!r}")


Node = Union[NumberNode, BinaryOpNode]


def to_sexpr(node: Node) -> Any:
    """Render a tree as nested lists, e.g. ["+", 2, ["*", 3, 4]]."""
    if isinstance(node, NumberNode):
        return node.value
    return [node.op, to_sexpr(node.left), to_sexpr(node.right)]


@dataclass
class Env:
    max_gas: Optional[int] = None
    max_depth: Optional[int] = None
    max_nesting: int = MAX_NESTING
