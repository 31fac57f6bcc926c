"""Tree-walk evaluator for arithmetic ASTs, with gas/depth metering."""

import logging
import math
from typing import Any, Optional

from .types import BinaryOpNode, DepthExceeded, NumberNode

logger = logging.getLogger(__name__)


class GasExhausted(RuntimeError):
    pass


class EvalError(RuntimeError):
    pass


class _EvalState:
    __slots__ = ("gas", "max_depth")

    def __init__(self, max_gas: Optional[int], max_depth: Optional[int]):
        self.gas = max_gas
        self.max_depth = max_depth

    def charge(self, depth: int):
        if self.gas is not None:
            self.gas -= 1
            if self.gas < 0:
                raise GasExhausted("gas budget exceeded")
        if self.max_depth is not None and depth > self.max_depth:
            raise DepthExceeded("max tree depth exceeded")


def evaluate(node: Any, max_gas: Optional[int] = None, max_depth: Optional[int] = None) -> float:
    """Reduce an AST to a float.

    Division always produces a float quotient; a zero divisor raises
    ZeroDivisionError, and a result that overflows to inf or nan raises
    OverflowError.

    Args:
        node: Root of a tree from arith.parse
        max_gas: Node visit budget, unlimited when None
        max_depth: Deepest tree level allowed, unlimited when None
    """
    result = _eval(node, _EvalState(max_gas, max_depth))
    logger.debug("evaluated to %r", result)
    return result


def _eval(root: Any, st: _EvalState) -> float:
    # Post-order over an explicit stack; left-deep chains are as deep as they are long
    stack = [(root, 1, False)]
    values: list[float] = []
    while stack:
        node, depth, expanded = stack.pop()
        if expanded:
            right = values.pop()
            left = values.pop()
            values.append(_apply(node.op, left, right))
            continue
        st.charge(depth)
        if isinstance(node, NumberNode):
            values.append(float(node.value))
        elif isinstance(node, BinaryOpNode):
            stack.append((node, depth, True))
            stack.append((node.right, depth + 1, False))
            stack.append((node.left, depth + 1, False))
        else:
            raise EvalError(f"Unknown node: {node!r}")
    return values[0]


def _apply(op: str, left: float, right: float) -> float:
    if op == "+":
        result = left + right
    elif op == "-":
        result = left - right
    elif op == "*":
        result = left * right
    elif op == "/":
        if right == 0:
            raise ZeroDivisionError(f"division by zero: {left!r} / 0")
        result = left / right
    else:
        raise EvalError(f"Unknown operator: {op}")
    if not math.isfinite(result):
        raise OverflowError(f"result out of range: {left!r} {op} {right!r}")
    return result
