"""Top-level calculate API for arithmetic expressions."""

import logging
from typing import Any

from .evaluator import EvalError, GasExhausted, evaluate
from .lexer import LexError
from .parser import ParseError, parse
from .types import DepthExceeded, Env

logger = logging.getLogger(__name__)


def _limits(env: Any) -> Env:
    if env is None:
        return Env()
    if isinstance(env, dict):
        limits = Env()
        if "max_gas" in env or "maxGas" in env:
            limits.max_gas = env.get("max_gas", env.get("maxGas"))
        limits.max_depth = env.get("max_depth", limits.max_depth)
        limits.max_nesting = env.get("max_nesting", limits.max_nesting)
        return limits
    return env


def _error_info(exc: Exception) -> dict:
    info: dict[str, Any] = {"type": type(exc).__name__, "message": str(exc)}
    if isinstance(exc, LexError):
        info["char"] = exc.char
        info["pos"] = exc.pos
    elif isinstance(exc, ParseError):
        info["expected"] = exc.expected
        info["found"] = exc.found
        info["pos"] = exc.pos
    return info


def calculate(src: str, env: Any = None) -> dict:
    """Parse and evaluate an expression without raising.

    Args:
        src: Expression text, e.g. "(2 + 3) * 4"
        env: Limits, either an Env dataclass or a dict with keys:
             max_gas/maxGas, max_depth, max_nesting

    Returns:
        {"ok": True, "value": float} or
        {"ok": False, "error": {"type": str, "message": str, ...}}
        Lex errors add "char" and "pos"; parse errors add "expected",
        "found" and "pos".
    """
    limits = _limits(env)
    try:
        ast = parse(src, max_nesting=limits.max_nesting)
        value = evaluate(ast, max_gas=limits.max_gas, max_depth=limits.max_depth)
    except (SyntaxError, ArithmeticError, GasExhausted, DepthExceeded, EvalError) as e:
        logger.debug("calculate(%r) failed: %s", src, type(e).__name__)
        return {"ok": False, "error": _error_info(e)}
    return {"ok": True, "value": value}


class Interpreter:
    """Holds one expression and evaluates it on demand, raising on failure."""

    def __init__(self, expression: str, env: Any = None):
        self.expression = expression
        self.env = _limits(env)

    def evaluate(self) -> float:
        ast = parse(self.expression, max_nesting=self.env.max_nesting)
        return evaluate(ast, max_gas=self.env.max_gas, max_depth=self.env.max_depth)
