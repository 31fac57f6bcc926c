from .lexer import Lexer, LexError, tokenize
from .parser import Parser, ParseError, parse
from .evaluator import evaluate, GasExhausted, EvalError
from .calculator import calculate, Interpreter
from .types import NumberNode, BinaryOpNode, DepthExceeded, Env, to_sexpr

__all__ = [
    "Lexer", "LexError", "tokenize",
    "Parser", "ParseError", "parse",
    "evaluate", "GasExhausted", "EvalError", "DepthExceeded",
    "calculate", "Interpreter",
    "NumberNode", "BinaryOpNode", "Env", "to_sexpr",
]
