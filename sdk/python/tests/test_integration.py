from concurrent.futures import ThreadPoolExecutor

import pytest
from arith import Env, GasExhausted, Interpreter, calculate


def test_calculate_ok():
    assert calculate("(2 + 3) * 4") == {"ok": True, "value": 20.0}


def test_calculate_lex_error():
    result = calculate("2 $ 3")
    assert result["ok"] is False
    err = result["error"]
    assert err["type"] == "LexError"
    assert err["char"] == "$"
    assert err["pos"] == 2


def test_calculate_parse_error():
    err = calculate("(2 + 3")["error"]
    assert err["type"] == "ParseError"
    assert err["expected"] == "RightParen"
    assert err["found"] == "EndOfInput"
    assert err["pos"] == 6


def test_calculate_division_by_zero():
    err = calculate("4 / (1 - 1)")["error"]
    assert err["type"] == "ZeroDivisionError"


def test_calculate_env_dict():
    result = calculate("1 + 1 + 1", {"maxGas": 2})
    assert result["ok"] is False
    assert result["error"]["type"] == "GasExhausted"


def test_calculate_env_dataclass():
    result = calculate("1 + 1 + 1", Env(max_depth=2))
    assert result["error"]["type"] == "DepthExceeded"


def test_calculate_default_gas_budget():
    src = " + ".join(["1"] * 400)
    assert calculate(src) == {"ok": True, "value": 400.0}
    assert calculate(src, {"max_gas": 100})["error"]["type"] == "GasExhausted"
    assert calculate(src, {"max_gas": None})["value"] == 400.0


def test_calculate_nesting_limit():
    result = calculate("((1))", {"max_nesting": 1})
    assert result["error"]["type"] == "DepthExceeded"


def test_calculate_long_leading_zero_literal():
    assert calculate("0" * 5000 + "1 + 1") == {"ok": True, "value": 2.0}


def test_calculate_long_chain():
    src = " + ".join(["1"] * 5000)
    assert calculate(src) == {"ok": True, "value": 5000.0}


def test_calculate_overflow():
    big = " * ".join(["9223372036854775807"] * 20)
    assert calculate(big)["error"]["type"] == "OverflowError"


def test_calculate_explicit_zero_depth():
    assert calculate("1", {"max_depth": 0})["error"]["type"] == "DepthExceeded"


def test_interpreter():
    assert Interpreter("7 / 2").evaluate() == 3.5


def test_interpreter_raises():
    with pytest.raises(GasExhausted):
        Interpreter("1 + 2", Env(max_gas=1)).evaluate()


def test_interpreter_env_dict():
    assert Interpreter("2 * 3", {"max_gas": 5}).evaluate() == 6
    with pytest.raises(GasExhausted):
        Interpreter("2 * 3", {"maxGas": 2}).evaluate()


def test_concurrent_calls():
    exprs = [f"{i} * ({i} + 1)" for i in range(50)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(calculate, exprs))
    assert [r["value"] for r in results] == [float(i * (i + 1)) for i in range(50)]
