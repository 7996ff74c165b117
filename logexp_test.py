#!/usr/bin/env python3

from __future__ import annotations

import logging
import math

from digitcalc.calc import exp, ln
from digitcalc.config import CalcConfig
from digitcalc.harness import TEST_VECTORS
from digitcalc.logexp import digit_exp, digit_ln
from digitcalc.result import CalcError


def rel_err(got: float, want: float) -> float:
    return abs(got - want) / abs(want)


def test_ln_of_ten() -> None:
    assert abs(ln(10.0) - 2.302585092994046) < 1e-7


def test_ln_matches_math() -> None:
    for x in TEST_VECTORS["ln"]:
        got = ln(x)
        want = math.log(x)
        if abs(got - want) >= 1e-7:
            raise AssertionError(f"ln mismatch: x={x} got={got} want={want}")


def test_ln_rejects_non_positive() -> None:
    assert ln(0.0) == 0.0
    assert ln(-1.0) == 0.0
    res = digit_ln(0.0)
    assert res.error is CalcError.INVALID_DOMAIN
    assert not res.ok


def test_ln_one_is_a_real_zero() -> None:
    res = digit_ln(1.0)
    assert res.ok
    assert abs(res.value) < 1e-9


def test_ln_digits_are_decimal_sized() -> None:
    for x in (1.0, 4.4, 9.99, 12.345, 1.234e34, 0.001):
        res = digit_ln(x)
        assert len(res.digits) == 7
        assert all(0 <= d <= 9 for d in res.digits), res.digits


def test_ln_shorter_table_loses_precision() -> None:
    short = CalcConfig(log_table_size=2)

    def worst(config: CalcConfig) -> float:
        return max(abs(digit_ln(x, config).value - math.log(x)) for x in TEST_VECTORS["ln"])

    assert worst(short) > worst(CalcConfig())
    assert worst(short) > 1e-6


def test_exp_matches_math() -> None:
    for x in TEST_VECTORS["exp"]:
        got = exp(x)
        want = math.exp(x)
        if rel_err(got, want) >= 1e-7:
            raise AssertionError(f"exp mismatch: x={x} got={got} want={want}")


def test_exp_negative_inputs() -> None:
    for x in (-1.0, -0.5, -12.345, -87.2332, -230.0):
        assert rel_err(exp(x), math.exp(x)) < 1e-7


def test_exp_zero_is_one() -> None:
    assert abs(exp(0.0) - 1.0) < 1e-15


def test_exp_input_limit() -> None:
    assert exp(231.0) == 0.0
    assert digit_exp(231.0).error is CalcError.OUT_OF_RANGE
    big = exp(230.0)
    assert math.isfinite(big) and big > 0.0
    assert rel_err(big, math.exp(230.0)) < 1e-7
    # the limit is configurable
    assert digit_exp(231.0, CalcConfig(exp_input_limit=240.0)).ok


def test_exp_underflows_to_zero() -> None:
    res = digit_exp(-1000.0)
    assert res.ok and res.converged
    assert res.value == 0.0


def test_exp_digit_zero_is_decimal_exponent() -> None:
    res = digit_exp(230.0)
    assert len(res.digits) == 8
    assert res.digits[0] == 99


def test_exp_ln_symmetry() -> None:
    for x in TEST_VECTORS["ln"]:
        got = exp(ln(x))
        if rel_err(got, x) >= 1e-7:
            raise AssertionError(f"exp(ln(x)) mismatch: x={x} got={got}")


def test_exp_loop_ceiling(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="digitcalc"):
        res = digit_exp(-1e9, CalcConfig(max_iterations=100))
    assert not res.converged
    assert res.digits[0] == 100
    assert "loop ceiling" in caplog.text


def test_ln_infinity_hits_ceiling() -> None:
    res = digit_ln(math.inf, CalcConfig(max_iterations=50))
    assert not res.converged


def main() -> None:
    test_ln_of_ten()
    test_ln_matches_math()
    test_ln_rejects_non_positive()
    test_ln_one_is_a_real_zero()
    test_ln_digits_are_decimal_sized()
    test_ln_shorter_table_loses_precision()
    test_exp_matches_math()
    test_exp_negative_inputs()
    test_exp_zero_is_one()
    test_exp_input_limit()
    test_exp_underflows_to_zero()
    test_exp_digit_zero_is_decimal_exponent()
    test_exp_ln_symmetry()
    test_ln_infinity_hits_ceiling()
    print("logexp_test: PASS")


if __name__ == "__main__":
    main()
