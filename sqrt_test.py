#!/usr/bin/env python3

from __future__ import annotations

from digitcalc.calc import sqrt
from digitcalc.config import CalcConfig
from digitcalc.harness import TEST_VECTORS
from digitcalc.result import CalcError
from digitcalc.sqrt import babylonian_sqrt


def test_sqrt_two() -> None:
    assert abs(sqrt(2.0) - 1.4142135623730951) < 1e-14


def test_sqrt_squares_back() -> None:
    for x in TEST_VECTORS["sqrt"] + (2.0, 9.99e99):
        s = sqrt(x)
        if abs(s * s - x) > 1e-14 * max(x, 1.0):
            raise AssertionError(f"sqrt mismatch: x={x} got={s} square={s * s}")


def test_sqrt_tiny_input_stops_at_tolerance() -> None:
    # the stopping rule is absolute, so roots below the tolerance are not resolved
    res = babylonian_sqrt(5e-324)
    assert res.ok and res.converged
    assert 0.0 < res.value < 1e-14


def test_sqrt_zero_and_negative() -> None:
    zero = babylonian_sqrt(0.0)
    assert zero.ok and zero.value == 0.0
    assert zero.stats["sqrt_newton_loops"] == 0
    neg = babylonian_sqrt(-4.0)
    assert neg.error is CalcError.INVALID_DOMAIN
    assert sqrt(-4.0) == 0.0


def test_sqrt_converges_on_huge_input() -> None:
    res = babylonian_sqrt(1.234e78)
    assert res.converged
    assert 0 < res.stats["sqrt_newton_loops"] < 1000


def test_sqrt_loop_ceiling() -> None:
    res = babylonian_sqrt(1e300, CalcConfig(max_iterations=5))
    assert not res.converged
    assert res.stats["sqrt_newton_loops"] == 5


def main() -> None:
    test_sqrt_two()
    test_sqrt_squares_back()
    test_sqrt_tiny_input_stops_at_tolerance()
    test_sqrt_zero_and_negative()
    test_sqrt_converges_on_huge_input()
    test_sqrt_loop_ceiling()
    print("sqrt_test: PASS")


if __name__ == "__main__":
    main()
