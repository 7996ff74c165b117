"""Calculator-style entry points.

`ln`, `exp`, `sqrt`, `tan` and `atan` behave like the keys of the old
machines: they always return a number and show 0 for an input they cannot
handle. Use `evaluate` (or the digit_* functions) to tell a rejected input
apart from a genuine zero.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, NamedTuple

from .config import DEFAULT_CONFIG, CalcConfig
from .logexp import digit_exp, digit_ln
from .result import CalcResult
from .sqrt import babylonian_sqrt
from .trig import digit_atan, digit_tan


class CalcFunction(NamedTuple):
    algorithm: Callable[[float, CalcConfig], CalcResult]
    reference: Callable[[float], float]


FUNCTIONS: Dict[str, CalcFunction] = {
    "ln": CalcFunction(digit_ln, math.log),
    "exp": CalcFunction(digit_exp, math.exp),
    "sqrt": CalcFunction(babylonian_sqrt, math.sqrt),
    "tan": CalcFunction(digit_tan, math.tan),
    "atan": CalcFunction(digit_atan, math.atan),
}


def evaluate(name: str, x: float, config: CalcConfig = DEFAULT_CONFIG) -> CalcResult:
    if name not in FUNCTIONS:
        raise ValueError(f"unknown function: {name}")
    return FUNCTIONS[name].algorithm(x, config)


def ln(x: float, config: CalcConfig = DEFAULT_CONFIG) -> float:
    return digit_ln(x, config).sentinel


def exp(x: float, config: CalcConfig = DEFAULT_CONFIG) -> float:
    return digit_exp(x, config).sentinel


def sqrt(x: float, config: CalcConfig = DEFAULT_CONFIG) -> float:
    return babylonian_sqrt(x, config).sentinel


def tan(x: float, config: CalcConfig = DEFAULT_CONFIG) -> float:
    return digit_tan(x, config).sentinel


def atan(x: float, config: CalcConfig = DEFAULT_CONFIG) -> float:
    return digit_atan(x, config).sentinel
