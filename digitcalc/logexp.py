"""Natural logarithm and exponential by digit extraction.

Both walk the same table of ratios 2, 1.1, 1.01, ...: ln multiplies the
mantissa by the ratios until it reaches 10 and sums their logarithms, exp
subtracts the logarithms from its argument and rebuilds the product of the
matching ratios. On BCD hardware multiplying by 1 + 10^-k is a shift and an
add, so neither needs a real multiplier.
"""

from __future__ import annotations

import logging

from .config import DEFAULT_CONFIG, CalcConfig
from .result import CalcError, CalcResult, LoopGuard, base_ops, failed
from .tables import LN10, log_table

logger = logging.getLogger(__name__)


def digit_ln(x: float, config: CalcConfig = DEFAULT_CONFIG) -> CalcResult:
    """ln(x) for x > 0."""
    if x <= 0.0:
        return failed("ln", x, CalcError.INVALID_DOMAIN)

    table = log_table(config.log_table_size)
    guard = LoopGuard("ln", config.max_iterations)
    stats = base_ops()
    digits = [0] * table.size

    # ln(m * 10^e) = ln(m) + e * ln(10), with the mantissa m in [1, 10).
    # On a BCD float this is a plain read of the exponent.
    a = x
    kln10 = 0.0
    norm_loops = 0
    guard.start()
    while a >= 10.0 and guard.tick():
        a /= 10.0
        kln10 += LN10
        norm_loops += 1
        stats["divide"] += 1
        stats["add_sub"] += 1
    guard.start()
    while a < 1.0 and guard.tick():
        a *= 10.0
        kln10 -= LN10
        norm_loops += 1
        stats["multiply"] += 1
        stats["add_sub"] += 1

    digit_loops = 0
    for j, ratio in enumerate(table.ratios):
        guard.start()
        while guard.tick():
            p = a * ratio
            digit_loops += 1
            stats["multiply"] += 1
            if p >= 10.0:
                break
            a = p
            digits[j] += 1

    # ln(10 / a) ~= (10 - a) / 10 once a is this close to 10
    result = (10.0 - a) / 10.0
    stats["add_sub"] += 1
    stats["divide"] += 1
    # LSB to MSB to keep the precision
    for j in reversed(range(table.size)):
        result += digits[j] * table.values[j]
        stats["multiply"] += 1
        stats["add_sub"] += 1

    value = LN10 - result + kln10
    stats["add_sub"] += 2
    stats["ln_norm_loops"] = norm_loops
    stats["ln_digit_loops"] = digit_loops

    logger.debug("ln(%r): exponent=%r digits=%s remainder=%r", x, kln10, digits, a)
    return CalcResult("ln", x, value, converged=not guard.exhausted, digits=tuple(digits), stats=stats)


def digit_exp(x: float, config: CalcConfig = DEFAULT_CONFIG) -> CalcResult:
    """exp(x) for x up to config.exp_input_limit."""
    # ln(9.99e99) is about 230, the largest power a 2-digit BCD exponent holds
    if x > config.exp_input_limit:
        return failed("exp", x, CalcError.OUT_OF_RANGE)

    size = config.exp_table_size
    table = log_table(size)
    # entry 0 is ln(10): its digit count becomes the decimal exponent
    logs = (LN10,) + table.values
    ratios = (10.0,) + table.ratios
    guard = LoopGuard("exp", config.max_iterations)
    stats = base_ops()
    digits = [0] * (size + 1)

    a = abs(x)
    is_neg = x < 0.0

    digit_loops = 0
    for j, log_value in enumerate(logs):
        guard.start()
        while guard.tick():
            s = a - log_value
            digit_loops += 1
            stats["add_sub"] += 1
            if s < 0.0:
                break
            a = s
            digits[j] += 1

    # e^a ~= 1 + a for the tiny remainder; left align it to form 0.x
    result = a * 10.0 ** (size - 1)
    stats["multiply"] += 1

    # MSB first this time: each pass multiplies the partial product by a ratio
    for j in range(size, 0, -1):
        for _ in range(digits[j]):
            result = result * ratios[j] + 1.0
            stats["multiply"] += 1
            stats["add_sub"] += 1
        result /= 10.0
        stats["divide"] += 1

    result = (result + 0.1) * 10.0
    stats["add_sub"] += 1
    stats["multiply"] += 1
    for _ in range(digits[0]):
        result *= ratios[0]
        stats["multiply"] += 1

    if is_neg:
        result = 1.0 / result
        stats["divide"] += 1

    stats["exp_digit_loops"] = digit_loops
    logger.debug("exp(%r): digits=%s remainder=%r", x, digits, a)
    return CalcResult("exp", x, result, converged=not guard.exhausted, digits=tuple(digits), stats=stats)
