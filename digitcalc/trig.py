"""Tangent and arctangent with decimal CORDIC.

The table holds the angles atan(1), atan(0.1), atan(0.01), ... Multiplying
by 10^-k is a digit shift, so the pseudo-rotations below need only shifts
and adds. No scale factor is tracked: tan is a ratio y/x and the growth of
the vector cancels out, while atan only reads the angle.
"""

from __future__ import annotations

import logging
import math
from typing import Dict

from .config import DEFAULT_CONFIG, CalcConfig
from .result import CalcError, CalcResult, LoopGuard, base_ops, failed
from .tables import TWO_PI, atan_table

logger = logging.getLogger(__name__)


def _reduce_angle(n: float, guard: LoopGuard, stats: Dict[str, int]) -> float:
    # A BCD float keeps mantissa and exponent apart, so first strip
    # 2*pi*10^k for every decade k > 0, largest first.
    k = int(math.log10(n)) if n >= 10.0 else 0

    guard.start()
    while k > 0 and guard.tick():
        two_pi = TWO_PI * 10.0**k
        if n >= two_pi:
            n -= two_pi
            stats["add_sub"] += 1
        else:
            k -= 1
        stats["reduce_loops"] = stats.get("reduce_loops", 0) + 1

    guard.start()
    while n > 0.0 and guard.tick():
        n -= TWO_PI
        stats["add_sub"] += 1
        stats["reduce_loops"] = stats.get("reduce_loops", 0) + 1
    n += TWO_PI
    stats["add_sub"] += 1
    return n


def reduce_angle(angle: float, config: CalcConfig = DEFAULT_CONFIG) -> float:
    """Map a non-negative angle onto (0, 2*pi]; 0 itself maps to 2*pi."""
    return _reduce_angle(angle, LoopGuard("reduce_angle", config.max_iterations), base_ops())


def digit_tan(theta: float, config: CalcConfig = DEFAULT_CONFIG) -> CalcResult:
    if not math.isfinite(theta):
        return failed("tan", theta, CalcError.INVALID_DOMAIN)

    table = atan_table(config.trig_table_size)
    guard = LoopGuard("tan", config.max_iterations)
    stats = base_ops()
    digits = [0] * table.size

    y = abs(theta)
    is_neg = theta < 0.0
    y = _reduce_angle(y, guard, stats)

    for i, angle in enumerate(table.values):
        guard.start()
        while y >= 0.0 and guard.tick():
            y -= angle
            digits[i] += 1
            stats["add_sub"] += 1
        # undo the overshoot so y keeps the true remainder
        if y < 0.0:
            y += angle
            digits[i] -= 1
            stats["add_sub"] += 1

    # the remainder y is small enough that tan(y) ~= y
    x = 1.0
    rotations = 0
    for i in reversed(range(table.size)):
        ratio = table.ratios[i]
        for _ in range(digits[i]):
            xnew = x * ratio
            ynew = y * ratio
            x = x - ynew
            y = y + xnew
            rotations += 1
        stats["multiply"] += 2 * digits[i]
        stats["add_sub"] += 2 * digits[i]
    stats["cordic_rotation_loops"] = rotations

    logger.debug("tan(%r): digits=%s x=%r y=%r", theta, digits, x, y)
    if x == 0.0:
        return failed("tan", theta, CalcError.DEGENERATE, digits=tuple(digits), stats=stats)

    result = y / x
    stats["divide"] += 1
    if is_neg:
        result = -result
    return CalcResult("tan", theta, result, converged=not guard.exhausted, digits=tuple(digits), stats=stats)


def digit_atan(value: float, config: CalcConfig = DEFAULT_CONFIG) -> CalcResult:
    """atan(value) by vectoring (x, y) = (1, |value|) down onto the x axis."""
    table = atan_table(config.trig_table_size)
    guard = LoopGuard("atan", config.max_iterations)
    stats = base_ops()
    digits = [0] * table.size

    x = 1.0
    y = abs(value)
    is_neg = value < 0.0

    vectorings = 0
    for i, ratio in enumerate(table.ratios):
        guard.start()
        while guard.tick():
            xnew = x * ratio
            ynew = y * ratio
            stats["multiply"] += 2
            stats["add_sub"] += 1
            if y - xnew < 0.0:
                break
            x = x + ynew
            y = y - xnew
            digits[i] += 1
            vectorings += 1
            stats["add_sub"] += 2

    # remainder angle, tiny enough that atan(r) ~= r
    result = y / x
    stats["divide"] += 1
    # LSB to MSB to keep the precision
    for j in reversed(range(table.size)):
        result += digits[j] * table.values[j]
        stats["multiply"] += 1
        stats["add_sub"] += 1

    if is_neg:
        result = -result
    stats["cordic_vectoring_loops"] = vectorings

    logger.debug("atan(%r): digits=%s", value, digits)
    return CalcResult("atan", value, result, converged=not guard.exhausted, digits=tuple(digits), stats=stats)
