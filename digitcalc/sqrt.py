from __future__ import annotations

import logging

from .config import DEFAULT_CONFIG, CalcConfig
from .result import CalcError, CalcResult, LoopGuard, base_ops, failed

logger = logging.getLogger(__name__)


def babylonian_sqrt(x: float, config: CalcConfig = DEFAULT_CONFIG) -> CalcResult:
    """sqrt(x) for x >= 0 by Newton-Raphson on r^2 - x."""
    if x < 0.0:
        return failed("sqrt", x, CalcError.INVALID_DOMAIN)
    if x == 0.0:
        stats = base_ops()
        stats["sqrt_newton_loops"] = 0
        return CalcResult("sqrt", x, 0.0, stats=stats)

    guard = LoopGuard("sqrt", config.max_iterations)
    stats = base_ops()
    # initial guess: a simple BCD shift right
    result = x / 10.0
    stats["divide"] += 1
    if result == 0.0:
        # x / 10 underflowed below the smallest subnormal
        result = x
    loops = 0
    guard.start()
    while guard.tick():
        last = result
        result = (last + x / last) / 2.0
        loops += 1
        stats["divide"] += 2
        stats["add_sub"] += 2
        if abs(last - result) <= config.sqrt_tolerance:
            break
        # past the first step the iterates only decrease; once they stop,
        # every digit is settled and the tolerance is below one ulp
        if loops > 1 and result >= last:
            result = last
            break

    stats["sqrt_newton_loops"] = loops
    logger.debug("sqrt(%r) converged in %d iterations", x, loops)
    return CalcResult("sqrt", x, result, converged=not guard.exhausted, stats=stats)
