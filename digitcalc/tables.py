"""Constant tables for the digit-by-digit algorithms.

A calculator ROM stores, for every "digit" position, a ratio that is cheap
to apply with a shift-and-add (2, 1.1, 1.01, ... or 1, 0.1, 0.01, ...) and
the transcendental value of that ratio. Table length decides how many
digits the algorithms can resolve.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import NamedTuple, Tuple

PI = 3.1415926535897932384626433832795028841971
TWO_PI = 2.0 * PI
LN10 = math.log(10.0)

# 1 + 10^-16 is 1.0 in double precision
MAX_TABLE_SIZE = 15


class DigitTable(NamedTuple):
    ratios: Tuple[float, ...]
    values: Tuple[float, ...]

    @property
    def size(self) -> int:
        return len(self.ratios)


def _check_size(size: int) -> None:
    if size < 1 or size > MAX_TABLE_SIZE:
        raise ValueError(f"table size must be in [1, {MAX_TABLE_SIZE}]")


@lru_cache(maxsize=None)
def log_table(size: int = 7) -> DigitTable:
    """Ratios 2, 1.1, 1.01, ... paired with ln(ratio)."""
    _check_size(size)
    ratios = (2.0,) + tuple(1.0 + 10.0**-k for k in range(1, size))
    return DigitTable(ratios, tuple(math.log(r) for r in ratios))


@lru_cache(maxsize=None)
def atan_table(size: int = 7) -> DigitTable:
    """Ratios 1, 0.1, 0.01, ... paired with atan(ratio)."""
    _check_size(size)
    ratios = tuple(10.0**-k for k in range(size))
    return DigitTable(ratios, tuple(math.atan(r) for r in ratios))
