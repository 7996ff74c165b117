from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class CalcError(str, Enum):
    INVALID_DOMAIN = "invalid_domain"
    OUT_OF_RANGE = "out_of_range"
    DEGENERATE = "degenerate"


class CalcDomainError(ValueError):
    def __init__(self, func: str, x: float, error: CalcError) -> None:
        super().__init__(f"{func}({x!r}): {error.value}")
        self.func = func
        self.x = x
        self.error = error


@dataclass(frozen=True)
class CalcResult:
    """Outcome of one digit-algorithm evaluation.

    `sentinel` is what a calculator would display: the value, or 0 when the
    input was rejected. `converged` is False when a loop hit the iteration
    ceiling and the value is only a best effort.
    """

    func: str
    x: float
    value: float
    error: Optional[CalcError] = None
    converged: bool = True
    digits: Tuple[int, ...] = ()
    stats: Dict[str, int] = field(default_factory=dict, compare=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def sentinel(self) -> float:
        return 0.0 if self.error is not None else self.value

    def unwrap(self) -> float:
        if self.error is not None:
            raise CalcDomainError(self.func, self.x, self.error)
        return self.value


def failed(
    func: str,
    x: float,
    error: CalcError,
    digits: Tuple[int, ...] = (),
    stats: Optional[Dict[str, int]] = None,
) -> CalcResult:
    logger.debug("%s(%r) rejected: %s", func, x, error.value)
    return CalcResult(func, x, 0.0, error=error, digits=digits, stats=stats if stats is not None else base_ops())


def base_ops() -> Dict[str, int]:
    return {"add_sub": 0, "multiply": 0, "divide": 0}


class LoopGuard:
    """Iteration ceiling for the convergence loops of one evaluation.

    Call `start()` before each loop and `tick()` once per pass; `tick()`
    turns False once the loop has run `limit` times.
    """

    def __init__(self, func: str, limit: int) -> None:
        self.func = func
        self.limit = limit
        self.exhausted = False
        self._count = 0

    def start(self) -> None:
        self._count = 0

    def tick(self) -> bool:
        self._count += 1
        if self._count <= self.limit:
            return True
        if not self.exhausted:
            logger.warning("%s: loop ceiling of %d iterations reached, result is degraded", self.func, self.limit)
        self.exhausted = True
        return False
