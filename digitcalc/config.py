from __future__ import annotations

from dataclasses import dataclass, replace

from .tables import MAX_TABLE_SIZE


@dataclass(frozen=True)
class CalcConfig:
    """Tunable knobs of the digit algorithms.

    Table sizes trade precision for iterations: each extra entry resolves
    roughly one more decimal digit. `max_iterations` caps every convergence
    loop so non-finite input cannot spin forever.
    """

    log_table_size: int = 7
    exp_table_size: int = 7
    trig_table_size: int = 7
    max_iterations: int = 10000
    sqrt_tolerance: float = 1e-15
    exp_input_limit: float = 230.0

    def __post_init__(self) -> None:
        for name in ("log_table_size", "exp_table_size", "trig_table_size"):
            size = getattr(self, name)
            if size < 1 or size > MAX_TABLE_SIZE:
                raise ValueError(f"{name} must be in [1, {MAX_TABLE_SIZE}]")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")
        if self.sqrt_tolerance <= 0.0:
            raise ValueError("sqrt_tolerance must be > 0")

    def replace(self, **changes) -> "CalcConfig":
        return replace(self, **changes)


DEFAULT_CONFIG = CalcConfig()
