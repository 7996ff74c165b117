"""Compare the digit algorithms against the math module.

The error column is always reference minus approximation, so its sign shows
which side the calculator lands on.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, NamedTuple, Sequence, Tuple

from .calc import FUNCTIONS, evaluate
from .config import DEFAULT_CONFIG, CalcConfig
from .tables import PI

TEST_VECTORS: Dict[str, Tuple[float, ...]] = {
    "ln": (0.00000001, 0.001, 1.0, 1.1, 4.4, 9.99, 10, 11, 12.345, 15.873, 25.2332, 1.234e34),
    "exp": (
        0, -1, 0.00000001, 0.001, 1.0, 1.1, 4.4, 9.99, 10, 11, 12.345, 15.873,
        25.2332, 87.2332, 1.234e-13, 9.999e-15, 230,
    ),
    "sqrt": (0, 54757, 125348, 0.5, 0.00035, 0.02, 1, 1.234e78),
    "tan": (0, 0.984736, 0.1, 0.5, 1.5, PI / 2, -1.5, 1.234e5),
    "atan": (0, 1, 20, -20, -12345e23, PI, PI / 2),
}

# inverse pairs: forward function, then the one that undoes it
SYMMETRY_PAIRS: Dict[str, Tuple[str, str]] = {
    "ln": ("ln", "exp"),
    "tan": ("tan", "atan"),
}


class Comparison(NamedTuple):
    x: float
    result: float
    verif: float
    error: float


def _reference(name: str, x: float) -> float:
    try:
        return FUNCTIONS[name].reference(x)
    except (ValueError, OverflowError):
        # math rejects what the calculator answers with 0
        return math.nan


def compare(name: str, xs: Iterable[float], config: CalcConfig = DEFAULT_CONFIG) -> List[Comparison]:
    rows = []
    for x in xs:
        x = float(x)
        result = evaluate(name, x, config).sentinel
        verif = _reference(name, x)
        rows.append(Comparison(x, result, verif, verif - result))
    return rows


def symmetry(name: str, xs: Iterable[float], config: CalcConfig = DEFAULT_CONFIG) -> List[Comparison]:
    """Round-trip each x through a function and its inverse."""
    if name not in SYMMETRY_PAIRS:
        raise ValueError(f"no inverse pair for: {name}")
    forward, inverse = SYMMETRY_PAIRS[name]
    rows = []
    for x in xs:
        x = float(x)
        result = evaluate(inverse, evaluate(forward, x, config).sentinel, config).sentinel
        mid = _reference(forward, x)
        verif = math.nan if math.isnan(mid) else _reference(inverse, mid)
        rows.append(Comparison(x, result, verif, verif - result))
    return rows


def format_row(row: Comparison) -> str:
    return f"x={row.x:.15g} result={row.result:.15g}  verif={row.verif:.15g} error={row.error:.15g}"


def print_report(title: str, rows: Sequence[Comparison]) -> None:
    print(f"\n----- {title} -----")
    for row in rows:
        print(format_row(row))


def run_all(config: CalcConfig = DEFAULT_CONFIG) -> None:
    for name in ("ln", "exp", "sqrt", "tan", "atan"):
        print_report(f"{name.upper()}(x)", compare(name, TEST_VECTORS[name], config))
    for name, (forward, inverse) in SYMMETRY_PAIRS.items():
        title = f"{forward.upper()}(x)/{inverse.upper()}(x) SYMMETRY"
        print_report(title, symmetry(name, TEST_VECTORS[name], config))
