from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional

from .calc import FUNCTIONS, evaluate
from .config import DEFAULT_CONFIG, CalcConfig
from .harness import TEST_VECTORS, compare, print_report, run_all
from .logging_config import setup_logging


def _print_func_stats(name: str, stats: Dict[str, int]) -> None:
    print(f"stats[{name}]:")
    for key, value in stats.items():
        print(f"  {key} = {value}")


def run_single(name: str, x: float, config: CalcConfig, check: bool = False, show_stats: bool = False) -> None:
    res = evaluate(name, x, config)
    if res.ok:
        print(f"{name:<4} DIGIT = {res.value:.16f} (x={x})")
    else:
        print(f"{name:<4} DIGIT = 0 [{res.error.value}] (x={x})")
    if not res.converged:
        print(f"{name:<4} warning: loop ceiling reached, result is degraded")
    if show_stats:
        print(f"digits[{name}] = {list(res.digits)}")
        _print_func_stats(name, res.stats)
    if check:
        row = compare(name, [x], config)[0]
        print(f"{name:<4} math  = {row.verif:.16f} | err = {row.error:.3e}")


def build_config(args: argparse.Namespace) -> CalcConfig:
    return DEFAULT_CONFIG.replace(
        log_table_size=args.log_table,
        exp_table_size=args.exp_table,
        trig_table_size=args.trig_table,
        max_iterations=args.max_iter,
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="digit-by-digit calculator functions (ln, exp, sqrt, tan, atan)")
    parser.add_argument("--func", choices=sorted(FUNCTIONS) + ["all"], default="all")
    parser.add_argument("--x", type=float, default=None, help="evaluate one input; without it the built-in test vectors run")
    parser.add_argument("--check", action="store_true", help="use math only for verification")
    parser.add_argument("--stats", action="store_true", help="print digit counters and operation counts")
    parser.add_argument("--log-table", type=int, default=DEFAULT_CONFIG.log_table_size, help="ln table size")
    parser.add_argument("--exp-table", type=int, default=DEFAULT_CONFIG.exp_table_size, help="exp table size")
    parser.add_argument("--trig-table", type=int, default=DEFAULT_CONFIG.trig_table_size, help="tan/atan table size")
    parser.add_argument("--max-iter", type=int, default=DEFAULT_CONFIG.max_iterations, help="ceiling for every convergence loop")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    parser.add_argument("--log-file", default=None, help="also write log records to this file")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)
    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))

    names = sorted(FUNCTIONS) if args.func == "all" else [args.func]
    if args.x is not None:
        for name in names:
            run_single(name, args.x, config, check=args.check, show_stats=args.stats)
    elif args.func == "all":
        run_all(config)
    else:
        print_report(f"{args.func.upper()}(x)", compare(args.func, TEST_VECTORS[args.func], config))


if __name__ == "__main__":
    main()
