"""
Pairing Heap Command-Line Interface (CLI)

Subcommands:
- sort:  heap-sort values given on the command line
- bench: benchmark the heap operations and write a CSV report

Usage examples:
    python -m pairheap.cli sort 5 3 9 1
    python -m pairheap.cli sort --type str pear apple fig
    python -m pairheap.cli bench --path report.csv --base-input 50 --doublings 6
"""

import argparse
import logging
import sys

from . import benchmark
from .datastructures import heapsort

# Converters accepted by `sort --type`
VALUE_TYPES = {
    "int": int,
    "float": float,
    "str": str,
}


# -------------------------------------------------------------------
# Core command handlers
# -------------------------------------------------------------------

def cmd_sort(args):
    """Convert the given values and print them in non-decreasing order."""
    convert = VALUE_TYPES[args.type]
    try:
        values = [convert(v) for v in args.values]
    except ValueError as exc:
        args.parser.error(f"cannot parse value as {args.type}: {exc}")
    print(" ".join(str(v) for v in heapsort(values)))


def cmd_bench(args):
    """Run the benchmark suite and report where the CSV was written."""
    ops = [op.strip() for op in args.ops.split(",") if op.strip()] if args.ops else None
    try:
        rows = benchmark.run_benchmarks(
            args.path,
            base_input=args.base_input,
            doublings=args.doublings,
            iterations=args.iterations,
            operations=ops,
            seed=args.seed,
        )
    except ValueError as exc:
        args.parser.error(str(exc))
    print(f"Wrote {len(rows)} benchmark rows to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m pairheap.cli", description="Pairing heap CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- sorting ---
    s = sub.add_parser("sort", help="Heap-sort the given values")
    s.add_argument("values", nargs="*")
    s.add_argument("--type", choices=sorted(VALUE_TYPES), default="int")
    s.set_defaults(func=cmd_sort, parser=s)

    # --- benchmarks ---
    s = sub.add_parser("bench", help="Benchmark heap operations into a CSV report")
    s.add_argument("--path", default=benchmark.DEFAULT_OUTPUT_CSV)
    s.add_argument("--base-input", type=int, default=benchmark.DEFAULT_BASE_INPUT)
    s.add_argument("--doublings", type=int, default=benchmark.DEFAULT_DOUBLINGS)
    s.add_argument("--iterations", type=int, default=benchmark.DEFAULT_ITERATIONS)
    s.add_argument("--ops", help=f"Comma-separated subset of: {','.join(benchmark.OPERATIONS)}")
    s.add_argument("--seed", type=int, help="Seed for repeatable benchmark inputs")
    s.set_defaults(func=cmd_bench, parser=s)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m pairheap.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
