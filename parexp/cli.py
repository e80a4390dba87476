"""Command that approximates e^A by a Taylor series, split among workers."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Sequence

from .matrix import Matrix
from .taylor import block_taylor_sum, strided_taylor_sum, taylor_sum

SMALL_TERMS = 5000
BLOCK_TERMS = 100_000_000

INTEGER_MATRIX = Matrix([[1, -1, -1], [1, 1, 0], [3, 0, 1]])
FRACTION_MATRIX = Matrix([[0.1, 0.4, 0.2], [0.3, 0.0, 0.5], [0.6, 0.2, 0.1]])


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _run_serial(n_terms: int) -> str:
    a = INTEGER_MATRIX
    started = time.perf_counter()
    result = taylor_sum(a, n_terms)
    elapsed = time.perf_counter() - started
    return (
        f"Matrix size: {a.size}x{a.size}\n"
        f"Number of terms: {n_terms} (+ Identity)\n"
        + a.format("A (Initial)")
        + "Calculation finished.\n"
        + f"Execution time: {elapsed:f} seconds\n"
        + result.format("e^A (Result)")
    )


def _run_strided(n_terms: int, workers: int) -> str:
    a = INTEGER_MATRIX
    started = time.perf_counter()
    result = strided_taylor_sum(a, workers, n_terms)
    elapsed = time.perf_counter() - started
    return (
        f"Matrix size: {a.size}x{a.size}\n"
        f"Number of terms: {n_terms} (+ Identity)\n"
        f"Number of processors: {workers}\n"
        + a.format("A (Initial)")
        + "Calculation finished.\n"
        + f"Execution time: {elapsed:f} seconds\n"
        + result.format("e^A (Result)")
    )


def _run_block(n_terms: int, workers: int) -> str:
    a = FRACTION_MATRIX
    started = time.perf_counter()
    result = block_taylor_sum(a, workers, n_terms)
    elapsed = time.perf_counter() - started
    return (
        a.format_plain("Matrix A")
        + result.format_plain("Result e^A (Taylor approximation)")
        + f"Time taken: {elapsed:f} seconds\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Compute e^A with the chosen method and print the report."""
    parser = argparse.ArgumentParser(
        prog="parexp",
        description="Approximate the matrix exponential e^A by its Taylor series.",
    )
    parser.add_argument(
        "--method",
        choices=("serial", "strided", "block"),
        default="serial",
        help="serial sum, strided split among workers, or contiguous blocks per worker",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=1,
        help="number of workers the terms are divided among (default 1)",
    )
    parser.add_argument(
        "--terms",
        type=_non_negative_int,
        default=None,
        help=f"number of series terms (default {SMALL_TERMS}, or {BLOCK_TERMS} for block)",
    )
    args = parser.parse_args(argv)

    if args.method == "block":
        n_terms = BLOCK_TERMS if args.terms is None else args.terms
        report = _run_block(n_terms, args.workers)
    elif args.method == "strided":
        n_terms = SMALL_TERMS if args.terms is None else args.terms
        report = _run_strided(n_terms, args.workers)
    else:
        n_terms = SMALL_TERMS if args.terms is None else args.terms
        report = _run_serial(n_terms)

    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())