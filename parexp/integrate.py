"""Midpoint-rule integration of cot(x) / (ln(1+sin x) * sin(1+sin x))."""

from __future__ import annotations

import argparse
import math
import sys
import time
from typing import Callable, Sequence

DEFAULT_START = 1e-6
DEFAULT_END = math.pi - 1e-6
DEFAULT_STEPS = 1_000_000

_EDGE = 1e-12
_TINY = 1e-100


def integrand(x: float) -> float:
    """Evaluate the integrand, returning 0.0 at the interval ends and at singular points."""
    if x <= _EDGE or x >= math.pi - _EDGE:
        return 0.0

    sin_x = math.sin(x)
    if abs(sin_x) < _EDGE:
        return 0.0

    cot_x = math.cos(x) / sin_x
    shifted = 1.0 + sin_x
    if shifted <= _EDGE:
        return 0.0

    denominator = math.log(shifted) * math.sin(shifted)
    if abs(denominator) < _TINY:
        return 0.0
    return cot_x / denominator


def midpoint_integrate(
    func: Callable[[float], float], a: float, b: float, n_steps: int
) -> float:
    """Approximate the integral of func over [a, b] with the midpoint rule."""
    if n_steps < 1:
        raise ValueError("n_steps must be at least 1")
    delta = (b - a) / n_steps
    return sum(func(a + (i + 0.5) * delta) * delta for i in range(n_steps))


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Integrate the function over (0, pi) and report the result."""
    parser = argparse.ArgumentParser(
        prog="parexp-integrate",
        description="Integrate cot(x) / (ln(1+sin(x)) * sin(1+sin(x))) by the midpoint rule.",
    )
    parser.add_argument(
        "--steps",
        type=_positive_int,
        default=DEFAULT_STEPS,
        help=f"number of subintervals (default {DEFAULT_STEPS})",
    )
    args = parser.parse_args(argv)

    a, b, n_steps = DEFAULT_START, DEFAULT_END, args.steps
    delta = (b - a) / n_steps

    out = sys.stdout
    out.write("Integrating f(x) = cot(x) / (ln(1+sin(x)) * sin(1+sin(x)))\n")
    out.write(f"Interval: [{a:g}, {b:g}]\n")
    out.write(f"Number of steps: {n_steps}\n")
    out.write(f"Delta x: {delta:g}\n")

    started = time.perf_counter()
    total = midpoint_integrate(integrand, a, b, n_steps)
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    out.write(f"Integral result: {total:.15f}\n")
    out.write(f"Integration time: {elapsed_ms:.15f} ms\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())