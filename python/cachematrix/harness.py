"""Diagnostic harness: check inverse caching is correct and actually saves time.

Run:
  - `python -m cachematrix.harness` (or the `cachematrix-harness` script)
  - `python -m cachematrix.harness --size 500 --soft-timing`

Exits non-zero when a correctness check fails, or when a cached solve is not
faster than the first solve (unless --soft-timing is given).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
import warnings
from typing import Sequence, TextIO

import numpy as np

from ._internal.cached_matrix import make_cache_matrix
from ._internal.linalg_cache import solve_with_cache, uniform_random_matrix
from ._internal.warnings import CacheMatrixPerformanceWarning

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 2000
DEFAULT_ITERATIONS = 4
SIZE_ENV_VAR = "CACHEMATRIX_HARNESS_SIZE"


class HarnessCheckError(AssertionError):
    """A harness correctness or timing check failed."""


def check_correctness() -> None:
    """Invert a small matrix, replace it, and check both inverses."""
    m = np.array([[1.0, 3.0], [2.0, 4.0]])
    expected = np.linalg.inv(m)
    c = make_cache_matrix(m)
    solved = solve_with_cache(c)
    if not np.allclose(solved, expected):
        raise HarnessCheckError(f"inverse mismatch: got {solved!r}, expected {expected!r}")

    m_new = np.array([[2.0, 4.0], [3.0, 5.0]])
    expected_new = np.linalg.inv(m_new)
    c.replace_matrix(m_new)
    if c.cached_inverse() is not None:
        raise HarnessCheckError("replace_matrix did not clear the cached inverse")
    solved = solve_with_cache(c)
    if not np.allclose(solved, expected_new):
        raise HarnessCheckError(
            f"inverse after replace mismatch: got {solved!r}, expected {expected_new!r}"
        )


def time_cached_solves(
    size: int,
    iterations: int = DEFAULT_ITERATIONS,
    *,
    seed: int | None = None,
    out: TextIO | None = None,
) -> list[float]:
    """Time ``iterations`` consecutive solves on one random ``size x size`` matrix."""
    if iterations < 2:
        raise ValueError("iterations must be at least 2 to compare cached solves")
    stream = sys.stdout if out is None else out

    c = make_cache_matrix(uniform_random_matrix(size, seed=seed))
    elapsed: list[float] = []
    for i in range(1, iterations + 1):
        start = time.perf_counter()
        inverse = solve_with_cache(c)
        t = time.perf_counter() - start

        # Sanity check
        inverse = solve_with_cache(c)
        if inverse.shape[1] != size:
            raise HarnessCheckError(f"inverse has {inverse.shape[1]} columns, expected {size}")
        print(f"Iteration #{i} seconds: {t:.6f}", file=stream)
        elapsed.append(t)
    return elapsed


def check_timings(elapsed: Sequence[float], *, soft: bool = False) -> bool:
    """Check the first (uncached) solve was slower than every cached one."""
    first, rest = elapsed[0], elapsed[1:]
    if first > max(rest):
        return True

    message = (
        f"first solve took {first:.6f}s, not slower than the slowest cached solve "
        f"({max(rest):.6f}s)"
    )
    if soft:
        warnings.warn(message, CacheMatrixPerformanceWarning, stacklevel=2)
        return False
    raise HarnessCheckError(message)


def _default_size() -> int:
    env = os.environ.get(SIZE_ENV_VAR)
    if env:
        try:
            return int(env)
        except ValueError:
            logger.warning("ignoring non-integer %s=%r", SIZE_ENV_VAR, env)
    return DEFAULT_SIZE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check cachematrix inverse caching")
    parser.add_argument(
        "--size",
        type=int,
        default=_default_size(),
        help=f"Matrix size for the timing check (default: ${SIZE_ENV_VAR} or {DEFAULT_SIZE})",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help="Number of timed solves (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random matrix")
    parser.add_argument(
        "--soft-timing",
        action="store_true",
        help="Warn instead of failing when cached solves are not faster",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    try:
        check_correctness()
        logger.info("correctness checks passed")
        elapsed = time_cached_solves(args.size, args.iterations, seed=args.seed)
        check_timings(elapsed, soft=args.soft_timing)
    except (HarnessCheckError, ValueError) as exc:
        print(f"FAILED: {exc}", file=sys.stderr)
        return 1

    print("All checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
