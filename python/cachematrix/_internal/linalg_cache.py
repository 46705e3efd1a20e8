from __future__ import annotations

import logging
import time
from typing import Any

import numpy as np

from .cached_matrix import CachedMatrix
from .coercion import as_square_float_array
from .errors import SingularMatrixError

logger = logging.getLogger(__name__)


def invert(matrix: Any) -> np.ndarray:
    """Return the inverse of a square matrix.

    Delegates to ``numpy.linalg.inv`` (LU with partial pivoting). Raises
    DimensionError for non-square input and SingularMatrixError when the
    matrix has no finite inverse.
    """
    array = as_square_float_array(matrix)
    try:
        inv = np.linalg.inv(array)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(f"Matrix of shape {array.shape} is singular") from exc

    if not np.all(np.isfinite(inv)):
        raise SingularMatrixError(
            f"Matrix of shape {array.shape} is numerically singular (non-finite inverse)"
        )
    return inv


def solve_with_cache(container: CachedMatrix) -> Any:
    """Return the inverse of ``container``'s matrix, computing it at most once.

    On a cache miss the inverse is computed with :func:`invert` and stored on
    the container; later calls return that same object until the matrix is
    replaced. The cached array is read-only. Errors from :func:`invert`
    propagate and leave the cache empty.

    Not safe to call concurrently with ``replace_matrix`` on the same
    container.
    """
    inv = container.cached_inverse()
    if inv is not None:
        logger.debug("inverse cache hit (epoch=%d)", container.epoch)
        return inv

    start = time.perf_counter()
    inv = invert(container.current_matrix())
    # Every cache hit hands out this same array.
    inv.flags.writeable = False
    container.store_inverse(inv)
    logger.debug(
        "inverse cache miss (epoch=%d), inverted in %.6fs",
        container.epoch,
        time.perf_counter() - start,
    )
    return container.cached_inverse()


def uniform_random_matrix(n: int, *, seed: int | None = None) -> np.ndarray:
    """Return an ``n x n`` float64 matrix with entries drawn from U[0, 1)."""
    n = int(n)
    if n < 1:
        raise ValueError("Matrix size must be a positive integer.")
    rng = np.random.default_rng(seed)
    return rng.uniform(0.0, 1.0, size=(n, n))
