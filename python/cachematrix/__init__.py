"""Matrices that cache their inverse until the matrix is replaced."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _version

try:
    __version__ = _version("cachematrix")
except _PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "unknown"

from ._internal import formatting as _formatting
from ._internal.cached_matrix import CachedMatrix, make_cache_matrix
from ._internal.errors import CacheMatrixError, DimensionError, SingularMatrixError
from ._internal.linalg_cache import invert, solve_with_cache, uniform_random_matrix
from ._internal.warnings import (
    CacheMatrixWarning,
    CacheMatrixConsistencyWarning,
    CacheMatrixPerformanceWarning,
)


def configure(*, edge_items: int = 4) -> None:
    """Set how many leading/trailing rows and columns ``str()`` shows."""
    _formatting.configure(edge_items=edge_items)


__all__ = [
    "CachedMatrix",
    "make_cache_matrix",
    "solve_with_cache",
    "invert",
    "uniform_random_matrix",
    "configure",
    "CacheMatrixError",
    "DimensionError",
    "SingularMatrixError",
    "CacheMatrixWarning",
    "CacheMatrixConsistencyWarning",
    "CacheMatrixPerformanceWarning",
]
