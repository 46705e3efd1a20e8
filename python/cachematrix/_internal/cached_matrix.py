from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from . import formatting as _formatting
from .coercion import safe_shape
from .warnings import CacheMatrixConsistencyWarning


class CachedMatrix:
    """A matrix paired with a lazily computed, cached inverse.

    The cache has two states: empty (``cached_inverse() is None``) or holding
    the inverse of the current matrix. ``replace_matrix`` is the only way to
    swap the matrix and it always empties the cache. Shape and invertibility
    are not checked here; they are checked when the inverse is computed by
    :func:`cachematrix.solve_with_cache`.

    Instances are not thread-safe. Concurrent ``replace_matrix`` and
    ``solve_with_cache`` calls on one container can leave an inverse cached
    for the wrong matrix; callers sharing a container across threads must
    serialize access themselves (e.g. one ``threading.Lock`` per container).
    """

    __slots__ = ("_matrix", "_inverse", "_epoch")

    def __init__(self, matrix: Any) -> None:
        self._matrix = matrix
        self._inverse: Any | None = None
        self._epoch = 0

    def replace_matrix(self, matrix: Any) -> None:
        """Swap in a new matrix and drop the cached inverse."""
        self._matrix = matrix
        self._inverse = None
        self._epoch += 1

    def current_matrix(self) -> Any:
        """Return the stored matrix.

        NumPy arrays come back as non-writeable views, so in-place edits
        cannot desynchronize the matrix from its cached inverse.
        """
        matrix = self._matrix
        if isinstance(matrix, np.ndarray):
            view = matrix.view()
            view.flags.writeable = False
            return view
        return matrix

    def cached_inverse(self) -> Any | None:
        return self._inverse

    def store_inverse(self, value: Any) -> None:
        """Cache ``value`` as the inverse of the current matrix.

        The value is trusted. A shape mismatch with the current matrix is
        reported as a CacheMatrixConsistencyWarning but still stored.
        """
        matrix_shape = safe_shape(self._matrix)
        value_shape = safe_shape(value)
        if value is not None and matrix_shape is not None and value_shape is not None:
            if matrix_shape != value_shape:
                warnings.warn(
                    f"Storing an inverse of shape {value_shape} for a matrix of shape "
                    f"{matrix_shape}.",
                    CacheMatrixConsistencyWarning,
                    stacklevel=2,
                )
        self._inverse = value

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def epoch(self) -> int:
        """Number of times the matrix has been replaced."""
        return self._epoch

    @property
    def shape(self) -> tuple[int, int] | None:
        return safe_shape(self._matrix)

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        """NumPy conversion; arrays sharing the stored payload are read-only."""
        if copy:
            return np.array(self._matrix, dtype=dtype, copy=True)

        matrix = self._matrix
        if isinstance(matrix, np.ndarray) and (dtype is None or np.dtype(dtype) == matrix.dtype):
            return self.current_matrix()
        if copy is False:
            raise ValueError(
                f"Unable to avoid copy while creating an array from {self.__class__.__name__}."
            )
        return np.asarray(matrix, dtype=dtype)

    def __str__(self) -> str:
        return _formatting.cached_matrix_str(self)

    def __repr__(self) -> str:
        state = "cached" if self.has_inverse else "empty"
        return f"<{self.__class__.__name__} shape={self.shape} epoch={self._epoch} inverse={state}>"


def make_cache_matrix(matrix: Any) -> CachedMatrix:
    """Create a CachedMatrix holding ``matrix`` with an empty inverse cache."""
    return CachedMatrix(matrix)
