from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np

from .errors import DimensionError

_LAPACK_DTYPES = (
    np.dtype(np.float32),
    np.dtype(np.float64),
    np.dtype(np.complex64),
    np.dtype(np.complex128),
)


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def safe_shape(obj: Any) -> tuple[int, int] | None:
    """Return a 2D shape for ``obj`` without converting it, or None."""
    try:
        shape = getattr(obj, "shape", None)
        if isinstance(shape, tuple) and len(shape) == 2:
            return int(shape[0]), int(shape[1])
    except (TypeError, ValueError):
        pass
    if is_sequence_like(obj) and obj and all(is_sequence_like(row) for row in obj):
        cols = {len(row) for row in obj}
        if len(cols) == 1:
            return len(obj), cols.pop()
    return None


def as_square_float_array(candidate: Any) -> np.ndarray:
    """Validate ``candidate`` for inversion and return it as a 2D float array.

    Integer and boolean inputs are promoted to float64; complex inputs stay
    complex. Raises DimensionError for anything that is not a non-empty
    square matrix, and TypeError for data that is not numeric.
    """
    try:
        array = np.asarray(candidate)
    except ValueError as exc:
        # Ragged nested sequences.
        raise TypeError(
            "Matrix data must be provided as a rectangular nested sequence or a NumPy array."
        ) from exc

    if array.dtype == object or not (
        np.issubdtype(array.dtype, np.number) or np.issubdtype(array.dtype, np.bool_)
    ):
        raise TypeError(f"Matrix entries must be numeric, got dtype {array.dtype}.")

    if array.ndim != 2:
        raise DimensionError(f"Matrix input must be 2D, got {array.ndim}D.")
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(
            f"Matrix input must be square (rows == columns), got {rows}x{cols}."
        )
    if rows == 0:
        raise DimensionError("Matrix data must not be empty.")

    if array.dtype not in _LAPACK_DTYPES:
        # LAPACK only handles single/double precision.
        if np.issubdtype(array.dtype, np.complexfloating):
            array = array.astype(np.complex128)
        else:
            array = array.astype(np.float64)
    return array
