"""cachematrix exception types.

Every error raised by the inversion path derives from CacheMatrixError, and
also from the builtin/NumPy type callers would otherwise catch.
"""

from __future__ import annotations

import numpy as np


class CacheMatrixError(Exception):
    """Base class for all cachematrix errors."""


class DimensionError(CacheMatrixError, ValueError):
    """Matrix is not a non-empty, two-dimensional square array."""


class SingularMatrixError(CacheMatrixError, np.linalg.LinAlgError):
    """Matrix has no (finite) inverse."""
