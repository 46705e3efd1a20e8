"""cachematrix warning categories.

These exist so users can filter/suppress cachematrix warnings without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class CacheMatrixWarning(UserWarning):
    """Base warning category for all cachematrix user-facing warnings."""


class CacheMatrixConsistencyWarning(CacheMatrixWarning):
    """A stored inverse does not look like it belongs to the current matrix."""


class CacheMatrixPerformanceWarning(CacheMatrixWarning):
    """Warnings about caching not paying off (e.g., soft timing checks)."""
