"""Exceptions raised by the percolation grid."""


class InvalidGridSizeError(ValueError):
    """Raised when a grid is constructed with N <= 0."""


class SiteOutOfRangeError(IndexError):
    """Raised when a row or column falls outside [1, N]."""
