"""Site percolation on a square grid, tracked with a weighted quick-union forest."""

from .errors import InvalidGridSizeError, SiteOutOfRangeError
from .grid_percolation import Percolation
from .union_find import WeightedQuickUnionUF

__all__ = ['Percolation', 'WeightedQuickUnionUF', 'InvalidGridSizeError', 'SiteOutOfRangeError']
