"""
Site percolation on an N-by-N grid.

Sites are opened one at a time and connectivity between open sites is tracked
with a weighted quick-union forest. Instead of wiring virtual top and bottom
nodes into the forest, every component root carries two flags (connected to
the top row, connected to the bottom row). The flags are OR-ed into the
current root after every open, so ``is_full`` only reports sites that really
reach the top row and never suffers from backwash once the grid percolates.
"""

import numpy as np

from .errors import InvalidGridSizeError
from .sites import (
    OPEN_SITE, CONNECTED_TOP, CONNECTED_BOTTOM, BOUNDARY_FLAGS,
    to_linear, neighbors, has_flag,
)
from .union_find import WeightedQuickUnionUF


class Percolation:
    """
    N-by-N grid of sites, all blocked at construction.

    Example:
        perc = Percolation(3)
        perc.open(1, 1)
        perc.open(2, 1)
        perc.open(3, 1)
        perc.percolates()   # True
    """

    def __init__(self, n: int):
        """
        Create an N-by-N grid with every site blocked.

        Args:
            n: Grid side length (must be > 0)
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
            raise InvalidGridSizeError("N must be > 0")

        self._n = int(n)
        self._uf = WeightedQuickUnionUF(self._n * self._n)
        self._status = np.zeros(self._n * self._n, dtype=np.uint8)
        self._n_open = 0
        self._percolated = False

    @property
    def n(self) -> int:
        return self._n

    def open(self, i: int, j: int) -> None:
        """
        Open site (i, j) if it is not open already.

        Args:
            i: Row, 1-based
            j: Column, 1-based
        """
        site = to_linear(i, j, self._n)
        status = self._status

        if has_flag(status[site], OPEN_SITE):
            return

        flags = OPEN_SITE
        if i == 1:
            flags |= CONNECTED_TOP
        if i == self._n:
            flags |= CONNECTED_BOTTOM
        status[site] = flags
        self._n_open += 1

        # Pull the boundary flags of each open neighbor's component into the
        # new site before joining it
        for ni, nj in neighbors(i, j, self._n):
            other = to_linear(ni, nj, self._n)
            if not has_flag(status[other], OPEN_SITE):
                continue
            root = self._uf.find(other)
            status[site] |= status[root] & BOUNDARY_FLAGS
            self._uf.union(site, other)

        # Union may have picked a different root; it must absorb the new flags
        root = self._uf.find(site)
        status[root] |= status[site] & BOUNDARY_FLAGS

        if not self._percolated and has_flag(status[root], BOUNDARY_FLAGS):
            self._percolated = True

    def is_open(self, i: int, j: int) -> bool:
        """Is site (i, j) open?"""
        return has_flag(self._status[to_linear(i, j, self._n)], OPEN_SITE)

    def is_full(self, i: int, j: int) -> bool:
        """
        Is site (i, j) open and connected to the top row through open sites?

        Only the flags of the component root are consulted.
        """
        site = to_linear(i, j, self._n)
        if not has_flag(self._status[site], OPEN_SITE):
            return False

        return has_flag(self._status[self._uf.find(site)], CONNECTED_TOP)

    def percolates(self) -> bool:
        """Does the system percolate?"""
        return self._percolated

    def number_of_open_sites(self) -> int:
        return self._n_open

    def open_fraction(self) -> float:
        """Fraction of the N*N sites that are open."""
        return self._n_open / (self._n * self._n)
