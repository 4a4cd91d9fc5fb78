"""
Weighted quick-union forest with path compression.

Backs the percolation grid: elements are linear site indices and the root
returned by ``find`` is the handle under which component-wide flags are stored.
"""

import numpy as np


class WeightedQuickUnionUF:
    """
    Disjoint-set forest over a fixed universe of ``n`` elements.

    Union is by size (smaller tree hangs under the larger one) and ``find``
    compresses the path it walks, so both operations are amortized near O(1).

    Example:
        uf = WeightedQuickUnionUF(4)
        uf.union(0, 1)
        uf.find(1)   # 0
    """

    def __init__(self, n: int):
        """
        Initialize n singleton components.

        Args:
            n: Number of elements (must be > 0)
        """
        if n <= 0:
            raise ValueError(f"Number of elements must be > 0, got {n}")

        self.n = n
        self.parent = np.arange(n, dtype=np.int64)
        self.size = np.ones(n, dtype=np.int64)

    def _validate(self, x: int):
        if x < 0 or x >= self.n:
            raise IndexError(f"Element {x} is not between 0 and {self.n - 1}")

    def find(self, x: int) -> int:
        """
        Return the root of x's component, compressing the path on the way.

        Args:
            x: Element index

        Returns:
            Root index
        """
        self._validate(x)
        parent = self.parent

        root = x
        while parent[root] != root:
            root = parent[root]

        # Point every node on the walked path straight at the root
        while parent[x] != root:
            parent[x], x = root, parent[x]

        return int(root)

    def union(self, x: int, y: int) -> int:
        """
        Merge the components of x and y.

        Args:
            x: Element index
            y: Element index

        Returns:
            Root of the merged component
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return root_x

        if self.size[root_x] < self.size[root_y]:
            root_x, root_y = root_y, root_x

        self.parent[root_y] = root_x
        self.size[root_x] += self.size[root_y]

        return root_x
