"""Tests for the weighted quick-union forest."""

import pytest

from site_percolation.percolation.union_find import WeightedQuickUnionUF


class TestConstruction:
    """Tests for initial state."""

    def test_singletons(self):
        """Every element starts as its own root."""
        uf = WeightedQuickUnionUF(5)

        assert all(uf.find(x) == x for x in range(5))
        assert all(uf.size[x] == 1 for x in range(5))

    def test_invalid_size(self):
        """Empty universes are rejected."""
        with pytest.raises(ValueError):
            WeightedQuickUnionUF(0)

    def test_find_out_of_range(self):
        """Elements outside [0, n) raise IndexError."""
        uf = WeightedQuickUnionUF(3)

        with pytest.raises(IndexError):
            uf.find(3)
        with pytest.raises(IndexError):
            uf.find(-1)


class TestUnion:
    """Tests for union and path compression."""

    def test_union_joins_roots(self):
        uf = WeightedQuickUnionUF(4)
        uf.union(0, 1)
        uf.union(2, 3)

        assert uf.find(0) == uf.find(1)
        assert uf.find(2) == uf.find(3)
        assert uf.find(1) != uf.find(2)

    def test_union_idempotent(self):
        """Re-joining the same component changes nothing."""
        uf = WeightedQuickUnionUF(3)
        root = uf.union(0, 1)

        assert uf.union(1, 0) == root
        assert uf.size[root] == 2
        assert uf.find(2) == 2

    def test_smaller_tree_hangs_under_larger(self):
        """Union by size keeps the root of the larger component."""
        uf = WeightedQuickUnionUF(5)
        uf.union(0, 1)
        uf.union(0, 2)
        big_root = uf.find(0)

        assert uf.union(3, 0) == big_root
        assert uf.find(3) == big_root
        assert uf.size[big_root] == 4

    def test_path_compression(self):
        """After find, every node on the walked path points at the root."""
        uf = WeightedQuickUnionUF(8)
        # Build a deep tree by merging equal-sized components
        uf.union(0, 1)
        uf.union(2, 3)
        uf.union(0, 2)
        uf.union(4, 5)
        uf.union(6, 7)
        uf.union(4, 6)
        uf.union(0, 4)
        root = uf.find(0)

        deepest = max(range(8), key=lambda x: _depth(uf, x))
        assert _depth(uf, deepest) > 1

        uf.find(deepest)
        assert _depth(uf, deepest) <= 1
        assert uf.find(deepest) == root


def _depth(uf, x):
    depth = 0
    while uf.parent[x] != x:
        x = uf.parent[x]
        depth += 1
    return depth
