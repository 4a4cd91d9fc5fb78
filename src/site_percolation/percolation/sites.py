"""
Site status bits and 2D <-> 1D coordinate mapping.

Sites are addressed with 1-based (row, column) coordinates and stored in
flat arrays indexed by ``(i - 1) * n + (j - 1)``.
"""

from typing import Iterator, Tuple

from .errors import SiteOutOfRangeError

# Status bits. A root's entry holds the roll-up for its whole component.
OPEN_SITE = 0x01
CONNECTED_TOP = 0x02
CONNECTED_BOTTOM = 0x04

BOUNDARY_FLAGS = CONNECTED_TOP | CONNECTED_BOTTOM


def to_linear(i: int, j: int, n: int) -> int:
    """
    Map 1-based grid coordinates to a 0-based linear index.

    Args:
        i: Row, 1 <= i <= n
        j: Column, 1 <= j <= n
        n: Grid side length

    Returns:
        Linear index in [0, n*n)

    Raises:
        SiteOutOfRangeError: If i or j is outside [1, n]
    """
    if i <= 0 or i > n:
        raise SiteOutOfRangeError("Row index i out of range")
    if j <= 0 or j > n:
        raise SiteOutOfRangeError("Column index j out of range")

    return (i - 1) * n + (j - 1)


def neighbors(i: int, j: int, n: int) -> Iterator[Tuple[int, int]]:
    """Yield the in-bounds 4-directional neighbors of (i, j): up, down, left, right."""
    if i > 1:
        yield i - 1, j
    if i < n:
        yield i + 1, j
    if j > 1:
        yield i, j - 1
    if j < n:
        yield i, j + 1


def has_flag(status: int, flag: int) -> bool:
    return (int(status) & flag) == flag
