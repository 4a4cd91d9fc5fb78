"""
Site Percolation - incremental connectivity tracking on an N-by-N grid.

This package provides tools for:
- Opening sites on a square grid and tracking connected components
- Detecting percolation (top row connected to bottom row) without backwash
- Monte-Carlo estimation of the percolation threshold
"""

__version__ = "1.0.0"
