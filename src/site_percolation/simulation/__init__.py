"""Monte-Carlo threshold estimation built on the percolation grid."""

from .config import StatsConfig
from .stats import PercolationStats

__all__ = ['StatsConfig', 'PercolationStats']
