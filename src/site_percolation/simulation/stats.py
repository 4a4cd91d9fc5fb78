"""
Monte-Carlo estimation of the site percolation threshold.

Each trial opens the sites of a fresh grid in random order until the system
percolates; the fraction of open sites at that point is one threshold sample.
Only the public Percolation API is used.
"""

import time
import numpy as np
import pandas as pd
from pathlib import Path
from typing import Any, Dict, Optional, Union
from scipy.stats import norm

from ..percolation import Percolation


class PercolationStats:
    """
    Repeated percolation experiments on an N-by-N grid.

    Example:
        stats = PercolationStats(200, 100, seed=42)
        stats.run()
        stats.mean()             # ~0.593
        stats.confidence_lo()
    """

    def __init__(self, n: int, trials: int, seed: Optional[int] = None,
                 confidence: float = 0.95):
        """
        Args:
            n: Grid side length
            trials: Number of independent experiments
            seed: Random seed for reproducibility
            confidence: Confidence level of the reported interval
        """
        if n <= 0:
            raise ValueError(f"Grid size must be > 0, got {n}")
        if trials <= 0:
            raise ValueError(f"Number of trials must be > 0, got {trials}")
        if not 0 < confidence < 1:
            raise ValueError(f"Confidence must be in (0, 1), got {confidence}")

        self.n = n
        self.trials = trials
        self.seed = seed
        self.confidence = confidence

        self.thresholds = None
        self.elapsed_seconds = None

    def run_trial(self, rng: np.random.Generator) -> float:
        """
        Run one experiment.

        Args:
            rng: Random generator used to pick the opening order

        Returns:
            Fraction of open sites when the grid first percolates
        """
        perc = Percolation(self.n)
        for site in rng.permutation(self.n * self.n):
            row, col = divmod(int(site), self.n)
            perc.open(row + 1, col + 1)
            if perc.percolates():
                break
        return perc.open_fraction()

    def run(self, verbose: bool = False) -> np.ndarray:
        """
        Run all trials.

        Args:
            verbose: Print progress every 10% of trials

        Returns:
            Array of shape (trials,) with the threshold of each trial
        """
        rng = np.random.default_rng(self.seed)
        thresholds = np.empty(self.trials, dtype=np.float64)
        report_every = max(1, self.trials // 10)

        start_time = time.perf_counter()
        for t in range(self.trials):
            thresholds[t] = self.run_trial(rng)
            if verbose and (t + 1) % report_every == 0:
                print(f"  Completed {t + 1}/{self.trials} trials")
        self.elapsed_seconds = time.perf_counter() - start_time

        self.thresholds = thresholds
        return thresholds

    def _require_results(self):
        if self.thresholds is None:
            raise ValueError("Run run() first to compute thresholds.")

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        self._require_results()
        return float(np.mean(self.thresholds))

    def stddev(self) -> float:
        """Sample standard deviation (NaN for a single trial)."""
        self._require_results()
        if self.trials < 2:
            return float('nan')
        return float(np.std(self.thresholds, ddof=1))

    def _half_width(self) -> float:
        z = norm.ppf((1 + self.confidence) / 2)
        return z * self.stddev() / np.sqrt(self.trials)

    def confidence_lo(self) -> float:
        """Low endpoint of the confidence interval."""
        return self.mean() - self._half_width()

    def confidence_hi(self) -> float:
        """High endpoint of the confidence interval."""
        return self.mean() + self._half_width()

    def summary(self) -> Dict[str, Any]:
        return {
            'n': self.n,
            'trials': self.trials,
            'mean': self.mean(),
            'stddev': self.stddev(),
            'confidence': self.confidence,
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
            'elapsed_seconds': self.elapsed_seconds,
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Per-trial thresholds as a DataFrame with columns [trial, threshold]."""
        self._require_results()
        return pd.DataFrame({
            'trial': np.arange(self.trials),
            'threshold': self.thresholds,
        })

    def save(self, filename: Union[str, Path]) -> Path:
        """
        Save per-trial thresholds to CSV.

        Args:
            filename: Path to output .csv file

        Returns:
            Path of the written file
        """
        filename = Path(filename)
        filename.parent.mkdir(parents=True, exist_ok=True)
        self.to_dataframe().to_csv(filename, index=False)
        return filename
