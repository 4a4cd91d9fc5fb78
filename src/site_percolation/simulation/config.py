"""
Monte-Carlo run configuration.

The StatsConfig loads a YAML run definition describing the grid size, the
number of trials and where to write the per-trial thresholds.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional


class StatsConfig:
    """
    Loads and validates a Monte-Carlo run configuration YAML.

    Example:
        config = StatsConfig.from_yaml('config/stats_example.yaml')
        stats = config.build_stats()
        stats.run()
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'StatsConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(data)

    def _validate(self):
        """Validate required config sections."""
        if not isinstance(self._data, dict):
            raise ValueError("Run config must be a mapping")

        required_sections = ['run_name', 'grid', 'trials']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        for section in ['grid', 'trials']:
            if not isinstance(self._data[section], dict):
                raise ValueError(f"Config section '{section}' must be a mapping")
        output = self._data.get('output')
        if output is not None and not isinstance(output, dict):
            raise ValueError("Config section 'output' must be a mapping")

        if 'n' not in self._data['grid']:
            raise ValueError("Missing required config key: 'grid.n'")
        if 'count' not in self._data['trials']:
            raise ValueError("Missing required config key: 'trials.count'")

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def n(self) -> int:
        return int(self._data['grid']['n'])

    @property
    def trials(self) -> int:
        return int(self._data['trials']['count'])

    @property
    def seed(self) -> Optional[int]:
        seed = self._data['trials'].get('seed')
        return None if seed is None else int(seed)

    @property
    def confidence(self) -> float:
        return float(self._data['trials'].get('confidence', 0.95))

    @property
    def output_csv(self) -> Optional[Path]:
        csv = (self._data.get('output') or {}).get('csv')
        return Path(csv) if csv else None

    def build_stats(self):
        """Create a PercolationStats configured from this run definition."""
        from .stats import PercolationStats

        return PercolationStats(self.n, self.trials, seed=self.seed, confidence=self.confidence)
