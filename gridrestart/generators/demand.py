"""Synthetic per-minute demand forecast generator.

Produces a one-day demand curve with:
- Night trough around 04:00
- Morning ramp and midday plateau
- Evening peak around 20:30
- Optional Gaussian noise, reproducible via numpy.random.Generator seeds
"""

from datetime import time

import numpy as np
from numpy.random import Generator

from gridrestart.domain.models import MINUTES_PER_DAY, DemandSeries


class DemandProfileGenerator:
    """Generates synthetic per-minute demand series.

    All demand values are in MW (megawatts).
    """

    def __init__(
        self,
        base_mw: float = 20000.0,
        peak_mw: float = 32000.0,
        noise_std_mw: float = 0.0,
        seed: int | None = None,
    ) -> None:
        """Initialize the demand generator.

        Args:
            base_mw: Night-time minimum demand (MW).
            peak_mw: Evening peak demand (MW).
            noise_std_mw: Standard deviation of per-minute noise (MW).
            seed: Random seed for reproducibility.

        Raises:
            ValueError: If the peak is below the base load.
        """
        if peak_mw < base_mw:
            raise ValueError("peak_mw must be greater than or equal to base_mw")
        self.base_mw = base_mw
        self.peak_mw = peak_mw
        self.noise_std_mw = noise_std_mw
        self._rng: Generator = np.random.default_rng(seed)

    def _shape(self, minutes: np.ndarray) -> np.ndarray:
        """Normalized daily load shape in [0, 1]."""
        hours = minutes / 60.0
        # Daily cycle with its trough at 04:00
        daily = 0.5 - 0.5 * np.cos(2 * np.pi * (hours - 4.0) / 24)
        # Evening peak on top of the daily cycle
        evening = np.exp(-(((hours - 20.5) / 2.0) ** 2))
        shape = 0.75 * daily + 0.35 * evening
        return shape / shape.max()

    def generate_day(self) -> DemandSeries:
        """Generate a 1440-minute demand series starting at midnight."""
        minutes = np.arange(MINUTES_PER_DAY, dtype=float)
        demand = self.base_mw + (self.peak_mw - self.base_mw) * self._shape(minutes)

        if self.noise_std_mw > 0:
            demand = demand + self._rng.normal(0, self.noise_std_mw, size=demand.shape)

        demand = np.clip(demand, 0, None)
        return DemandSeries.from_values(
            [round(float(v), 1) for v in demand], start=time(0, 0)
        )

    def generate_flat(self, demand_mw: float, minutes: int = MINUTES_PER_DAY) -> DemandSeries:
        """Generate a constant demand series."""
        return DemandSeries.from_values([demand_mw] * minutes)
