"""Recovery KPIs for blackout dispatch simulations.

Key Metrics:
- Energy served vs demanded
- Shortage minutes and peak shortfall
- Stability of the generation mix
- Energy contributed by each generation class
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from gridrestart.domain.models import MinuteResult

MINUTES_PER_HOUR = 60.0


def generation_matrix(results: Sequence[MinuteResult]) -> tuple[list[str], np.ndarray]:
    """Stack per-class generation into a (classes x minutes) array.

    Class labels are ordered by first appearance. Minutes where a class is
    absent count as zero.

    Args:
        results: Per-minute simulation results.

    Returns:
        Tuple of (class labels, generation array in MW).
    """
    labels: list[str] = []
    for result in results:
        for label in result.generated_by_type_mw:
            if label not in labels:
                labels.append(label)

    matrix = np.zeros((len(labels), len(results)))
    for col, result in enumerate(results):
        for label, generated in result.generated_by_type_mw.items():
            matrix[labels.index(label), col] = generated

    return labels, matrix


@dataclass
class RecoveryMetrics:
    """Metrics summarizing a blackout recovery run.

    Attributes:
        total_generated_mwh: Energy generated over the run.
        total_demand_mwh: Energy demanded over the run.
        unmet_demand_mwh: Demanded energy that was not served.
        served_fraction: Generated over demanded energy.
        shortage_minutes: Minutes with unserved demand.
        peak_shortfall_mw: Largest unserved demand in a single minute.
        mean_stability: Average stability over minutes with generation.
        min_stability: Lowest stability over minutes with generation.
        unstable_minutes: Generating minutes below the stability threshold,
            warm-up excluded.
        first_fully_served_minute: First minute where demand was met.
        energy_by_type_mwh: Energy generated per class.
    """

    total_generated_mwh: float = 0.0
    total_demand_mwh: float = 0.0
    unmet_demand_mwh: float = 0.0
    served_fraction: float = 0.0
    shortage_minutes: int = 0
    peak_shortfall_mw: float = 0.0
    mean_stability: float = 0.0
    min_stability: float = 0.0
    unstable_minutes: int = 0
    first_fully_served_minute: int | None = None
    energy_by_type_mwh: dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_results(
        cls,
        results: Sequence[MinuteResult],
        stability_threshold: float = 0.7,
        warmup_minutes: int = 7,
    ) -> RecoveryMetrics:
        """Calculate recovery metrics from per-minute results.

        Args:
            results: Per-minute simulation results.
            stability_threshold: Stability below which a minute is unstable.
            warmup_minutes: Leading minutes excluded from instability counts.

        Returns:
            RecoveryMetrics with calculated values.
        """
        if not results:
            return cls()

        generated = np.array([r.generated_mw for r in results])
        demand = np.array([r.expected_demand_mw for r in results])
        stability = np.array([r.average_stability for r in results])
        minutes = np.array([r.minute for r in results])

        shortfall = np.clip(demand - generated, 0, None)
        total_generated = float(generated.sum()) / MINUTES_PER_HOUR
        total_demand = float(demand.sum()) / MINUTES_PER_HOUR

        generating = generated > 0
        unstable = generating & (stability < stability_threshold) & (
            minutes >= warmup_minutes
        )
        served = (shortfall < 0.1) & (demand > 0)
        served_indices = np.flatnonzero(served)

        labels, matrix = generation_matrix(results)
        energy_by_type = {
            label: float(row.sum()) / MINUTES_PER_HOUR
            for label, row in zip(labels, matrix, strict=True)
        }

        return cls(
            total_generated_mwh=total_generated,
            total_demand_mwh=total_demand,
            unmet_demand_mwh=float(shortfall.sum()) / MINUTES_PER_HOUR,
            served_fraction=total_generated / max(total_demand, 0.001),
            shortage_minutes=int((shortfall >= 0.1).sum()),
            peak_shortfall_mw=float(shortfall.max()),
            mean_stability=float(stability[generating].mean()) if generating.any() else 0.0,
            min_stability=float(stability[generating].min()) if generating.any() else 0.0,
            unstable_minutes=int(unstable.sum()),
            first_fully_served_minute=(
                int(minutes[served_indices[0]]) if served_indices.size else None
            ),
            energy_by_type_mwh=energy_by_type,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "total_generated_mwh": self.total_generated_mwh,
            "total_demand_mwh": self.total_demand_mwh,
            "unmet_demand_mwh": self.unmet_demand_mwh,
            "served_fraction": self.served_fraction,
            "shortage_minutes": self.shortage_minutes,
            "peak_shortfall_mw": self.peak_shortfall_mw,
            "mean_stability": self.mean_stability,
            "min_stability": self.min_stability,
            "unstable_minutes": self.unstable_minutes,
            "first_fully_served_minute": self.first_fully_served_minute,
            "energy_by_type_mwh": dict(self.energy_by_type_mwh),
        }
