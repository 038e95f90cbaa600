"""Metrics module for blackout recovery KPIs."""

from gridrestart.metrics.kpi import RecoveryMetrics, generation_matrix

__all__ = [
    "RecoveryMetrics",
    "generation_matrix",
]
