"""Matplotlib plots for blackout recovery runs.

- RecoveryTimelineVisualizer: generation mix and stability over time
"""

from gridrestart.visualization.timeline import (
    RecoveryTimelineVisualizer,
    TimelinePlotConfig,
    create_recovery_timeline,
)

__all__ = [
    "RecoveryTimelineVisualizer",
    "TimelinePlotConfig",
    "create_recovery_timeline",
]
