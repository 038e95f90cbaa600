"""Dispatch controller, stability scoring and result recording."""

from gridrestart.controllers.dispatch import (
    STABILITY_THRESHOLD,
    BlackoutDispatchController,
    MinuteDispatchState,
)
from gridrestart.controllers.recorder import SimulationRecorder
from gridrestart.controllers.stability import StabilityTable

__all__ = [
    "STABILITY_THRESHOLD",
    "BlackoutDispatchController",
    "MinuteDispatchState",
    "SimulationRecorder",
    "StabilityTable",
]
