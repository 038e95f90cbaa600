"""FastAPI endpoints for the grid restart engine.

This module provides the REST API used by the map and chart front end.
"""

from gridrestart.api.main import app, create_app
from gridrestart.api.schemas import (
    MinuteResultResponse,
    PlantResponse,
    SimulationRequest,
    SimulationResponse,
)

__all__ = [
    "app",
    "create_app",
    "MinuteResultResponse",
    "PlantResponse",
    "SimulationRequest",
    "SimulationResponse",
]
