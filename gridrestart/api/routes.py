"""FastAPI routers for plant catalog and simulation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from gridrestart.api.schemas import (
    PlantResponse,
    RecoverySummaryResponse,
    SimulationRequest,
    SimulationResponse,
)
from gridrestart.api.services import simulation_service

router = APIRouter(prefix="/api/v1", tags=["simulations"])


@router.get("/plants", response_model=list[PlantResponse])
async def list_plants() -> list[PlantResponse]:
    """List the generation plants in the loaded catalog."""
    return simulation_service.list_plants()


@router.post("/simulations", response_model=SimulationResponse)
async def run_simulation(request: SimulationRequest) -> SimulationResponse:
    """Run a blackout recovery simulation.

    The run replaces the current simulation.
    """
    try:
        return simulation_service.run_simulation(request)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.get("/simulations/current", response_model=SimulationResponse)
async def get_current_simulation() -> SimulationResponse:
    """Get the per-minute results of the current simulation."""
    result = simulation_service.get_current()
    if result is None:
        raise HTTPException(status_code=404, detail="No simulation has been run")
    return result


@router.get("/simulations/current/summary", response_model=RecoverySummaryResponse)
async def get_current_summary() -> RecoverySummaryResponse:
    """Get recovery KPIs of the current simulation."""
    summary = simulation_service.get_current_summary()
    if summary is None:
        raise HTTPException(status_code=404, detail="No simulation has been run")
    return summary
