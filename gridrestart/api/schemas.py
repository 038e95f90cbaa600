"""Pydantic schemas for API request/response models.

Response field names follow the JSON contract consumed by the map and
chart front end (``generatedMW``, ``generatedByTypeMW``, ...).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Request Schemas
# =============================================================================


class SimulationRequest(BaseModel):
    """Parameters of a blackout simulation run."""

    model_config = ConfigDict(extra="forbid")

    start_time: datetime = Field(description="Wall-clock time of the blackout")
    horizon_minutes: int = Field(
        default=2160,
        ge=1,
        le=10080,
        description="Number of minutes to simulate",
    )


# =============================================================================
# Response Schemas
# =============================================================================


class PlantResponse(BaseModel):
    """A generation plant from the catalog."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: str
    city: str
    latitude: float
    longitude: float
    max_capacity_mw: float = Field(alias="maxCapacityMW")
    icon: str


class MinuteResultResponse(BaseModel):
    """Dispatch outcome for one simulated minute."""

    model_config = ConfigDict(populate_by_name=True)

    time: datetime
    generated_mw: float = Field(alias="generatedMW")
    expected_demand_mw: float = Field(alias="expectedDemandMW")
    average_stability: float = Field(alias="averageStability")
    generated_by_type_mw: dict[str, float] = Field(
        default_factory=dict, alias="generatedByTypeMW"
    )


class SimulationResponse(BaseModel):
    """Complete simulation run."""

    simulation_id: str
    start_time: datetime
    end_time: datetime
    total_generated_mwh: float
    total_demand_mwh: float
    shortage_minutes: int
    unstable_minutes: int
    results: list[MinuteResultResponse] = Field(default_factory=list)


class RecoverySummaryResponse(BaseModel):
    """Recovery KPIs of a simulation run."""

    simulation_id: str
    total_generated_mwh: float
    total_demand_mwh: float
    unmet_demand_mwh: float
    served_fraction: float
    shortage_minutes: int
    peak_shortfall_mw: float
    mean_stability: float
    min_stability: float
    unstable_minutes: int
    first_fully_served_minute: int | None = None
    energy_by_type_mwh: dict[str, float] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: datetime
    plants_loaded: int
    demand_points_loaded: int
