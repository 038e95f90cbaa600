"""Service layer for simulation operations.

This module handles the business logic for running simulations,
converting between domain models and API schemas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from gridrestart.api.schemas import (
    MinuteResultResponse,
    PlantResponse,
    RecoverySummaryResponse,
    SimulationRequest,
    SimulationResponse,
)
from gridrestart.controllers import BlackoutDispatchController
from gridrestart.domain.models import (
    DemandSeries,
    GenerationAsset,
    SimulationConfig,
    SimulationResult,
)
from gridrestart.ingestion import (
    SAMPLE_DEMAND_FILE,
    SAMPLE_PLANTS_FILE,
    load_demand,
    load_plants,
)
from gridrestart.metrics import RecoveryMetrics

logger = logging.getLogger(__name__)


@dataclass
class ServiceConfig:
    """Data sources for the simulation service.

    Attributes:
        plants_path: Plant catalog file.
        demand_path: Per-minute demand forecast file.
    """

    plants_path: Path = field(default_factory=lambda: Path(str(SAMPLE_PLANTS_FILE)))
    demand_path: Path = field(default_factory=lambda: Path(str(SAMPLE_DEMAND_FILE)))


class SimulationService:
    """Service for running blackout simulations.

    Only the current simulation is kept; starting a new run replaces it.
    """

    def __init__(self, config: ServiceConfig | None = None) -> None:
        """Initialize the service and load its data sources.

        Args:
            config: Data source configuration.
        """
        self.config = config or ServiceConfig()
        self.plants: list[GenerationAsset] = load_plants(self.config.plants_path)
        self.demand: DemandSeries = load_demand(self.config.demand_path)
        self._current: SimulationResult | None = None
        if not self.plants or len(self.demand) == 0:
            logger.warning(
                "Simulation service started with %d plants and %d demand points",
                len(self.plants),
                len(self.demand),
            )

    @property
    def current(self) -> SimulationResult | None:
        return self._current

    def reset(self) -> None:
        """Forget the current simulation."""
        self._current = None

    def list_plants(self) -> list[PlantResponse]:
        return [
            PlantResponse(
                name=plant.name,
                type=plant.type_label,
                city=plant.city,
                latitude=plant.latitude,
                longitude=plant.longitude,
                max_capacity_mw=plant.max_capacity_mw,
                icon=plant.icon,
            )
            for plant in self.plants
        ]

    def run_simulation(self, request: SimulationRequest) -> SimulationResponse:
        """Run a simulation and make it the current one."""
        controller = BlackoutDispatchController(
            self.plants,
            self.demand,
            SimulationConfig(horizon_minutes=request.horizon_minutes),
        )
        self._current = controller.run_simulation(request.start_time)
        return self._to_response(self._current)

    def get_current(self) -> SimulationResponse | None:
        if self._current is None:
            return None
        return self._to_response(self._current)

    def get_current_summary(self) -> RecoverySummaryResponse | None:
        if self._current is None:
            return None
        metrics = RecoveryMetrics.from_results(self._current.minutes)
        return RecoverySummaryResponse(
            simulation_id=self._current.simulation_id,
            **metrics.to_dict(),
        )

    @staticmethod
    def _to_response(result: SimulationResult) -> SimulationResponse:
        """Convert a domain result to its API schema."""
        return SimulationResponse(
            simulation_id=result.simulation_id,
            start_time=result.start_time,
            end_time=result.end_time,
            total_generated_mwh=result.total_generated_mwh,
            total_demand_mwh=result.total_demand_mwh,
            shortage_minutes=result.shortage_minutes,
            unstable_minutes=result.unstable_minutes,
            results=[
                MinuteResultResponse(
                    time=minute.time,
                    generated_mw=minute.generated_mw,
                    expected_demand_mw=minute.expected_demand_mw,
                    average_stability=minute.average_stability,
                    generated_by_type_mw=dict(minute.generated_by_type_mw),
                )
                for minute in result.minutes
            ],
        )


simulation_service = SimulationService()
