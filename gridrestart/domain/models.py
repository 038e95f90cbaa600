"""Core domain models for the grid restart engine.

All models use Pydantic with strict validation. Units:
- Power: MW (megawatts)
- Energy: MWh (megawatt-hours)
- Time: one-minute timesteps counted from the blackout start
"""

import math
from collections.abc import Sequence
from datetime import datetime, time, timedelta
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gridrestart.domain.asset_types import AssetKind, FuelType, normalize_type

# =============================================================================
# Type Aliases with Validation
# =============================================================================

PowerMW = Annotated[float, Field(ge=0, description="Power in megawatts (MW)")]
EnergyMWh = Annotated[float, Field(ge=0, description="Energy in megawatt-hours (MWh)")]
Stability = Annotated[
    float, Field(ge=0, le=1, description="Stability coefficient (0-1)")
]

# Coal plants run derated while the grid is being rebuilt.
COAL_DERATE_FACTOR = 0.68

# Solar farms switch whole blocks of panels in and out.
SOLAR_STEP_MW = 12.5

MINUTES_PER_DAY = 1440


# =============================================================================
# Generation Assets
# =============================================================================


class GenerationAsset(BaseModel):
    """A single generation unit.

    The ``kind`` tag selects the generation behavior; thermal assets also
    carry a ``fuel``. Assets are immutable: the per-minute solar efficiency
    is passed to :meth:`generate` instead of being stored on the asset.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    asset_type: str = Field(description="Lowercase class code, e.g. 'hydro'")
    kind: AssetKind
    fuel: FuelType | None = None
    city: str = ""
    latitude: Annotated[float, Field(ge=-90, le=90)]
    longitude: float
    max_capacity_mw: Annotated[float, Field(gt=0, description="Rated capacity (MW)")]
    stability: Stability
    availability: timedelta = timedelta(0)
    restart_time: timedelta = timedelta(0)
    icon: str = ""

    @model_validator(mode="after")
    def _check_fuel(self) -> "GenerationAsset":
        if self.kind is AssetKind.THERMAL and self.fuel is None:
            raise ValueError("Thermal assets require a fuel type")
        if self.kind is not AssetKind.THERMAL and self.fuel is not None:
            raise ValueError("Only thermal assets carry a fuel type")
        return self

    @property
    def type_label(self) -> str:
        """Normalized class label ("Hydroelectric", "Combined cycle", ...)."""
        return normalize_type(self.asset_type)

    @property
    def is_solar(self) -> bool:
        return self.kind is AssetKind.RENEWABLE and self.asset_type.lower() == "solar"

    def available_capacity_mw(self, efficiency: float = 1.0) -> float:
        """Power the asset can offer this minute, before demand capping.

        Args:
            efficiency: Resource multiplier for renewables (0-1). Ignored for
                baseload and thermal assets.

        Returns:
            Offered power in MW.
        """
        if self.kind is AssetKind.RENEWABLE:
            return self.max_capacity_mw * max(efficiency, 0.0)
        if self.fuel is FuelType.COAL:
            return self.max_capacity_mw * COAL_DERATE_FACTOR
        return self.max_capacity_mw

    def generate(self, remaining_demand_mw: float, efficiency: float = 1.0) -> float:
        """Power produced against the remaining demand.

        Output never exceeds the remaining demand and is never negative.
        Solar output is rounded to the nearest 12.5 MW step.

        Args:
            remaining_demand_mw: Demand still unserved this minute.
            efficiency: Resource multiplier for renewables (0-1).

        Returns:
            Generated power in MW.
        """
        if remaining_demand_mw <= 0:
            return 0.0

        generated = min(self.available_capacity_mw(efficiency), remaining_demand_mw)
        if self.is_solar:
            steps = math.floor(generated / SOLAR_STEP_MW + 0.5)
            generated = min(steps * SOLAR_STEP_MW, remaining_demand_mw)

        return max(generated, 0.0)


# =============================================================================
# Demand
# =============================================================================


class DemandPoint(BaseModel):
    """Forecast demand for one minute of the day."""

    model_config = ConfigDict(frozen=True)

    time_of_day: time
    demand_mw: PowerMW


class DemandSeries(BaseModel):
    """Per-minute demand forecast, indexed cyclically by the engine.

    A one-day series repeats across a multi-day run.
    """

    model_config = ConfigDict(frozen=True)

    points: list[DemandPoint] = Field(default_factory=list)

    @classmethod
    def from_values(
        cls, values: Sequence[float], start: time = time(0, 0)
    ) -> "DemandSeries":
        """Build a series from plain MW values, one per minute from ``start``."""
        origin = datetime.combine(datetime.min.date(), start)
        return cls(
            points=[
                DemandPoint(
                    time_of_day=(origin + timedelta(minutes=i)).time(),
                    demand_mw=value,
                )
                for i, value in enumerate(values)
            ]
        )

    @property
    def values(self) -> list[float]:
        return [p.demand_mw for p in self.points]

    def __len__(self) -> int:
        return len(self.points)

    def demand_at(self, minute: int) -> float:
        """Expected demand at a minute offset (``minute mod len``).

        An empty series has no demand.
        """
        if not self.points:
            return 0.0
        return self.points[minute % len(self.points)].demand_mw


# =============================================================================
# Simulation Results
# =============================================================================


class MinuteResult(BaseModel):
    """Dispatch outcome for one simulated minute."""

    model_config = ConfigDict(frozen=True)

    time: datetime
    minute: Annotated[int, Field(ge=0, description="Minutes since blackout start")]
    generated_mw: PowerMW
    expected_demand_mw: PowerMW
    average_stability: Stability
    generated_by_type_mw: dict[str, float] = Field(default_factory=dict)

    @property
    def shortfall_mw(self) -> float:
        """Demand left unserved this minute."""
        return max(0.0, self.expected_demand_mw - self.generated_mw)

    @property
    def meets_demand(self) -> bool:
        return self.shortfall_mw < 0.1


class SimulationConfig(BaseModel):
    """Run parameters for a blackout recovery simulation."""

    model_config = ConfigDict(frozen=True)

    horizon_minutes: Annotated[int, Field(gt=0)] = 2160  # 36 hours


class SimulationResult(BaseModel):
    """Aggregated results from a complete simulation run."""

    model_config = ConfigDict(frozen=True)

    simulation_id: str
    start_time: datetime
    end_time: datetime
    minutes: list[MinuteResult]

    # Aggregated KPIs
    total_generated_mwh: EnergyMWh
    total_demand_mwh: EnergyMWh
    shortage_minutes: int = 0
    unstable_minutes: int = 0

    @property
    def unmet_demand_mwh(self) -> float:
        return max(0.0, self.total_demand_mwh - self.total_generated_mwh)

    @property
    def served_fraction(self) -> float:
        """Fraction of demanded energy that was generated."""
        if self.total_demand_mwh == 0:
            return 1.0
        return self.total_generated_mwh / self.total_demand_mwh

    @property
    def has_shortage(self) -> bool:
        return self.shortage_minutes > 0
