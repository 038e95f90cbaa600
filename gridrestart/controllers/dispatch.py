"""Merit-order dispatch controller for blackout recovery.

For every minute after the blackout the controller:
1. Dispatches renewables in merit order (hydro, wind, geothermal, solar)
2. Dispatches nuclear baseload, then combined-cycle and coal plants
3. Scores the resulting mix by generation-weighted stability
4. While the score is below 0.7, curtails the least stable renewables in
   12.5 MW steps and backfills the freed demand with firm plants

Classes come online following the staged restart schedule in
:mod:`gridrestart.generators.availability`.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from uuid import uuid4

from gridrestart.controllers.recorder import SimulationRecorder
from gridrestart.controllers.stability import StabilityTable
from gridrestart.domain.models import (
    AssetKind,
    DemandSeries,
    FuelType,
    GenerationAsset,
    MinuteResult,
    SimulationConfig,
    SimulationResult,
)
from gridrestart.generators.availability import AvailabilityGates
from gridrestart.generators.solar import solar_efficiency

logger = logging.getLogger(__name__)

# Instrument and communication lag right after the blackout.
WARMUP_MINUTES = 4
# Hydro is reported, at zero output, until this minute.
HYDRO_SYNC_END_MINUTE = 7

STABILITY_THRESHOLD = 0.7
CURTAILMENT_STEP_MW = 12.5
NEGLIGIBLE_MW = 0.1

# Output ceilings between coal shutdown and nuclear restart.
CAP_WINDOW = (1000, 1500)
WIND_CAP_MW = 1232.5
COMBINED_CYCLE_CAP_MW = 6119.5

HYDRO = "Hydroelectric"
WIND = "Wind"
COMBINED_CYCLE = "Combined cycle"

THERMAL_DISPATCH_FUELS = (FuelType.COMBINED_CYCLE, FuelType.COAL)


@dataclass
class MinuteDispatchState:
    """Running dispatch totals for a single minute.

    Attributes:
        expected_demand_mw: Demand to serve this minute.
        total_generated_mw: Generation dispatched so far.
        generated_by_type_mw: Generation per class label, in dispatch order.
        dispatched_by_asset_mw: Generation per asset index.
    """

    expected_demand_mw: float
    total_generated_mw: float = 0.0
    generated_by_type_mw: dict[str, float] = field(default_factory=dict)
    dispatched_by_asset_mw: dict[int, float] = field(default_factory=dict)

    @property
    def remaining_demand_mw(self) -> float:
        return self.expected_demand_mw - self.total_generated_mw

    def add(self, index: int, label: str, generated_mw: float) -> None:
        self.generated_by_type_mw[label] = (
            self.generated_by_type_mw.get(label, 0.0) + generated_mw
        )
        self.dispatched_by_asset_mw[index] = (
            self.dispatched_by_asset_mw.get(index, 0.0) + generated_mw
        )
        self.total_generated_mw += generated_mw

    def cap(self, label: str, ceiling_mw: float) -> None:
        """Clamp a class total, removing the excess from the running total."""
        current = self.generated_by_type_mw.get(label)
        if current is not None and current > ceiling_mw:
            self.total_generated_mw -= current - ceiling_mw
            self.generated_by_type_mw[label] = ceiling_mw

    def curtail(self, label: str, step_mw: float) -> None:
        """Reduce a class total by one step (or whatever is left)."""
        current = self.generated_by_type_mw.get(label, 0.0)
        decrement = min(step_mw, current)
        self.generated_by_type_mw[label] = current - decrement
        self.total_generated_mw -= decrement


class BlackoutDispatchController:
    """Minute-by-minute dispatch of a generation fleet after a blackout.

    Strategy:
    1. Renewables first, in fixed merit order, as their gates open
    2. Nuclear baseload once restarted
    3. Combined-cycle and coal plants (coal only until its shutdown)
    4. Stability correction: curtail unstable renewables, backfill with
       firm plants

    The controller holds no state between minutes; each minute is computed
    from the asset list, the demand series and the minute index alone.
    """

    def __init__(
        self,
        assets: Sequence[GenerationAsset],
        demand: DemandSeries | Sequence[float],
        config: SimulationConfig | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            assets: Generation fleet, in catalog order.
            demand: Per-minute demand forecast, repeated cyclically.
            config: Run parameters.
        """
        self.assets = list(assets)
        self.demand = (
            demand if isinstance(demand, DemandSeries) else DemandSeries.from_values(demand)
        )
        self.config = config or SimulationConfig()
        self.stability = StabilityTable.from_assets(self.assets)

        indexed = list(enumerate(self.assets))
        self._renewables_by_label: dict[str, list[tuple[int, GenerationAsset]]] = {}
        for index, asset in indexed:
            if asset.kind is AssetKind.RENEWABLE:
                self._renewables_by_label.setdefault(asset.type_label, []).append(
                    (index, asset)
                )
        self._baseload = [
            (index, asset) for index, asset in indexed if asset.kind is AssetKind.BASELOAD
        ]
        self._thermal = [
            (index, asset)
            for index, asset in indexed
            if asset.kind is AssetKind.THERMAL and asset.fuel in THERMAL_DISPATCH_FUELS
        ]
        self._baseload_labels = {asset.type_label for _, asset in self._baseload}

    # -------------------------------------------------------------------------
    # Merit-order passes
    # -------------------------------------------------------------------------

    @staticmethod
    def _offer(
        state: MinuteDispatchState,
        index: int,
        asset: GenerationAsset,
        efficiency: float = 1.0,
    ) -> float:
        """Generation an asset adds this minute, net of what it already gave."""
        already = state.dispatched_by_asset_mw.get(index, 0.0)
        generated = asset.generate(state.remaining_demand_mw + already, efficiency)
        return max(generated - already, 0.0)

    def _dispatch_renewables(
        self,
        state: MinuteDispatchState,
        gates: AvailabilityGates,
        solar_eff: float,
    ) -> None:
        for label in gates.renewable_order():
            for index, asset in self._renewables_by_label.get(label, []):
                # Hydro is always offered, even with demand already met
                if state.remaining_demand_mw <= 0 and label != HYDRO:
                    break
                efficiency = solar_eff if asset.is_solar else 1.0
                generated = self._offer(state, index, asset, efficiency)
                if generated > 0:
                    state.add(index, label, generated)

    def _dispatch_baseload(self, state: MinuteDispatchState) -> None:
        for index, asset in self._baseload:
            if state.remaining_demand_mw <= 0:
                break
            generated = self._offer(state, index, asset)
            if generated > 0:
                state.add(index, asset.type_label, generated)

    def _dispatch_thermal(
        self, state: MinuteDispatchState, gates: AvailabilityGates
    ) -> None:
        for index, asset in self._thermal:
            if not gates.coal and asset.fuel is FuelType.COAL:
                continue
            if state.remaining_demand_mw <= 0:
                break
            generated = self._offer(state, index, asset)
            if generated > 0:
                state.add(index, asset.type_label, generated)

    # -------------------------------------------------------------------------
    # Stability correction
    # -------------------------------------------------------------------------

    def _correct_stability(
        self,
        state: MinuteDispatchState,
        gates: AvailabilityGates,
        stability: float,
        in_cap_window: bool,
    ) -> float:
        """Curtail unstable renewables, then backfill with firm plants.

        Returns:
            Weighted stability after correction.
        """
        curtailable = sorted(
            (
                label
                for label in state.generated_by_type_mw
                if label in self._renewables_by_label
            ),
            key=self.stability.coefficient,
        )

        for label in curtailable:
            while (
                stability < STABILITY_THRESHOLD
                and state.generated_by_type_mw[label] > 0
            ):
                state.curtail(label, CURTAILMENT_STEP_MW)
                stability = self.stability.weighted_average(state.generated_by_type_mw)
            if stability >= STABILITY_THRESHOLD:
                break

        if stability < STABILITY_THRESHOLD:
            if gates.baseload:
                self._dispatch_baseload(state)
            if gates.thermal:
                self._dispatch_thermal(state, gates)
                if in_cap_window:
                    state.cap(COMBINED_CYCLE, COMBINED_CYCLE_CAP_MW)

        stability = self.stability.weighted_average(state.generated_by_type_mw)
        if stability < STABILITY_THRESHOLD:
            logger.debug(
                "Minute %d: stability %.3f still below %.1f after correction",
                gates.minute,
                stability,
                STABILITY_THRESHOLD,
            )
        return stability

    def _filter_breakdown(
        self, state: MinuteDispatchState, gates: AvailabilityGates
    ) -> dict[str, float]:
        breakdown = {
            label: generated
            for label, generated in state.generated_by_type_mw.items()
            if abs(generated) >= NEGLIGIBLE_MW
        }
        # Nuclear never shows up before its restart, not even as a zero
        if not gates.baseload:
            for label in self._baseload_labels:
                breakdown.pop(label, None)
        return breakdown

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def dispatch(self, start_time: datetime, minute: int) -> MinuteResult:
        """Dispatch the fleet for a single minute.

        Args:
            start_time: Wall-clock time of the blackout.
            minute: Minutes elapsed since the blackout (0-based).

        Returns:
            MinuteResult with totals, stability and per-class breakdown.

        Raises:
            ValueError: If the minute index is negative.
        """
        if minute < 0:
            raise ValueError("minute must be non-negative")

        timestamp = start_time + timedelta(minutes=minute)
        expected_demand = self.demand.demand_at(minute)

        if minute < HYDRO_SYNC_END_MINUTE:
            breakdown = {} if minute < WARMUP_MINUTES else {HYDRO: 0.0}
            return MinuteResult(
                time=timestamp,
                minute=minute,
                generated_mw=0.0,
                expected_demand_mw=expected_demand,
                average_stability=0.0,
                generated_by_type_mw=breakdown,
            )

        gates = AvailabilityGates.at_minute(minute)
        state = MinuteDispatchState(expected_demand_mw=expected_demand)
        in_cap_window = CAP_WINDOW[0] <= minute < CAP_WINDOW[1]

        self._dispatch_renewables(state, gates, solar_efficiency(start_time, minute))
        if in_cap_window:
            state.cap(WIND, WIND_CAP_MW)

        if gates.baseload:
            self._dispatch_baseload(state)
        if gates.thermal:
            self._dispatch_thermal(state, gates)
        if in_cap_window:
            state.cap(COMBINED_CYCLE, COMBINED_CYCLE_CAP_MW)

        stability = self.stability.weighted_average(state.generated_by_type_mw)
        if stability < STABILITY_THRESHOLD and state.total_generated_mw > 0:
            stability = self._correct_stability(state, gates, stability, in_cap_window)

        return MinuteResult(
            time=timestamp,
            minute=minute,
            generated_mw=max(state.total_generated_mw, 0.0),
            expected_demand_mw=expected_demand,
            average_stability=stability,
            generated_by_type_mw=self._filter_breakdown(state, gates),
        )

    def run_simulation(self, start_time: datetime) -> SimulationResult:
        """Run the full recovery simulation.

        Args:
            start_time: Wall-clock time of the blackout.

        Returns:
            SimulationResult with one MinuteResult per simulated minute.
        """
        if not self.assets:
            logger.warning("Running simulation without generation assets")
        if len(self.demand) == 0:
            logger.warning("Running simulation with an empty demand series")

        logger.info(
            "Starting blackout simulation at %s: %d assets, %d demand points, %d minutes",
            start_time.isoformat(),
            len(self.assets),
            len(self.demand),
            self.config.horizon_minutes,
        )

        recorder = SimulationRecorder(
            stability_threshold=STABILITY_THRESHOLD,
            stable_from_minute=HYDRO_SYNC_END_MINUTE,
        )
        for minute in range(self.config.horizon_minutes):
            recorder.record(self.dispatch(start_time, minute))

        result = recorder.build(f"blackout_{uuid4().hex[:8]}", start_time)
        logger.info(
            "Simulation %s finished: %.1f of %.1f MWh served, %d shortage minutes",
            result.simulation_id,
            result.total_generated_mwh,
            result.total_demand_mwh,
            result.shortage_minutes,
        )
        return result
