"""Append-only collector of per-minute dispatch results."""

from dataclasses import dataclass, field
from datetime import datetime

from gridrestart.domain.models import MinuteResult, SimulationResult

MINUTES_PER_HOUR = 60.0


@dataclass
class SimulationRecorder:
    """State tracking during a simulation run.

    Attributes:
        stability_threshold: Stability below which a generating minute
            counts as unstable.
        stable_from_minute: First minute checked for instability.
    """

    stability_threshold: float = 0.7
    stable_from_minute: int = 7
    results: list[MinuteResult] = field(default_factory=list)
    total_generated_mw: float = 0.0
    total_demand_mw: float = 0.0
    shortage_minutes: int = 0
    unstable_minutes: int = 0

    def record(self, result: MinuteResult) -> None:
        """Append one minute; minutes must arrive in order."""
        if self.results and result.minute != self.results[-1].minute + 1:
            raise ValueError(
                f"Minute {result.minute} recorded after minute {self.results[-1].minute}"
            )

        self.results.append(result)
        self.total_generated_mw += result.generated_mw
        self.total_demand_mw += result.expected_demand_mw

        if not result.meets_demand:
            self.shortage_minutes += 1
        if (
            result.minute >= self.stable_from_minute
            and result.generated_mw > 0
            and result.average_stability < self.stability_threshold
        ):
            self.unstable_minutes += 1

    def __len__(self) -> int:
        return len(self.results)

    def build(self, simulation_id: str, start_time: datetime) -> SimulationResult:
        """Freeze the recorded minutes into a SimulationResult."""
        end_time = self.results[-1].time if self.results else start_time
        return SimulationResult(
            simulation_id=simulation_id,
            start_time=start_time,
            end_time=end_time,
            minutes=list(self.results),
            total_generated_mwh=self.total_generated_mw / MINUTES_PER_HOUR,
            total_demand_mwh=self.total_demand_mw / MINUTES_PER_HOUR,
            shortage_minutes=self.shortage_minutes,
            unstable_minutes=self.unstable_minutes,
        )
