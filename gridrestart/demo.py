"""Demo module for the grid restart engine.

Runs a 36-hour blackout recovery on the packaged sample catalog and
demand forecast.

Usage:
    python -m gridrestart.demo --start 2025-04-28T12:33

Or in Python:
    from gridrestart.demo import run_blackout_demo
    results = run_blackout_demo()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from gridrestart.controllers import BlackoutDispatchController
from gridrestart.domain.models import SimulationConfig, SimulationResult
from gridrestart.ingestion import (
    SAMPLE_DEMAND_FILE,
    SAMPLE_PLANTS_FILE,
    load_demand,
    load_plants,
)
from gridrestart.metrics import RecoveryMetrics
from gridrestart.visualization import create_recovery_timeline


@dataclass
class DemoConfig:
    """Configuration for the demo run.

    Attributes:
        start_time: Wall-clock time of the blackout.
        horizon_minutes: Minutes to simulate.
        plants_path: Plant catalog file.
        demand_path: Demand forecast file.
    """

    start_time: datetime = datetime(2025, 4, 28, 12, 33)
    horizon_minutes: int = 2160
    plants_path: Path = field(default_factory=lambda: Path(str(SAMPLE_PLANTS_FILE)))
    demand_path: Path = field(default_factory=lambda: Path(str(SAMPLE_DEMAND_FILE)))


@dataclass
class DemoResults:
    """Results from running the demo.

    Attributes:
        result: Full simulation result.
        metrics: Recovery KPIs.
    """

    result: SimulationResult
    metrics: RecoveryMetrics

    def print_summary(self) -> None:
        """Print a summary of demo results to console."""
        metrics = self.metrics
        print("\n" + "=" * 60)
        print("Blackout Recovery Demo Results")
        print("=" * 60)
        print(f"   Simulation: {self.result.simulation_id}")
        print(f"   Window: {self.result.start_time} -> {self.result.end_time}")
        print(f"   Energy served: {metrics.total_generated_mwh:,.0f} MWh")
        print(f"   Energy demanded: {metrics.total_demand_mwh:,.0f} MWh")
        print(f"   Served fraction: {metrics.served_fraction:.1%}")
        print(f"   Shortage minutes: {metrics.shortage_minutes}")
        print(f"   Peak shortfall: {metrics.peak_shortfall_mw:,.0f} MW")
        print(f"   Mean stability: {metrics.mean_stability:.3f}")
        print(f"   Unstable minutes: {metrics.unstable_minutes}")
        if metrics.first_fully_served_minute is not None:
            print(f"   Demand first met at minute {metrics.first_fully_served_minute}")
        print("\n   Energy by class:")
        for label, energy in sorted(
            metrics.energy_by_type_mwh.items(), key=lambda item: -item[1]
        ):
            print(f"   - {label}: {energy:,.0f} MWh")
        print("=" * 60 + "\n")

    def plot_dashboard(self, save_path: str | Path | None = None) -> Any:
        """Generate and optionally save the recovery dashboard."""
        fig = create_recovery_timeline(
            self.result,
            title=f"Blackout Recovery from {self.result.start_time:%Y-%m-%d %H:%M}",
        )
        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches="tight")
            print(f"Dashboard saved to {save_path}")
        return fig


def run_blackout_demo(config: DemoConfig | None = None) -> DemoResults:
    """Run the blackout recovery demo.

    Args:
        config: Optional demo configuration. Uses defaults if not provided.

    Returns:
        DemoResults with the simulation and its KPIs.
    """
    if config is None:
        config = DemoConfig()

    print("\nRunning Blackout Recovery Demo...")
    print(f"   Blackout at: {config.start_time:%Y-%m-%d %H:%M}")
    print(f"   Horizon: {config.horizon_minutes} minutes")

    plants = load_plants(config.plants_path)
    demand = load_demand(config.demand_path)
    print(f"   Plants: {len(plants)}, demand points: {len(demand)}")

    controller = BlackoutDispatchController(
        plants,
        demand,
        SimulationConfig(horizon_minutes=config.horizon_minutes),
    )
    result = controller.run_simulation(config.start_time)
    metrics = RecoveryMetrics.from_results(result.minutes)

    print("Demo complete!")
    return DemoResults(result=result, metrics=metrics)


def main() -> None:
    """Main entry point for running the demo from command line."""
    import argparse

    parser = argparse.ArgumentParser(description="Grid Restart Engine Demo")
    parser.add_argument(
        "--start",
        type=datetime.fromisoformat,
        default=DemoConfig.start_time,
        help="Blackout start, ISO format (default: 2025-04-28T12:33)",
    )
    parser.add_argument(
        "--minutes",
        type=int,
        default=2160,
        help="Minutes to simulate (default: 2160)",
    )
    parser.add_argument("--plants", type=Path, default=None, help="Plant catalog CSV")
    parser.add_argument("--demand", type=Path, default=None, help="Demand forecast CSV")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output directory for the dashboard chart",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    config = DemoConfig(start_time=args.start, horizon_minutes=args.minutes)
    if args.plants:
        config.plants_path = args.plants
    if args.demand:
        config.demand_path = args.demand

    results = run_blackout_demo(config)
    results.print_summary()

    if args.output:
        output_dir = Path(args.output)
        output_dir.mkdir(parents=True, exist_ok=True)
        results.plot_dashboard(output_dir / "recovery.png")


if __name__ == "__main__":
    main()
