"""Test fixtures for reproducible blackout scenarios.

Provides small fleets whose dispatch can be worked out by hand:
- Hydro only
- Wind, geothermal and nuclear
"""

from collections.abc import Callable
from datetime import datetime

import pytest

from gridrestart.domain.models import DemandSeries, GenerationAsset
from gridrestart.ingestion import build_asset

# =============================================================================
# Time Fixtures
# =============================================================================


@pytest.fixture
def midnight() -> datetime:
    """Blackout at midnight, so minute offsets equal minutes of day."""
    return datetime(2025, 4, 28, 0, 0)


# =============================================================================
# Asset Fixtures
# =============================================================================


def _make_asset(
    code: str,
    capacity_mw: float,
    name: str | None = None,
    stability: float | None = None,
) -> GenerationAsset:
    """Build an asset at a fixed location."""
    return build_asset(
        code=code,
        name=name or f"{code} {capacity_mw:g}",
        latitude=40.0,
        longitude=-3.7,
        city="Madrid",
        max_capacity_mw=capacity_mw,
        stability=stability,
    )


@pytest.fixture
def asset_factory() -> Callable[..., GenerationAsset]:
    """Factory for assets at a fixed location."""
    return _make_asset


@pytest.fixture
def hydro_plant() -> GenerationAsset:
    """500 MW hydro plant with perfect stability."""
    return _make_asset("hydro", 500.0, name="Presa", stability=1.0)


@pytest.fixture
def mixed_fleet() -> list[GenerationAsset]:
    """Wind, geothermal and nuclear, with renewables at 0.2 stability."""
    return [
        _make_asset("wind", 600.0, name="Eolico"),
        _make_asset("geothermal", 400.0, name="Volcan", stability=0.2),
        _make_asset("nuclear", 1200.0, name="Atomica"),
    ]


# =============================================================================
# Demand Fixtures
# =============================================================================


@pytest.fixture
def flat_demand_300() -> DemandSeries:
    """Constant 300 MW demand over one day."""
    return DemandSeries.from_values([300.0] * 1440)


@pytest.fixture
def flat_demand_1000() -> DemandSeries:
    """Constant 1000 MW demand over one day."""
    return DemandSeries.from_values([1000.0] * 1440)
