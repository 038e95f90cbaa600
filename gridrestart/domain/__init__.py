"""Domain models for the grid restart engine."""

from gridrestart.domain.asset_types import (
    ASSET_TYPES,
    AssetKind,
    AssetTypeSpec,
    FuelType,
    asset_type_spec,
    normalize_type,
)
from gridrestart.domain.models import (
    DemandPoint,
    DemandSeries,
    GenerationAsset,
    MinuteResult,
    SimulationConfig,
    SimulationResult,
)

__all__ = [
    "ASSET_TYPES",
    "AssetKind",
    "AssetTypeSpec",
    "FuelType",
    "asset_type_spec",
    "normalize_type",
    "GenerationAsset",
    "DemandPoint",
    "DemandSeries",
    "MinuteResult",
    "SimulationConfig",
    "SimulationResult",
]
