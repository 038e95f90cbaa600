"""Readers for plant catalogs and demand forecasts."""

from importlib.resources import files

from gridrestart.ingestion.catalog import build_asset, load_plants, parse_plant_line
from gridrestart.ingestion.demand import load_demand, parse_demand_line

SAMPLE_PLANTS_FILE = files("gridrestart") / "data" / "plants.csv"
SAMPLE_DEMAND_FILE = files("gridrestart") / "data" / "demand.csv"

__all__ = [
    "SAMPLE_DEMAND_FILE",
    "SAMPLE_PLANTS_FILE",
    "build_asset",
    "load_demand",
    "load_plants",
    "parse_demand_line",
    "parse_plant_line",
]
