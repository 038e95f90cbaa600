"""Availability schedule, solar irradiance and demand profile generators."""

from gridrestart.generators.availability import AvailabilityGates
from gridrestart.generators.demand import DemandProfileGenerator
from gridrestart.generators.solar import minute_of_day, solar_efficiency

__all__ = [
    "AvailabilityGates",
    "DemandProfileGenerator",
    "minute_of_day",
    "solar_efficiency",
]
