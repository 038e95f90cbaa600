"""Staged restart schedule of generation classes after a blackout.

Each class comes back online at a fixed minute offset from the blackout
start. The gates are a pure function of the minute index and are evaluated
afresh every minute.
"""

from dataclasses import dataclass

MINUTES_PER_DAY = 1440

WIND_START_MINUTE = 7
GEOTHERMAL_START_MINUTE = 61
THERMAL_START_MINUTE = 500
COAL_SHUTDOWN_MINUTE = 1000
BASELOAD_START_MINUTE = 1500

# Daylight window for solar, in minutes of each simulated day.
SOLAR_WINDOW = (500, 950)


@dataclass(frozen=True)
class AvailabilityGates:
    """Which asset classes may generate at a given minute.

    Attributes:
        minute: Minute index since blackout start (0-based).
        hydro: Hydroelectric plants (always available).
        wind: Wind farms.
        geothermal: Geothermal plants.
        solar: Solar farms, daylight window only.
        baseload: Nuclear plants.
        thermal: Combined-cycle and coal plants.
        coal: Coal plants within the thermal pass.
    """

    minute: int
    hydro: bool
    wind: bool
    geothermal: bool
    solar: bool
    baseload: bool
    thermal: bool
    coal: bool

    @classmethod
    def at_minute(cls, minute: int) -> "AvailabilityGates":
        """Evaluate every gate for a minute index."""
        minute_of_day = minute % MINUTES_PER_DAY
        return cls(
            minute=minute,
            hydro=True,
            wind=minute >= WIND_START_MINUTE,
            geothermal=minute >= GEOTHERMAL_START_MINUTE,
            solar=(
                minute >= SOLAR_WINDOW[0]
                and SOLAR_WINDOW[0] <= minute_of_day < SOLAR_WINDOW[1]
            ),
            baseload=minute >= BASELOAD_START_MINUTE,
            thermal=minute >= THERMAL_START_MINUTE,
            coal=minute < COAL_SHUTDOWN_MINUTE,
        )

    def renewable_order(self) -> list[str]:
        """Open renewable classes in merit order."""
        order = ["Hydroelectric"]
        if self.wind:
            order.append("Wind")
        if self.geothermal:
            order.append("Geothermal")
        if self.solar:
            order.append("Solar")
        return order
