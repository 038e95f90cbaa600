"""Static lookup table of generation asset classes.

Maps the lowercase class codes used by plant catalogs to the fixed
parameters every asset of that class shares. Stability coefficients and
restart times are properties of the technology, not of the plant.
"""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


class AssetKind(str, Enum):
    """Behavioral variant of a generation asset."""

    BASELOAD = "baseload"
    THERMAL = "thermal"
    RENEWABLE = "renewable"


class FuelType(str, Enum):
    """Fuel sub-type of thermal assets."""

    COAL = "coal"
    FUEL_GAS = "fuel_gas"
    COMBINED_CYCLE = "combined_cycle"
    BIOMASS = "biomass"


@dataclass(frozen=True)
class AssetTypeSpec:
    """Fixed parameters of one asset class.

    Attributes:
        code: Lowercase class code as found in catalog files.
        label: Normalized human-readable label used in dispatch breakdowns.
        kind: Behavioral variant (baseload, thermal or renewable).
        stability: Stability coefficient shared by the class.
        restart_time: Time the class needs to restart after a blackout.
        icon: Presentation icon reference.
        fuel: Fuel sub-type, thermal classes only.
    """

    code: str
    label: str
    kind: AssetKind
    stability: float
    restart_time: timedelta
    icon: str
    fuel: FuelType | None = None


ASSET_TYPES: dict[str, AssetTypeSpec] = {
    spec.code: spec
    for spec in (
        AssetTypeSpec(
            "nuclear", "Nuclear", AssetKind.BASELOAD, 1.0, timedelta(days=1), "nuclear.png"
        ),
        AssetTypeSpec(
            "coal",
            "Coal",
            AssetKind.THERMAL,
            0.9,
            timedelta(hours=8),
            "coal.png",
            FuelType.COAL,
        ),
        AssetTypeSpec(
            "fuel_gas",
            "Fuel gas",
            AssetKind.THERMAL,
            0.6,
            timedelta(hours=4),
            "fuel_gas.png",
            FuelType.FUEL_GAS,
        ),
        AssetTypeSpec(
            "combined_cycle",
            "Combined cycle",
            AssetKind.THERMAL,
            0.7,
            timedelta(hours=2),
            "combined_cycle.png",
            FuelType.COMBINED_CYCLE,
        ),
        AssetTypeSpec(
            "biomass",
            "Biomass",
            AssetKind.THERMAL,
            0.5,
            timedelta(hours=3),
            "biomass.png",
            FuelType.BIOMASS,
        ),
        AssetTypeSpec(
            "hydro",
            "Hydroelectric",
            AssetKind.RENEWABLE,
            0.8,
            timedelta(minutes=3),
            "hydro.png",
        ),
        AssetTypeSpec(
            "solar", "Solar", AssetKind.RENEWABLE, 0.1, timedelta(minutes=6), "solar.png"
        ),
        AssetTypeSpec(
            "wind", "Wind", AssetKind.RENEWABLE, 0.2, timedelta(minutes=6), "wind.png"
        ),
        AssetTypeSpec(
            "geothermal",
            "Geothermal",
            AssetKind.RENEWABLE,
            0.7,
            timedelta(hours=1),
            "geothermal.png",
        ),
    )
}


def normalize_type(code: str) -> str:
    """Return the human-readable label for a class code.

    Unknown codes are capitalized ("tidal" -> "Tidal").
    """
    spec = ASSET_TYPES.get(code.strip().lower())
    if spec is not None:
        return spec.label
    code = code.strip()
    return code[:1].upper() + code[1:].lower()


def asset_type_spec(code: str) -> AssetTypeSpec:
    """Look up the class parameters for a code.

    Codes missing from the table fall back to a generic renewable class.
    """
    key = code.strip().lower()
    spec = ASSET_TYPES.get(key)
    if spec is not None:
        return spec
    return AssetTypeSpec(
        code=key,
        label=normalize_type(key),
        kind=AssetKind.RENEWABLE,
        stability=0.7,
        restart_time=timedelta(minutes=6),
        icon="default.png",
    )
