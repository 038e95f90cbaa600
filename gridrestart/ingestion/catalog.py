"""Plant catalog reader.

Catalog files hold one plant per line::

    type,name,latitude,longitude,city,maxCapacityMW

Lines starting with ``#`` and blank lines are ignored. Malformed lines are
skipped with a warning so one bad row does not sink the whole catalog.
"""

import logging
from pathlib import Path

from gridrestart.domain.asset_types import asset_type_spec
from gridrestart.domain.models import GenerationAsset

logger = logging.getLogger(__name__)

PLANT_FIELDS = 6


def build_asset(
    code: str,
    name: str,
    latitude: float,
    longitude: float,
    city: str,
    max_capacity_mw: float,
    stability: float | None = None,
) -> GenerationAsset:
    """Create an asset with the fixed parameters of its class.

    Args:
        code: Class code ("nuclear", "coal", "hydro", ...), case-insensitive.
        name: Plant name.
        latitude: Latitude in degrees (-90 to 90).
        longitude: Longitude in degrees.
        city: Host city.
        max_capacity_mw: Rated capacity (MW).
        stability: Overrides the class stability coefficient.

    Returns:
        The validated GenerationAsset.

    Raises:
        ValidationError: If the plant breaks an asset invariant.
    """
    spec = asset_type_spec(code)
    return GenerationAsset(
        name=name,
        asset_type=spec.code,
        kind=spec.kind,
        fuel=spec.fuel,
        city=city,
        latitude=latitude,
        longitude=longitude,
        max_capacity_mw=max_capacity_mw,
        stability=spec.stability if stability is None else stability,
        restart_time=spec.restart_time,
        icon=spec.icon,
    )


def parse_plant_line(line: str) -> GenerationAsset | None:
    """Parse one catalog line.

    Returns:
        The asset, or None for comments and blank lines.

    Raises:
        ValueError: If the line is malformed or the plant is rejected.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    parts = [part.strip() for part in stripped.split(",", PLANT_FIELDS - 1)]
    if len(parts) < PLANT_FIELDS:
        raise ValueError(f"expected {PLANT_FIELDS} fields, got {len(parts)}")

    code, name, latitude, longitude, city, capacity = parts
    return build_asset(
        code=code,
        name=name,
        latitude=float(latitude),
        longitude=float(longitude),
        city=city,
        max_capacity_mw=float(capacity),
    )


def load_plants(path: str | Path) -> list[GenerationAsset]:
    """Read a plant catalog file.

    Args:
        path: Catalog file path.

    Returns:
        Assets in file order. On I/O failure, whatever was read so far.
    """
    assets: list[GenerationAsset] = []
    try:
        with Path(path).open(encoding="utf-8") as handle:
            for line_number, line in enumerate(handle, start=1):
                try:
                    asset = parse_plant_line(line)
                except ValueError as exc:
                    logger.warning("Skipping plant line %d in %s: %s", line_number, path, exc)
                    continue
                if asset is not None:
                    assets.append(asset)
    except OSError as exc:
        logger.error("Error reading plants file %s: %s", path, exc)

    logger.info("Loaded %d plants from %s", len(assets), path)
    return assets
