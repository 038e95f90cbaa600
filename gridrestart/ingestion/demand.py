"""Demand forecast reader.

Forecast files hold one minute per line::

    HH:MM,demandMW
"""

import logging
from datetime import time
from pathlib import Path

from gridrestart.domain.models import DemandPoint, DemandSeries

logger = logging.getLogger(__name__)


def parse_demand_line(line: str) -> tuple[time, float] | None:
    """Parse one forecast line.

    Returns:
        ``(time_of_day, demand_mw)``, or None for comments and blank lines.

    Raises:
        ValueError: If the line is malformed.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    parts = stripped.split(",", 1)
    if len(parts) != 2:
        raise ValueError("expected 'HH:MM,demand' pair")

    time_of_day = time.fromisoformat(parts[0].strip())
    demand_mw = float(parts[1].strip())
    if demand_mw < 0:
        raise ValueError(f"negative demand {demand_mw}")
    return time_of_day, demand_mw


def load_demand(path: str | Path) -> DemandSeries:
    """Read a per-minute demand forecast file.

    A time listed twice keeps its first position and its last value.

    Args:
        path: Forecast file path.

    Returns:
        DemandSeries in file order. On I/O failure, whatever was read so far.
    """
    demand: dict[time, float] = {}
    try:
        with Path(path).open(encoding="utf-8") as handle:
            for line_number, line in enumerate(handle, start=1):
                try:
                    parsed = parse_demand_line(line)
                except ValueError as exc:
                    logger.warning("Skipping demand line %d in %s: %s", line_number, path, exc)
                    continue
                if parsed is not None:
                    time_of_day, demand_mw = parsed
                    demand[time_of_day] = demand_mw
    except OSError as exc:
        logger.error("Error reading demand forecast file %s: %s", path, exc)

    logger.info("Loaded %d demand points from %s", len(demand), path)
    return DemandSeries(
        points=[
            DemandPoint(time_of_day=time_of_day, demand_mw=demand_mw)
            for time_of_day, demand_mw in demand.items()
        ]
    )
