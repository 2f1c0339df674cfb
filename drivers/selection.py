"""
Purpose: Business rules and distance math for choosing the absolute best driver.
What it does:
Accepts a pool of candidate drivers and a pickup location, filters out
unavailable drivers, and picks the closest one. Near-equal distances are
broken in favour of the driver that has been idle the longest.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from geo.distance import haversine_km
from .models import Driver

LatLon = Tuple[float, float]

# Distances closer than this (km) count as a tie.
DEFAULT_TIE_TOLERANCE_KM = 0.001

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class DriverMatch:
    """
    A scored candidate: who, how far from the pickup, and since when idle.
    """
    driver_id: int
    distance_km: float
    last_active_at: datetime


def filter_eligible_drivers(drivers: Iterable[Driver]) -> List[Driver]:
    """
    Returns only drivers who are currently available.
    """
    eligible = []

    for driver in drivers:
        if not driver.available:
            continue

        eligible.append(driver)

    return eligible


def outranks(candidate: DriverMatch, incumbent: DriverMatch, tie_tolerance_km: float = DEFAULT_TIE_TOLERANCE_KM) -> bool:
    """
    True if candidate should be preferred over incumbent.

    Closer wins, unless the two distances differ by less than the tolerance;
    then the older last activity wins. Driver id settles exact ties so the
    result never depends on input order.
    """
    if abs(candidate.distance_km - incumbent.distance_km) < tie_tolerance_km:
        if candidate.last_active_at != incumbent.last_active_at:
            return candidate.last_active_at < incumbent.last_active_at
        return candidate.driver_id < incumbent.driver_id

    return candidate.distance_km < incumbent.distance_km


def select_best_driver(
    candidates: Iterable[Driver],
    pickup_location: LatLon,
    tie_tolerance_km: float = DEFAULT_TIE_TOLERANCE_KM
) -> Optional[DriverMatch]:
    """
    Score every available candidate by great-circle distance to the pickup
    and return the single best match, or None if nobody is available.
    """
    eligible = filter_eligible_drivers(candidates)

    best: Optional[DriverMatch] = None

    # visit in id order so a chain of near-ties resolves the same way every time
    for driver in sorted(eligible, key=lambda current_driver: current_driver.id):
        match = DriverMatch(
            driver_id=driver.id,
            distance_km=haversine_km(pickup_location, driver.location),
            last_active_at=driver.last_active_at or _OLDEST,
        )
        if best is None or outranks(match, best, tie_tolerance_km):
            best = match

    return best
