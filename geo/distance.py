"""
Purpose: Distance model used for ranking candidate drivers.
What it does:
Great-circle distance between two (lat, lon) pairs using the haversine
formula on a spherical Earth.
"""

from __future__ import annotations

import math
from typing import Tuple

LatLon = Tuple[float, float]

EARTH_RADIUS_KM = 6371.0


def haversine_km(origin: LatLon, destination: LatLon) -> float:
    """
    Distance in kilometres between two (lat, lon) coordinates.
    Symmetric and never negative.
    """
    lat1, lon1 = origin
    lat2, lon2 = destination

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # clamp against floating error pushing a just above 1 for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
