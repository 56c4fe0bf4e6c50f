"""Great-circle distance helpers."""

from __future__ import annotations

import math
from typing import Optional

EARTH_RADIUS_KM = 6371.0


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in kilometres between two WGS84 points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def within_radius(
    lat: float, lon: float, other_lat: Optional[float], other_lon: Optional[float], radius_km: float
) -> bool:
    """Whether ``(other_lat, other_lon)`` lies within ``radius_km``; missing coordinates never match."""
    if other_lat is None or other_lon is None:
        return False
    return haversine_distance(lat, lon, other_lat, other_lon) <= radius_km
