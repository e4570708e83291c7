"""Pure geometry helpers over E7 coordinates."""
from __future__ import annotations

import math

from .entity import Point, Rectangle

COORD_FACTOR = 1e7
EARTH_RADIUS_METERS = 6371000


def in_range(point: Point, rect: Rectangle) -> bool:
    """Inclusive containment test; the rectangle corners are normalized first."""
    left = min(rect.lo.longitude, rect.hi.longitude)
    right = max(rect.lo.longitude, rect.hi.longitude)
    top = max(rect.lo.latitude, rect.hi.latitude)
    bottom = min(rect.lo.latitude, rect.hi.latitude)

    return left <= point.longitude <= right and bottom <= point.latitude <= top


def _to_radians(e7: int) -> float:
    return math.radians(e7 / COORD_FACTOR)


def haversine(p1: Point, p2: Point) -> int:
    """Great-circle distance in whole meters, truncated toward zero."""
    lat1 = _to_radians(p1.latitude)
    lat2 = _to_radians(p2.latitude)
    lon1 = _to_radians(p1.longitude)
    lon2 = _to_radians(p2.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    a = min(a, 1.0)  # rounding can push antipodal points just past 1
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return int(EARTH_RADIUS_METERS * c)
