"""Route guide value objects.

Coordinates are integers in units of 1e-7 degrees (E7). No range is
enforced on them.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    latitude: int = 0
    longitude: int = 0

    @property
    def key(self) -> str:
        """Exact-coordinate key used to group route notes."""
        return f"{self.latitude},{self.longitude}"


@dataclass(frozen=True)
class Rectangle:
    """Bounding box given by two opposite corners, in any order."""

    lo: Point
    hi: Point


@dataclass(frozen=True)
class Feature:
    location: Point
    # Empty means "no feature here"
    name: str = ""


@dataclass(frozen=True)
class RouteNote:
    location: Point
    message: str = ""


@dataclass(frozen=True)
class RouteSummary:
    point_count: int = 0
    feature_count: int = 0
    distance: int = 0
    elapsed_time: int = 0
