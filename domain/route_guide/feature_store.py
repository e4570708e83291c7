"""Immutable, load-once collection of features."""
from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .entity import Feature, Point, Rectangle
from .geometry import in_range


class FeatureStore:
    """Ordered, read-only sequence of features.

    Built once at startup and never mutated afterwards, so it can be read
    from any number of concurrent calls without locking. Duplicate entries
    are kept as-is.
    """

    __slots__ = ("_features",)

    def __init__(self, features: Iterable[Feature] = ()) -> None:
        self._features: tuple[Feature, ...] = tuple(features)

    def __len__(self) -> int:
        return len(self._features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self._features)

    def lookup(self, point: Point) -> Optional[Feature]:
        """First feature, in store order, located exactly at ``point``."""
        for feature in self._features:
            if feature.location == point:
                return feature
        return None

    def matches(self, point: Point) -> list[Feature]:
        """Every feature located exactly at ``point``, duplicates included."""
        return [f for f in self._features if f.location == point]

    def range_query(self, rect: Rectangle) -> Iterator[Feature]:
        """Lazily yield, in store order, the features inside ``rect``."""
        return (f for f in self._features if in_range(f.location, rect))
