"""Route guide domain exports."""
from .entity import Feature, Point, Rectangle, RouteNote, RouteSummary
from .feature_store import FeatureStore
from .geometry import haversine, in_range

__all__ = [
    "Feature",
    "FeatureStore",
    "Point",
    "Rectangle",
    "RouteNote",
    "RouteSummary",
    "haversine",
    "in_range",
]
