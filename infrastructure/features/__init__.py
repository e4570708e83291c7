"""Feature sources."""
from .json_source import load_features, parse_features

__all__ = ["load_features", "parse_features"]
