"""JSON feature source.

The source is a JSON array of records shaped like::

    [{"location": {"latitude": 407838351, "longitude": -746143763}, "name": "Patriots Path"}]

Missing fields fall back to their zero values, the same way a protobuf JSON
document would decode.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter, ValidationError

from core.logging_config import get_logger
from domain.common.exceptions import FeatureSourceException
from domain.route_guide import Feature, FeatureStore, Point


logger = get_logger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class LocationRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    latitude: StrictInt = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    longitude: StrictInt = Field(default=0, ge=INT32_MIN, le=INT32_MAX)


class FeatureRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    location: LocationRecord = Field(default_factory=LocationRecord)
    name: str = ""

    def to_domain(self) -> Feature:
        return Feature(
            location=Point(latitude=self.location.latitude, longitude=self.location.longitude),
            name=self.name,
        )


_records_adapter = TypeAdapter(list[FeatureRecord])


def parse_features(raw: Union[str, bytes], *, source: str = "<memory>") -> FeatureStore:
    """Parse a JSON document into a FeatureStore, preserving record order."""
    try:
        records = _records_adapter.validate_json(raw)
    except ValidationError as exc:
        raise FeatureSourceException(source, f"malformed feature list ({exc.error_count()} errors)") from exc
    return FeatureStore(r.to_domain() for r in records)


def load_features(path: Union[str, Path]) -> FeatureStore:
    """Read and parse the feature file at ``path``.

    Raises FeatureSourceException when the file is missing, unreadable or
    malformed.
    """
    source = str(path)
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise FeatureSourceException(source, exc.strerror or str(exc)) from exc

    store = parse_features(raw, source=source)
    logger.info("features_loaded", count=len(store), source=source)
    return store


__all__ = ["FeatureRecord", "LocationRecord", "load_features", "parse_features"]
