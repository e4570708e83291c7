"""Application service for the route guide workflows.

Each of the four operations maps onto one call shape:

- get_feature: single request, single response
- list_features: single request, streamed response (async generator)
- record_route: streamed request folded into one summary
- route_chat: streamed request and streamed response

The service only knows domain types; the gRPC layer maps protobuf
messages in and out.
"""
from __future__ import annotations

import time
from typing import AsyncIterable, AsyncIterator, Callable, Optional

from application.ports.note_registry import NoteRegistryPort
from core.logging_config import get_logger
from domain.route_guide import (
    Feature,
    FeatureStore,
    Point,
    Rectangle,
    RouteNote,
    RouteSummary,
    haversine,
)


logger = get_logger(__name__)


class RouteGuideApplicationService:
    def __init__(
        self,
        *,
        features: FeatureStore,
        notes: NoteRegistryPort,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._features = features
        self._notes = notes
        self._clock = clock

    async def get_feature(self, point: Point) -> Feature:
        """Feature at ``point``, or an unnamed feature echoing the point."""
        feature = self._features.lookup(point)
        if feature is None:
            logger.debug("get_feature_miss", latitude=point.latitude, longitude=point.longitude)
            return Feature(location=point, name="")
        logger.debug("get_feature_hit", name=feature.name)
        return feature

    async def list_features(self, rect: Rectangle) -> AsyncIterator[Feature]:
        count = 0
        for feature in self._features.range_query(rect):
            yield feature
            count += 1
        logger.info("list_features_done", sent=count)

    async def record_route(self, points: AsyncIterable[Point]) -> RouteSummary:
        point_count = 0
        feature_count = 0
        distance = 0
        last_point: Optional[Point] = None
        start = self._clock()

        async for point in points:
            point_count += 1
            # Co-located duplicate features each count
            feature_count += len(self._features.matches(point))
            if last_point is not None:
                distance += haversine(last_point, point)
            last_point = point

        summary = RouteSummary(
            point_count=point_count,
            feature_count=feature_count,
            distance=distance,
            elapsed_time=int(self._clock() - start),
        )
        logger.info(
            "record_route_done",
            points=summary.point_count,
            features=summary.feature_count,
            distance=summary.distance,
            elapsed_time=summary.elapsed_time,
        )
        return summary

    async def route_chat(self, notes: AsyncIterable[RouteNote]) -> AsyncIterator[RouteNote]:
        async for note in notes:
            # Replay and append share one critical section
            async with self._notes.replay(note) as previous:
                logger.debug("route_chat_note", key=note.location.key, replayed=len(previous))
                for prev in previous:
                    yield prev
