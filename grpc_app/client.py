"""Async client for ``routeguide.RouteGuide`` speaking domain types."""
from __future__ import annotations

from typing import AsyncIterator, Iterable, Optional, Sequence

import grpc

from domain.route_guide import Feature, Point, Rectangle, RouteNote, RouteSummary
from grpc_app.mappers.route_guide import (
    feature_from_proto,
    note_from_proto,
    note_to_proto,
    point_to_proto,
    rectangle_to_proto,
    summary_from_proto,
)
from grpc_app.generated.routeguide import route_guide_pb2_grpc


class RouteGuideClient:
    def __init__(self, channel: grpc.aio.Channel, *, metadata: Optional[Sequence[tuple[str, str]]] = None) -> None:
        self._stub = route_guide_pb2_grpc.RouteGuideStub(channel)
        self._metadata = tuple(metadata or ())

    async def get_feature(self, point: Point) -> Feature:
        reply = await self._stub.GetFeature(point_to_proto(point), metadata=self._metadata)
        return feature_from_proto(reply)

    async def list_features(self, rect: Rectangle) -> AsyncIterator[Feature]:
        call = self._stub.ListFeatures(rectangle_to_proto(rect), metadata=self._metadata)
        async for reply in call:
            yield feature_from_proto(reply)

    async def record_route(self, points: Iterable[Point]) -> RouteSummary:
        reply = await self._stub.RecordRoute(
            (point_to_proto(p) for p in points), metadata=self._metadata
        )
        return summary_from_proto(reply)

    async def route_chat(self, notes: Iterable[RouteNote]) -> list[RouteNote]:
        """Send every note, then collect the replayed notes until the server closes."""
        call = self._stub.RouteChat((note_to_proto(n) for n in notes), metadata=self._metadata)
        return [note_from_proto(reply) async for reply in call]


__all__ = ["RouteGuideClient"]
