from __future__ import annotations

from contextlib import aclosing
from typing import AsyncIterator

import grpc

from application.services.route_guide_service import RouteGuideApplicationService
from core.logging_config import get_logger
from grpc_app.generated.routeguide import route_guide_pb2, route_guide_pb2_grpc
from grpc_app.mappers.route_guide import (
    feature_to_proto,
    note_from_proto,
    note_to_proto,
    point_from_proto,
    rectangle_from_proto,
    summary_to_proto,
)


logger = get_logger(__name__)


class RouteGuideService(route_guide_pb2_grpc.RouteGuideServicer):
    """Thin adapter from gRPC calls to the route guide application service."""

    def __init__(self, svc: RouteGuideApplicationService) -> None:
        self._svc = svc

    async def GetFeature(self, request: route_guide_pb2.Point, context: grpc.aio.ServicerContext) -> route_guide_pb2.Feature:  # type: ignore[override]
        logger.info("get_feature", latitude=request.latitude, longitude=request.longitude)
        feature = await self._svc.get_feature(point_from_proto(request))
        return feature_to_proto(feature)

    async def ListFeatures(  # type: ignore[override]
        self,
        request: route_guide_pb2.Rectangle,
        context: grpc.aio.ServicerContext,
    ) -> AsyncIterator[route_guide_pb2.Feature]:
        rect = rectangle_from_proto(request)
        logger.info(
            "list_features",
            lo=rect.lo.key,
            hi=rect.hi.key,
        )
        async for feature in self._svc.list_features(rect):
            yield feature_to_proto(feature)

    async def RecordRoute(  # type: ignore[override]
        self,
        request_iterator: AsyncIterator[route_guide_pb2.Point],
        context: grpc.aio.ServicerContext,
    ) -> route_guide_pb2.RouteSummary:
        logger.info("record_route")
        points = (point_from_proto(p) async for p in request_iterator)
        summary = await self._svc.record_route(points)
        return summary_to_proto(summary)

    async def RouteChat(  # type: ignore[override]
        self,
        request_iterator: AsyncIterator[route_guide_pb2.RouteNote],
        context: grpc.aio.ServicerContext,
    ) -> None:
        logger.info("route_chat")
        notes = (note_from_proto(n) async for n in request_iterator)
        # Replies are written inside the note registry's critical section.
        # Closing on any exit (failed write, cancellation) releases it and
        # drops the pending note.
        async with aclosing(self._svc.route_chat(notes)) as replies:
            async for note in replies:
                await context.write(note_to_proto(note))
        logger.info("route_chat_done")
