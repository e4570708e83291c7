"""Protobuf <-> domain mapping for the route guide messages."""
from __future__ import annotations

from domain.common.exceptions import DomainValidationException
from domain.route_guide import Feature, Point, Rectangle, RouteNote, RouteSummary
from grpc_app.generated.routeguide import route_guide_pb2


def _int32(value: int) -> int:
    """Wrap to a signed 32-bit value, like an overflowing int32 counter."""
    return (value + 2**31) % 2**32 - 2**31


def point_from_proto(msg: route_guide_pb2.Point) -> Point:
    return Point(latitude=int(msg.latitude), longitude=int(msg.longitude))


def point_to_proto(point: Point) -> route_guide_pb2.Point:
    return route_guide_pb2.Point(latitude=point.latitude, longitude=point.longitude)


def rectangle_from_proto(msg: route_guide_pb2.Rectangle) -> Rectangle:
    for corner in ("lo", "hi"):
        if not msg.HasField(corner):
            raise DomainValidationException(f"rectangle corner '{corner}' is required", field=corner)
    return Rectangle(lo=point_from_proto(msg.lo), hi=point_from_proto(msg.hi))


def rectangle_to_proto(rect: Rectangle) -> route_guide_pb2.Rectangle:
    return route_guide_pb2.Rectangle(lo=point_to_proto(rect.lo), hi=point_to_proto(rect.hi))


def feature_from_proto(msg: route_guide_pb2.Feature) -> Feature:
    return Feature(location=point_from_proto(msg.location), name=msg.name)


def feature_to_proto(feature: Feature) -> route_guide_pb2.Feature:
    return route_guide_pb2.Feature(name=feature.name, location=point_to_proto(feature.location))


def note_from_proto(msg: route_guide_pb2.RouteNote) -> RouteNote:
    if not msg.HasField("location"):
        raise DomainValidationException("route note location is required", field="location")
    return RouteNote(location=point_from_proto(msg.location), message=msg.message)


def note_to_proto(note: RouteNote) -> route_guide_pb2.RouteNote:
    return route_guide_pb2.RouteNote(location=point_to_proto(note.location), message=note.message)


def summary_from_proto(msg: route_guide_pb2.RouteSummary) -> RouteSummary:
    return RouteSummary(
        point_count=msg.point_count,
        feature_count=msg.feature_count,
        distance=msg.distance,
        elapsed_time=msg.elapsed_time,
    )


def summary_to_proto(summary: RouteSummary) -> route_guide_pb2.RouteSummary:
    return route_guide_pb2.RouteSummary(
        point_count=_int32(summary.point_count),
        feature_count=_int32(summary.feature_count),
        distance=_int32(summary.distance),
        elapsed_time=_int32(summary.elapsed_time),
    )
