"""Demo client exercising the four RouteGuide calls against a running server."""
import argparse
import asyncio

import grpc

from core.logging_config import get_logger
from domain.route_guide import Point, Rectangle, RouteNote
from grpc_app.client import RouteGuideClient


logger = get_logger(__name__)

SAMPLE_POINTS = [
    Point(407838351, -746143763),
    Point(408122808, -743999179),
    Point(413628156, -749015468),
    Point(419999544, -740371136),
    Point(414008389, -743951297),
]

SAMPLE_NOTES = [
    RouteNote(Point(407838351, -746143763), "First note at Patriots Path"),
    RouteNote(Point(408122808, -743999179), "Second note at Whippany"),
    RouteNote(Point(407838351, -746143763), "Back at Patriots Path!"),
]


async def run(target: str) -> None:
    async with grpc.aio.insecure_channel(target) as channel:
        client = RouteGuideClient(channel)

        feature = await client.get_feature(SAMPLE_POINTS[0])
        logger.info("get_feature", name=feature.name or "<unnamed>", location=feature.location.key)

        rect = Rectangle(lo=Point(400000000, -750000000), hi=Point(420000000, -730000000))
        count = 0
        async for feature in client.list_features(rect):
            count += 1
            logger.info("list_features_item", name=feature.name, location=feature.location.key)
        logger.info("list_features", count=count)

        summary = await client.record_route(SAMPLE_POINTS)
        logger.info(
            "record_route",
            points=summary.point_count,
            features=summary.feature_count,
            distance=summary.distance,
            elapsed_time=summary.elapsed_time,
        )

        replies = await client.route_chat(SAMPLE_NOTES)
        for note in replies:
            logger.info("route_chat_reply", location=note.location.key, message=note.message)


def main() -> None:
    parser = argparse.ArgumentParser(description="RouteGuide demo client")
    parser.add_argument("--target", default="localhost:50051")
    args = parser.parse_args()
    asyncio.run(run(args.target))


if __name__ == "__main__":
    main()
