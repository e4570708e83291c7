import argparse
import asyncio
import sys
from typing import Optional, Sequence

from core.config import settings
from core.logging_config import get_logger
from application.services.route_guide_service import RouteGuideApplicationService
from domain.common.exceptions import FeatureSourceException
from grpc_app.server import create_server
from grpc_app.services.route_guide_service import RouteGuideService
from infrastructure.features import load_features
from infrastructure.notes import create_note_registry


logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="RouteGuide gRPC server")
    parser.add_argument("--port", type=int, default=None, help=f"The server port (default {settings.grpc.port})")
    parser.add_argument(
        "--features",
        default=None,
        help=f"Path to features JSON file (default {settings.features.path})",
    )
    return parser.parse_args(argv)


def build_servicer(features_path: str, lock_mode: str) -> RouteGuideService:
    """Load the feature store and wire the servicer; raises on a bad source."""
    features = load_features(features_path)
    notes = create_note_registry(lock_mode)
    return RouteGuideService(RouteGuideApplicationService(features=features, notes=notes))


async def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    grpc_cfg = settings.grpc
    if args.port is not None:
        grpc_cfg = grpc_cfg.model_copy(update={"port": args.port})
    features_path = args.features or settings.features.path

    logger.info("route_guide_starting", features=features_path, lock_mode=settings.notes.lock_mode)
    try:
        servicer = build_servicer(features_path, settings.notes.lock_mode)
    except FeatureSourceException as exc:
        logger.error("features_load_failed", source=exc.source, reason=exc.reason)
        return 1

    server, port = await create_server(servicer, grpc_cfg)
    address = f"{grpc_cfg.host}:{port}"
    logger.info("grpc_starting", address=address)
    await server.start()
    logger.info("grpc_started", address=address)
    try:
        await server.wait_for_termination()
    except (KeyboardInterrupt, asyncio.CancelledError):
        logger.info("grpc_stopping")
        await server.stop(grace=None)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
