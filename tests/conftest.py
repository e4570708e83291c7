"""Pytest bootstrap configuration.

Shared fixtures: a small feature store, fresh note registries, the
application service, and an in-process gRPC server on an ephemeral port.
"""
from typing import AsyncIterator, Tuple

import pytest

from application.services.route_guide_service import RouteGuideApplicationService
from core.config import GrpcSettings
from domain.route_guide import FeatureStore
from infrastructure.notes import InMemoryNoteRegistry
from tests.sample_data import FEATURES


@pytest.fixture
def feature_store() -> FeatureStore:
    return FeatureStore(FEATURES)


@pytest.fixture
def note_registry() -> InMemoryNoteRegistry:
    return InMemoryNoteRegistry()


@pytest.fixture
def route_guide(feature_store, note_registry) -> RouteGuideApplicationService:
    return RouteGuideApplicationService(features=feature_store, notes=note_registry)


@pytest.fixture
async def grpc_route_guide_server(route_guide) -> AsyncIterator[Tuple[str, object]]:
    """Start the real server stack (interceptors + health) on 127.0.0.1:0."""
    from grpc_app.server import create_server
    from grpc_app.services.route_guide_service import RouteGuideService

    server, port = await create_server(
        RouteGuideService(route_guide),
        GrpcSettings(host="127.0.0.1", port=0),
    )
    await server.start()
    try:
        yield f"127.0.0.1:{port}", server
    finally:
        await server.stop(grace=None)
