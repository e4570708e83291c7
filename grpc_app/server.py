from __future__ import annotations

from typing import Sequence
import grpc
from grpc_health.v1 import health, health_pb2_grpc, health_pb2

from core.config import GrpcSettings, settings
from core.logging_config import get_logger
from grpc_app.interceptors.request_id import RequestIdInterceptor
from grpc_app.interceptors.logging import LoggingInterceptor
from grpc_app.interceptors.exceptions import ExceptionMappingInterceptor
from grpc_app.generated.routeguide import route_guide_pb2, route_guide_pb2_grpc


logger = get_logger(__name__)
SERVICE_NAME = route_guide_pb2.DESCRIPTOR.services_by_name["RouteGuide"].full_name


def _read(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def _server_credentials(cfg: GrpcSettings) -> grpc.ServerCredentials:
    if not (cfg.tls.cert and cfg.tls.key):
        raise RuntimeError("GRPC TLS enabled but cert/key not provided")
    root_certificates = _read(cfg.tls.ca) if cfg.tls.ca else None
    return grpc.ssl_server_credentials(
        [(_read(cfg.tls.key), _read(cfg.tls.cert))],
        root_certificates=root_certificates,
        require_client_auth=bool(root_certificates),
    )


async def create_server(
    servicer: route_guide_pb2_grpc.RouteGuideServicer,
    cfg: GrpcSettings | None = None,
) -> tuple[grpc.aio.Server, int]:
    """Build a server with the RouteGuide and health services registered.

    Returns the server together with the bound port (useful with port 0).
    """
    cfg = cfg or settings.grpc
    interceptors: Sequence[grpc.aio.ServerInterceptor] = (
        RequestIdInterceptor(),
        LoggingInterceptor(),
        ExceptionMappingInterceptor(),  # maps business exceptions
    )

    options = [
        ("grpc.max_concurrent_streams", max(1, cfg.max_concurrent_streams)),
    ]
    server = grpc.aio.server(interceptors=interceptors, options=options)

    route_guide_pb2_grpc.add_RouteGuideServicer_to_server(servicer, server)

    health_svc = health.aio.HealthServicer()
    health_pb2_grpc.add_HealthServicer_to_server(health_svc, server)
    await health_svc.set("", health_pb2.HealthCheckResponse.SERVING)
    await health_svc.set(SERVICE_NAME, health_pb2.HealthCheckResponse.SERVING)

    address = f"{cfg.host}:{cfg.port}"
    if cfg.tls.enabled:
        port = server.add_secure_port(address, _server_credentials(cfg))
    else:
        port = server.add_insecure_port(address)

    logger.info("grpc_server_created", address=address, port=port, tls=cfg.tls.enabled)
    return server, port
