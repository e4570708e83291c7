from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

import grpc

from core.logging_config import get_logger
from grpc_app.interceptors.base import ScopedServerInterceptor
from grpc_app.interceptors.request_id import get_request_id


logger = get_logger(__name__)


class LoggingInterceptor(ScopedServerInterceptor):
    @asynccontextmanager
    async def scope(
        self,
        handler_call_details: grpc.HandlerCallDetails,
        context: grpc.aio.ServicerContext,
    ) -> AsyncIterator[None]:
        method = handler_call_details.method
        start = time.perf_counter()
        logger.info("grpc_request", method=method, peer=context.peer(), request_id=get_request_id())
        try:
            yield
        except grpc.aio.AbortError:
            # Already mapped/aborted downstream; avoid duplicate error logs here
            raise
        except Exception as exc:
            # Unknown/unexpected exception -> log with stack
            logger.error(
                "grpc_unhandled_error",
                method=method,
                error=str(exc),
                exc_info=True,
                request_id=get_request_id(),
            )
            raise
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info("grpc_request_done", method=method, elapsed_ms=round(elapsed_ms, 2), request_id=get_request_id())
