from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import grpc

from core.logging_config import get_logger
from domain.common.exceptions import BusinessException
from grpc_app.interceptors.base import ScopedServerInterceptor
from grpc_app.interceptors.request_id import REQUEST_ID_META_KEY, get_request_id
from shared.codes import BusinessCode


logger = get_logger(__name__)


_STATUS_BY_CODE = {
    BusinessCode.PARAM_VALIDATION_ERROR: grpc.StatusCode.INVALID_ARGUMENT,
    BusinessCode.FEATURE_SOURCE_ERROR: grpc.StatusCode.FAILED_PRECONDITION,
    BusinessCode.SYSTEM_ERROR: grpc.StatusCode.INTERNAL,
}


def business_code_to_grpc_status(code: int) -> grpc.StatusCode:
    try:
        bc = BusinessCode(code)
    except ValueError:
        return grpc.StatusCode.FAILED_PRECONDITION
    return _STATUS_BY_CODE.get(bc, grpc.StatusCode.FAILED_PRECONDITION)


class ExceptionMappingInterceptor(ScopedServerInterceptor):
    """Turn exceptions escaping a handler into gRPC statuses.

    Business exceptions keep their message and get ``x-biz-code`` and
    ``x-error-type`` trailing metadata; anything else becomes INTERNAL.
    Aborts raised by the handler itself and cancellations pass through.
    """

    async def _abort(
        self,
        context: grpc.aio.ServicerContext,
        method: str,
        *,
        biz_code: int,
        error_type: str,
        status: grpc.StatusCode,
        message: str,
        client_message: str,
    ) -> None:
        request_id = get_request_id()
        trailing = [("x-biz-code", str(biz_code)), ("x-error-type", error_type)]
        if request_id:
            trailing.append((REQUEST_ID_META_KEY, request_id))
        context.set_trailing_metadata(tuple(trailing))
        # Concise error log (no stack)
        logger.error(
            "grpc_mapped_error",
            method=method,
            code=str(biz_code),
            status=str(status),
            message=message,
            request_id=request_id,
        )
        await context.abort(status, client_message)

    @asynccontextmanager
    async def scope(
        self,
        handler_call_details: grpc.HandlerCallDetails,
        context: grpc.aio.ServicerContext,
    ) -> AsyncIterator[None]:
        method = handler_call_details.method
        try:
            yield
        except grpc.aio.AbortError:
            raise
        except BusinessException as exc:
            await self._abort(
                context,
                method,
                biz_code=int(exc.code),
                error_type=exc.error_type or "BusinessError",
                status=business_code_to_grpc_status(exc.code),
                message=exc.message,
                client_message=exc.message,
            )
        except Exception as exc:
            await self._abort(
                context,
                method,
                biz_code=int(BusinessCode.SYSTEM_ERROR),
                error_type="SystemError",
                status=grpc.StatusCode.INTERNAL,
                message=str(exc),
                client_message="Internal server error",
            )
