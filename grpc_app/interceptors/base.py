"""Shared plumbing for server interceptors.

grpc.aio hands an interceptor one of four handler shapes. ``wrap_handler``
re-wraps whichever shape it gets so that the whole call, including every
streamed message, runs inside a per-call async context manager.
"""
from __future__ import annotations

import inspect
from typing import Any, AsyncContextManager, AsyncIterator, Awaitable, Callable

import grpc


Scope = Callable[[grpc.aio.ServicerContext], AsyncContextManager[None]]


async def _call(fn: Callable[..., Any], *args: Any) -> Any:
    result = fn(*args)
    if inspect.isawaitable(result):
        return await result
    return result


async def _iterate(result: Any) -> AsyncIterator[Any]:
    if hasattr(result, "__aiter__"):
        async for item in result:
            yield item
        return
    for item in result or ():
        yield item


def _wrap_streaming(behavior: Callable[..., Any], scope: Scope) -> Callable[..., Any]:
    if inspect.iscoroutinefunction(behavior):
        # Handler writes through context.write(); stay a coroutine so the
        # runtime keeps using the reader-writer API
        async def _writer(request_or_iterator, context: grpc.aio.ServicerContext):
            async with scope(context):
                await behavior(request_or_iterator, context)

        return _writer

    async def _generator(request_or_iterator, context: grpc.aio.ServicerContext):
        async with scope(context):
            async for response in _iterate(behavior(request_or_iterator, context)):
                yield response

    return _generator


def wrap_handler(handler: grpc.RpcMethodHandler, scope: Scope) -> grpc.RpcMethodHandler:
    if handler.unary_unary:
        async def _unary_unary(request, context: grpc.aio.ServicerContext):
            async with scope(context):
                return await _call(handler.unary_unary, request, context)

        return grpc.unary_unary_rpc_method_handler(
            _unary_unary,
            request_deserializer=handler.request_deserializer,
            response_serializer=handler.response_serializer,
        )

    if handler.unary_stream:
        return grpc.unary_stream_rpc_method_handler(
            _wrap_streaming(handler.unary_stream, scope),
            request_deserializer=handler.request_deserializer,
            response_serializer=handler.response_serializer,
        )

    if handler.stream_unary:
        async def _stream_unary(request_iterator, context: grpc.aio.ServicerContext):
            async with scope(context):
                return await _call(handler.stream_unary, request_iterator, context)

        return grpc.stream_unary_rpc_method_handler(
            _stream_unary,
            request_deserializer=handler.request_deserializer,
            response_serializer=handler.response_serializer,
        )

    if handler.stream_stream:
        return grpc.stream_stream_rpc_method_handler(
            _wrap_streaming(handler.stream_stream, scope),
            request_deserializer=handler.request_deserializer,
            response_serializer=handler.response_serializer,
        )

    return handler


class ScopedServerInterceptor(grpc.aio.ServerInterceptor):
    """Interceptor whose behaviour is a per-call async context manager."""

    def scope(
        self,
        handler_call_details: grpc.HandlerCallDetails,
        context: grpc.aio.ServicerContext,
    ) -> AsyncContextManager[None]:
        raise NotImplementedError

    async def intercept_service(
        self,
        continuation: Callable[[grpc.HandlerCallDetails], Awaitable[grpc.RpcMethodHandler]],
        handler_call_details: grpc.HandlerCallDetails,
    ) -> grpc.RpcMethodHandler:
        handler = await continuation(handler_call_details)
        if handler is None:
            return handler
        return wrap_handler(handler, lambda context: self.scope(handler_call_details, context))
