from grpc_app.interceptors.exceptions import ExceptionMappingInterceptor
from grpc_app.interceptors.logging import LoggingInterceptor
from grpc_app.interceptors.request_id import RequestIdInterceptor, get_request_id

__all__ = [
    "ExceptionMappingInterceptor",
    "LoggingInterceptor",
    "RequestIdInterceptor",
    "get_request_id",
]
