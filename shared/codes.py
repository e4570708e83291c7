"""
Shared business codes used across layers (Domain/Application/gRPC).

This module provides a single source of truth so the exception types and
the gRPC status mapping never drift apart.
"""
from enum import IntEnum


class BusinessCode(IntEnum):
    """Business status codes (single source of truth)."""

    # Parameter errors (1xxxx)
    PARAM_VALIDATION_ERROR = 10003

    # Business errors (2xxxx)
    FEATURE_SOURCE_ERROR = 20100

    # System errors (4xxxx)
    SYSTEM_ERROR = 40000


__all__ = ["BusinessCode"]
