"""Domain-level business exceptions shared by the domain and infrastructure.

The gRPC layer only maps these to status codes; the domain never depends
on the transport.
"""
from __future__ import annotations

from typing import Optional
from shared.codes import BusinessCode


class BusinessException(Exception):
    """Base class for business exceptions."""

    def __init__(
        self,
        code: int,
        message: str,
        error_type: str = "BusinessError",
        details: Optional[dict] = None,
        field: Optional[str] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.error_type = error_type
        self.details = details
        self.field = field
        super().__init__(self.message)


class DomainValidationException(BusinessException):
    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(
            code=BusinessCode.PARAM_VALIDATION_ERROR,
            message=message,
            error_type="DomainValidationError",
            details=details,
            field=field,
        )


class FeatureSourceException(BusinessException):
    """The feature source could not be read or parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            code=BusinessCode.FEATURE_SOURCE_ERROR,
            message=f"Failed to load features from {source}: {reason}",
            error_type="FeatureSourceError",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason
