"""Public error exports for sitesync."""

from __future__ import annotations

from .exceptions import (
    AccessDeniedError,
    ApiError,
    AuthError,
    ConfigurationError,
    ConflictError,
    ExecutionError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidStateError,
    ListingError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ScanError,
    SiteSyncError,
    map_http_error,
)

__all__ = [
    "SiteSyncError",
    "ConfigurationError",
    "ScanError",
    "ListingError",
    "ExecutionError",
    "InvalidStateError",
    "AuthError",
    "AccessDeniedError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
