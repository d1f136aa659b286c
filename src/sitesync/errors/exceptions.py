"""Exception hierarchy and S3 error mapping for sitesync."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class SiteSyncError(Exception):
    """
    Base exception for sitesync.

    Attributes:
        details: Optional structured information (e.g., key, HTTP status, error code).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class ConfigurationError(SiteSyncError):
    """Raised when required options are missing or invalid (before any I/O)."""


class ScanError(SiteSyncError):
    """Raised when a local file cannot be read while scanning/hashing."""


class ListingError(SiteSyncError):
    """Raised when a remote listing entry lacks a key or an ETag."""


class ExecutionError(SiteSyncError):
    """Raised when one or more plan items failed to upload/delete."""

    def __init__(
        self,
        message: str,
        *,
        failed_keys: Optional[list[str]] = None,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, details=details, cause=cause)
        self.failed_keys = list(failed_keys or [])


class InvalidStateError(SiteSyncError):
    """Raised when a plan cannot be applied in the current state."""


class AuthError(SiteSyncError):
    """Raised when credentials are missing or rejected (HTTP 401, NoCredentials)."""


class AccessDeniedError(SiteSyncError):
    """Raised when access is denied (HTTP 403 non-throttling)."""


class InvalidArgumentError(SiteSyncError):
    """Raised when request arguments are invalid (HTTP 400, etc.)."""


class NotFoundError(SiteSyncError):
    """Raised when a bucket or object is not found (HTTP 404)."""


class ConflictError(SiteSyncError):
    """Raised when a conflict occurs (HTTP 409/412)."""


class RateLimitError(SiteSyncError):
    """Raised when throttled (HTTP 429, or 503 SlowDown)."""


class NetworkError(SiteSyncError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(SiteSyncError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to sitesync exceptions."""

    status_code: int
    code: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_THROTTLE_CODES: tuple[str, ...] = (
    "SlowDown",
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequests",
    "TooManyRequestsException",
)

_AUTH_CODES: tuple[str, ...] = (
    "InvalidAccessKeyId",
    "SignatureDoesNotMatch",
    "ExpiredToken",
    "InvalidToken",
    "TokenRefreshRequired",
)


def _is_throttle_code(code: str | None) -> bool:
    if not code:
        return False
    return code in _THROTTLE_CODES


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> SiteSyncError:
    """
    Map an S3 HTTP error to a sitesync exception.

    Policy:
        - throttling codes (SlowDown, ...) -> RateLimitError, whatever the status
        - 400 -> InvalidArgumentError
        - 401, or 403 with a credential error code -> AuthError
        - 403 -> AccessDeniedError
        - 404 -> NotFoundError
        - 409/412 -> ConflictError
        - 429 -> RateLimitError
        - otherwise (5xx included) -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "code": info.code,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if _is_throttle_code(info.code) or info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)
    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        if info.code in _AUTH_CODES:
            return AuthError(message, details=details, cause=cause)
        return AccessDeniedError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code in (409, 412):
        return ConflictError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
