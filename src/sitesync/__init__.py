"""sitesync public API."""

from __future__ import annotations

import logging

from sitesync.config import (
    CacheControlRule,
    CloudfrontOptions,
    DeployTarget,
    ScanOptions,
    SyncOptions,
    load_deploy_targets,
)
from sitesync.controller import S3Controller
from sitesync.errors import (
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
from sitesync.local import file_md5, scan_local
from sitesync.manager import SiteSyncManager
from sitesync.models import (
    DeployResult,
    LocalFile,
    OperationResult,
    RemoteObject,
    SyncResult,
)
from sitesync.plan import (
    Action,
    PlanItem,
    SyncPlan,
    build_sync_plan,
    prepare_invalidation_paths,
    resolve_cache_policy,
)
from sitesync.reporting import format_sync_plan

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # High-level
    "SiteSyncManager",
    "S3Controller",
    # Options
    "ScanOptions",
    "SyncOptions",
    "CacheControlRule",
    "CloudfrontOptions",
    "DeployTarget",
    "load_deploy_targets",
    # Core
    "scan_local",
    "file_md5",
    "build_sync_plan",
    "resolve_cache_policy",
    "prepare_invalidation_paths",
    "format_sync_plan",
    # Plan / Models
    "Action",
    "PlanItem",
    "SyncPlan",
    "LocalFile",
    "RemoteObject",
    "OperationResult",
    "SyncResult",
    "DeployResult",
    # Errors
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
