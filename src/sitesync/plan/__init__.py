"""Public plan exports for sitesync."""

from __future__ import annotations

from .actions import ACTION_PRIORITY, MUTATING_ACTIONS, UPLOAD_ACTIONS, Action
from .invalidation import encode_invalidation_path, prepare_invalidation_paths
from .ordering import sort_plan_items
from .plan_item import DEFAULT_CONTENT_DISPOSITION, PlanItem
from .planner import build_sync_plan, fold_remote_objects, seed_local_items
from .policy import (
    DEFAULT_CACHE_CONTROL,
    INVALIDATE_CACHE_CONTROL,
    CachePolicy,
    is_cacheable,
    resolve_cache_policy,
)
from .sink import LoggingSink, NullSink, PlanSink, RecordingSink
from .sync_plan import SyncPlan

__all__ = [
    "Action",
    "ACTION_PRIORITY",
    "MUTATING_ACTIONS",
    "UPLOAD_ACTIONS",
    "PlanItem",
    "SyncPlan",
    "DEFAULT_CONTENT_DISPOSITION",
    "sort_plan_items",
    "build_sync_plan",
    "seed_local_items",
    "fold_remote_objects",
    "CachePolicy",
    "DEFAULT_CACHE_CONTROL",
    "INVALIDATE_CACHE_CONTROL",
    "is_cacheable",
    "resolve_cache_policy",
    "encode_invalidation_path",
    "prepare_invalidation_paths",
    "PlanSink",
    "NullSink",
    "LoggingSink",
    "RecordingSink",
]
