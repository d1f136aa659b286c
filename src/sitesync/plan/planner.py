"""Reconciliation planner: local files + remote objects -> ordered SyncPlan."""

from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from sitesync.config import SyncOptions
from sitesync.errors import ListingError
from sitesync.models import LocalFile, RemoteObject
from sitesync.util.glob import is_match
from sitesync.util.mime import guess_content_type

from .actions import Action
from .ordering import sort_plan_items
from .plan_item import DEFAULT_CONTENT_DISPOSITION, PlanItem
from .policy import resolve_cache_policy
from .sink import NullSink, PlanSink
from .sync_plan import SyncPlan


def build_sync_plan(
    local_files: Iterable[LocalFile],
    remote_objects: Iterable[RemoteObject],
    options: SyncOptions,
    sink: Optional[PlanSink] = None,
) -> SyncPlan:
    """
    Build an ordered SyncPlan.

    Phases:
        1. Seed one Create item per local file (key = prefix + local key).
        2. Fold the remote stream into a new mapping and classify each key.
        3. Sort by action priority, cached items first within an action.

    This function performs no I/O beyond consuming the two iterables, and
    reports only through sink.

    Raises:
        ListingError: if a remote object has no key or no fingerprint.
    """
    sink = sink or NullSink()
    seeded = seed_local_items(local_files, options, sink)
    merged = fold_remote_objects(seeded, remote_objects, options, sink)
    items = sort_plan_items(merged.values())

    sink.emit("plan-built", items=len(items), bucket=options.bucket)
    return SyncPlan(
        items=items,
        region=options.region,
        bucket=options.bucket,
        endpoint=options.endpoint,
    )


def seed_local_items(
    local_files: Iterable[LocalFile],
    options: SyncOptions,
    sink: Optional[PlanSink] = None,
) -> Mapping[str, PlanItem]:
    """Return a read-only key -> Create item mapping for the local side."""
    sink = sink or NullSink()
    prefix = options.prefix or ""
    items: dict[str, PlanItem] = {}

    for local in local_files:
        key = prefix + local.key
        if key in items:
            continue

        policy = resolve_cache_policy(key, options, sink)
        items[key] = PlanItem(
            key=key,
            action=Action.CREATE,
            local=local,
            cache_control=policy.cache_control,
            cache=policy.cache,
            invalidate=False,
            content_type=guess_content_type(local.path),
            content_disposition=DEFAULT_CONTENT_DISPOSITION,
            acl=options.acl,
        )

    return MappingProxyType(items)


def fold_remote_objects(
    seeded: Mapping[str, PlanItem],
    remote_objects: Iterable[RemoteObject],
    options: SyncOptions,
    sink: Optional[PlanSink] = None,
) -> dict[str, PlanItem]:
    """
    Merge remote objects into a copy of seeded and classify every key.

    Rules:
        - Remote-only: Ignore if the key matches ignore_glob, else Delete when
          purge is set, else Unknown.
        - Both sides: Unchanged if hashes match and force is off, else Update
          with invalidate = options.invalidate_changes.
        - remote is attached in every case.
    """
    sink = sink or NullSink()
    merged: dict[str, PlanItem] = dict(seeded)

    for remote in remote_objects:
        _require_listing_fields(remote)
        key = remote.key
        existing = merged.get(key)

        if existing is None or existing.local is None:
            action = _classify_remote_only(key, options)
            merged[key] = PlanItem(key=key, action=action, remote=remote)
        else:
            merged[key] = _classify_both(existing, remote, options)

        sink.emit("classified", key=key, action=merged[key].action.value)

    return merged


def _classify_remote_only(key: str, options: SyncOptions) -> Action:
    if options.ignore_glob and is_match(key, options.ignore_glob):
        return Action.IGNORE
    if options.purge:
        return Action.DELETE
    return Action.UNKNOWN


def _classify_both(item: PlanItem, remote: RemoteObject, options: SyncOptions) -> PlanItem:
    if not options.force and item.local.hash == remote.fingerprint:  # type: ignore[union-attr]
        return dataclasses.replace(item, remote=remote, action=Action.UNCHANGED)

    return dataclasses.replace(
        item,
        remote=remote,
        action=Action.UPDATE,
        invalidate=options.invalidate_changes,
    )


def _require_listing_fields(remote: RemoteObject) -> None:
    if not remote.key:
        raise ListingError("Remote object has no key", details={"object": repr(remote)})
    if not remote.fingerprint:
        raise ListingError(
            "Remote object has no ETag",
            details={"key": remote.key},
        )
