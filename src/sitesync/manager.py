"""SiteSyncManager: orchestrates scan, planning, review and apply."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Callable, Optional

from sitesync.config import DeployTarget, ScanOptions, SyncOptions
from sitesync.controller import S3Controller
from sitesync.errors import (
    AccessDeniedError,
    AuthError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidStateError,
    SiteSyncError,
)
from sitesync.local import scan_local
from sitesync.models import DeployResult, OperationResult, SyncResult
from sitesync.plan import (
    MUTATING_ACTIONS,
    Action,
    LoggingSink,
    PlanItem,
    PlanSink,
    SyncPlan,
    build_sync_plan,
    prepare_invalidation_paths,
)
from sitesync.reporting import log_sync_plan

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[SyncPlan, list[str]], bool]


class SiteSyncManager:
    """High-level manager for safe sync: Scan -> Plan -> Review -> Apply."""

    def __init__(self) -> None:
        self._controllers: dict[tuple[str, Optional[str]], S3Controller] = {}
        self._fixed_controller: Optional[S3Controller] = None

    @classmethod
    def from_controller(cls, controller: S3Controller) -> "SiteSyncManager":
        """Create manager with an injected controller (useful for tests)."""
        obj = cls()
        obj._fixed_controller = controller
        return obj

    def build_plan(
        self,
        scan: ScanOptions,
        options: SyncOptions,
        *,
        sink: Optional[PlanSink] = None,
    ) -> SyncPlan:
        """
        Scan the local tree, list the bucket and build a SyncPlan.

        The local scan is completed before the bucket is listed. Nothing is
        written to the bucket.

        Raises:
            ConfigurationError: if the scan root is not a directory.
            ScanError: if a local file cannot be read.
            ListingError: if the listing returns a malformed entry.
        """
        local_files = list(scan_local(scan))
        logger.debug("Scanned %d local file(s) under %s", len(local_files), scan.path)

        controller = self._controller(options.region, options.endpoint)
        remote_objects = controller.iter_objects(options.bucket, options.prefix)
        return build_sync_plan(local_files, remote_objects, options, sink or LoggingSink())

    def sync(
        self,
        scan: ScanOptions,
        options: SyncOptions,
        *,
        execute: bool = False,
    ) -> SyncPlan | SyncResult:
        """
        Convenience API.

        - execute=False: build and return SyncPlan
        - execute=True: build, apply, and return SyncResult
        """
        plan = self.build_plan(scan, options)
        if not execute:
            return plan
        return self.apply_plan(plan)

    def apply_plan(
        self,
        plan: SyncPlan,
        *,
        continue_on_error: bool = False,
    ) -> SyncResult:
        """
        Apply SyncPlan to the bucket, in plan order.

        Policy:
            - Every item is validated before the first write.
            - Non-fatal item errors: stop (remaining mutating items are
              reported "skipped") unless continue_on_error.
            - Fatal errors raise: Auth/AccessDenied/InvalidArgument/InvalidState.
        """
        if not plan.bucket:
            raise InvalidStateError("Plan has no bucket")

        for item in plan.items:
            try:
                item.validate_required_fields()
            except ValueError as exc:
                raise InvalidArgumentError(
                    "Invalid plan item: missing required fields",
                    details={"key": item.key, "action": item.action.value},
                    cause=exc,
                ) from exc

        controller = self._controller(plan.region, plan.endpoint)
        results: list[OperationResult] = []
        stopped_key: Optional[str] = None

        for item in plan.items:
            if item.action not in MUTATING_ACTIONS:
                continue

            if stopped_key is not None and not continue_on_error:
                results.append(_result(item, "skipped"))
                continue

            try:
                self._apply_one(controller, plan.bucket, item)
                results.append(_result(item, "success"))
            except SiteSyncError as exc:
                if _is_fatal(exc):
                    raise
                logger.error("Failed to %s %s: %s", item.action.value.lower(), item.key, exc)
                results.append(_failed_result(item, exc))
                if stopped_key is None:
                    stopped_key = item.key

        status = "failed" if stopped_key is not None else "success"
        return SyncResult(
            status=status,  # type: ignore[arg-type]
            stopped_key=stopped_key,
            results=results,
            summary=_summarize_results(results),
        )

    def deploy(
        self,
        target: DeployTarget,
        *,
        root: str = ".",
        dry_run: bool = False,
        confirm: Optional[ConfirmCallback] = None,
        verbose: bool = False,
        purge: bool = False,
        force: bool = False,
    ) -> DeployResult:
        """
        Deploy one target: plan, review, optionally confirm, apply.

        Results:
            - "no-changes": no Create/Update/Delete in the plan
            - "success": applied (or dry_run)
            - "canceled": confirm returned False
            - "failed": at least one item failed

        purge/force are OR-ed with the target's own settings.
        """
        logger.info("Deploying %s...", target.name)

        scan = target.scan_options(root)
        if not os.path.isdir(scan.path):
            raise ConfigurationError(
                "Build path is not a directory",
                details={"target": target.name, "build_path": scan.path},
            )

        if target.s3 is None:
            logger.info("No files to deploy")
            return DeployResult(result="no-changes")

        options = target.s3
        if purge or force:
            options = _with_overrides(options, purge=purge, force=force)

        plan = self.build_plan(scan, options)
        log_sync_plan(plan, verbose=verbose)

        if not plan.has_changes:
            logger.info("No files to deploy")
            return DeployResult(result="no-changes", plan=plan)

        invalidations = self._invalidations(target, plan)

        if dry_run:
            logger.info("Dry run, skipping deployment")
            return DeployResult(result="success", plan=plan, invalidations=invalidations)

        if confirm is not None and not confirm(plan, invalidations):
            logger.info("Canceled")
            return DeployResult(result="canceled", plan=plan, invalidations=invalidations)

        sync_result = self.apply_plan(plan)
        result = "success" if sync_result.status == "success" else "failed"
        return DeployResult(
            result=result,  # type: ignore[arg-type]
            plan=plan,
            invalidations=invalidations,
            sync_result=sync_result,
        )

    # ----------------------------
    # Internals
    # ----------------------------
    def _controller(self, region: str, endpoint: Optional[str]) -> S3Controller:
        if self._fixed_controller is not None:
            return self._fixed_controller

        cache_key = (region, endpoint)
        if cache_key not in self._controllers:
            self._controllers[cache_key] = S3Controller(region, endpoint=endpoint)
        return self._controllers[cache_key]

    def _apply_one(self, controller: S3Controller, bucket: str, item: PlanItem) -> None:
        """Apply one mutating item. Raises sitesync errors on failure."""
        if item.action in (Action.CREATE, Action.UPDATE):
            logger.info("Uploading %s", item.key)
            kwargs = {
                "content_type": item.content_type,
                "content_disposition": item.content_disposition,
                "cache_control": item.cache_control,
                "acl": item.acl,
            }
            if item.data is not None:
                controller.put_object(bucket, item.key, item.data, **kwargs)
            else:
                controller.upload_file(bucket, item.key, item.local.path, **kwargs)  # type: ignore[union-attr]
            return

        if item.action is Action.DELETE:
            logger.info("Deleting %s", item.key)
            controller.delete_object(bucket, item.key)
            return

        raise InvalidArgumentError("Unsupported action", details={"action": item.action})

    def _invalidations(self, target: DeployTarget, plan: SyncPlan) -> list[str]:
        if target.cloudfront is None:
            return []

        paths = prepare_invalidation_paths(plan, target.cloudfront.invalidate_paths)
        if paths:
            for path in paths:
                logger.info("Invalidate %s", path)
            if not target.cloudfront.distribution_ids:
                logger.warning("Cloudfront distributionId is not set")
        return paths


def _with_overrides(options: SyncOptions, *, purge: bool, force: bool) -> SyncOptions:
    return dataclasses.replace(
        options,
        purge=options.purge or purge,
        force=options.force or force,
    )


def _is_fatal(exc: SiteSyncError) -> bool:
    return isinstance(
        exc,
        (
            AuthError,
            AccessDeniedError,
            InvalidArgumentError,
            InvalidStateError,
        ),
    )


def _result(item: PlanItem, status: str) -> OperationResult:
    return OperationResult(
        key=item.key,
        action=item.action.value,
        status=status,  # type: ignore[arg-type]
    )


def _failed_result(item: PlanItem, exc: SiteSyncError) -> OperationResult:
    return OperationResult(
        key=item.key,
        action=item.action.value,
        status="failed",
        error_type=exc.__class__.__name__,
        error_message=str(exc),
        error_details=getattr(exc, "details", None),
    )


def _summarize_results(results: list[OperationResult]) -> dict[str, int]:
    summary: dict[str, int] = {"success": 0, "failed": 0, "skipped": 0}
    for r in results:
        summary[r.status] = summary.get(r.status, 0) + 1
    return summary
