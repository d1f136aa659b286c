"""Result models for plan execution and deploys."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal, Optional

from sitesync.errors import ExecutionError

if TYPE_CHECKING:
    from sitesync.plan import SyncPlan


OperationStatus = Literal["success", "failed", "skipped"]
SyncStatus = Literal["success", "failed"]
DeployStatus = Literal["success", "failed", "no-changes", "canceled"]


@dataclass(slots=True)
class OperationResult:
    """Result for a single mutating plan item."""

    key: str
    action: str
    status: OperationStatus

    error_type: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[dict[str, Any]] = None


@dataclass(slots=True)
class SyncResult:
    """Aggregate result for apply_plan."""

    status: SyncStatus
    stopped_key: Optional[str]
    results: list[OperationResult]

    summary: dict[str, int] = field(default_factory=dict)

    @property
    def failed_keys(self) -> list[str]:
        return [r.key for r in self.results if r.status == "failed"]

    def raise_for_failures(self) -> None:
        """
        Raise ExecutionError if any item failed.

        Raises:
            ExecutionError: with failed_keys set to the keys that failed.
        """
        failed = self.failed_keys
        if not failed:
            return
        raise ExecutionError(
            f"{len(failed)} plan item(s) failed",
            failed_keys=failed,
            details={"stopped_key": self.stopped_key, "summary": dict(self.summary)},
        )


@dataclass(slots=True)
class DeployResult:
    """Outcome of deploying one target."""

    result: DeployStatus
    plan: Optional["SyncPlan"] = None
    invalidations: list[str] = field(default_factory=list)
    sync_result: Optional[SyncResult] = None
