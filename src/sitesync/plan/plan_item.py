"""PlanItem model: one key of the reconciliation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from sitesync.models import LocalFile, RemoteObject

from .actions import UPLOAD_ACTIONS, Action

DEFAULT_CONTENT_DISPOSITION: str = "inline"


@dataclass(slots=True, frozen=True)
class PlanItem:
    """
    A single key within a SyncPlan.

    Notes:
        - local, remote, or both are set; never neither.
        - Items are immutable. The planner derives classified items with
          dataclasses.replace.
        - data, when set, is uploaded instead of the local file's bytes.
    """

    key: str
    action: Action

    local: Optional[LocalFile] = None
    remote: Optional[RemoteObject] = None

    cache_control: Optional[str] = None
    cache: bool = False
    invalidate: bool = False

    content_type: Optional[str] = None
    content_disposition: Optional[str] = None
    acl: Optional[str] = None
    data: Optional[Union[str, bytes]] = None

    def validate_required_fields(self) -> None:
        """Validate required fields according to action. Raises ValueError."""
        if not self.key:
            raise ValueError("Missing required field: key")
        if self.local is None and self.remote is None:
            raise ValueError("PlanItem needs local or remote")

        if self.action in UPLOAD_ACTIONS:
            if self.local is None and self.data is None:
                raise ValueError("Missing required field: local (or data)")
            return

        if self.action is Action.DELETE:
            if self.remote is None:
                raise ValueError("Missing required field: remote")
            return
