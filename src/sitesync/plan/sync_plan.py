"""SyncPlan model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .actions import MUTATING_ACTIONS, Action
from .plan_item import PlanItem


@dataclass(slots=True)
class SyncPlan:
    """An ordered plan that can be reviewed and then applied."""

    items: list[PlanItem]
    region: str
    bucket: str
    endpoint: Optional[str] = None

    plan_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def mutating_items(self) -> list[PlanItem]:
        return [item for item in self.items if item.action in MUTATING_ACTIONS]

    @property
    def has_changes(self) -> bool:
        return any(item.action in MUTATING_ACTIONS for item in self.items)

    def get(self, key: str) -> PlanItem:
        """Return the item for key. Raises KeyError."""
        for item in self.items:
            if item.key == key:
                return item
        raise KeyError(key)

    def count_by_action(self) -> dict[Action, int]:
        counts: dict[Action, int] = {}
        for item in self.items:
            counts[item.action] = counts.get(item.action, 0) + 1
        return counts
