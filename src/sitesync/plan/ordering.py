"""Execution ordering for SyncPlan items."""

from __future__ import annotations

from typing import Iterable

from .actions import ACTION_PRIORITY
from .plan_item import PlanItem


def sort_plan_items(items: Iterable[PlanItem]) -> list[PlanItem]:
    """
    Order plan items for review and execution.

    Rules:
        - Action priority: Unknown < Ignore < Unchanged < Create < Update < Delete.
        - Within one action, cached items come before non-cached ones.
        - Otherwise encounter order is kept (stable sort). Keys are NOT a
          sort dimension.
    """
    return sorted(items, key=_sort_key)


def _sort_key(item: PlanItem) -> tuple[int, int]:
    return (ACTION_PRIORITY[item.action], 0 if item.cache else 1)
