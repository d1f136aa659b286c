"""Human-readable rendering of a SyncPlan for review before apply."""

from __future__ import annotations

import logging
from typing import Optional

from sitesync.plan import Action, PlanItem, SyncPlan

logger = logging.getLogger(__name__)

_QUIET_ACTIONS: frozenset[Action] = frozenset({Action.UNCHANGED, Action.IGNORE, Action.UNKNOWN})


def format_plan_item(item: PlanItem) -> str:
    """One table row: action, invalidate flag, cache column, DATA marker, key, size."""
    if item.cache:
        cache_col = "Cached" if item.action is Action.UNCHANGED else f'"{item.cache_control}"'
    else:
        cache_col = ""

    columns = "\t".join(
        [
            ("Invalidate" if item.invalidate else "").ljust(10),
            cache_col.ljust(25),
            ("DATA" if item.data is not None else "").ljust(6),
        ]
    )
    size = f"({item.local.size}b {item.content_type or ''})" if item.local else ""
    return f"{item.action.value.ljust(9)}{columns} {item.key} {size}".rstrip()


def format_sync_plan(plan: SyncPlan, verbose: bool = False) -> list[str]:
    """
    Render plan rows in plan order.

    Unless verbose, Unchanged/Ignore/Unknown rows are left out.
    """
    return [
        format_plan_item(item)
        for item in plan.items
        if verbose or item.action not in _QUIET_ACTIONS
    ]


def log_sync_plan(
    plan: SyncPlan,
    verbose: bool = False,
    log: Optional[logging.Logger] = None,
) -> list[str]:
    """Log the rendered plan at INFO level and return the rows."""
    log = log or logger
    rows = format_sync_plan(plan, verbose=verbose)
    for row in rows:
        log.info("%s", row)

    unknown = [item.key for item in plan.items if item.action is Action.UNKNOWN]
    if unknown:
        log.info("%d remote object(s) not present locally (kept; enable purge to delete)", len(unknown))
    return rows
