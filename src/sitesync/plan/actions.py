"""Plan actions for sitesync."""

from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """Classification of one key after reconciliation."""

    UNKNOWN = "Unknown"
    UNCHANGED = "Unchanged"
    IGNORE = "Ignore"
    DELETE = "Delete"
    UPDATE = "Update"
    CREATE = "Create"


# Informational actions first, destructive ones last.
ACTION_PRIORITY: dict[Action, int] = {
    Action.UNKNOWN: 0,
    Action.IGNORE: 1,
    Action.UNCHANGED: 2,
    Action.CREATE: 3,
    Action.UPDATE: 4,
    Action.DELETE: 5,
}

UPLOAD_ACTIONS: frozenset[Action] = frozenset({Action.CREATE, Action.UPDATE})
MUTATING_ACTIONS: frozenset[Action] = frozenset({Action.CREATE, Action.UPDATE, Action.DELETE})
