"""Reporting sinks the planner emits events into."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol


class PlanSink(Protocol):
    def emit(self, event: str, **fields: Any) -> None: ...


class NullSink:
    """Drops every event."""

    def emit(self, event: str, **fields: Any) -> None:
        return None


class LoggingSink:
    """Forwards events to a logger at DEBUG level."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG) -> None:
        self._logger = logger or logging.getLogger("sitesync.plan")
        self._level = level

    def emit(self, event: str, **fields: Any) -> None:
        if not self._logger.isEnabledFor(self._level):
            return
        rendered = " ".join(f"{k}={v}" for k, v in fields.items())
        self._logger.log(self._level, "%s %s", event, rendered)


@dataclass(slots=True)
class RecordingSink:
    """Keeps events in memory (useful for tests)."""

    events: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def emit(self, event: str, **fields: Any) -> None:
        self.events.append((event, dict(fields)))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]
