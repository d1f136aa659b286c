"""Public model exports for sitesync."""

from __future__ import annotations

from .files import LocalFile, RemoteObject
from .results import (
    DeployResult,
    DeployStatus,
    OperationResult,
    OperationStatus,
    SyncResult,
    SyncStatus,
)

__all__ = [
    "LocalFile",
    "RemoteObject",
    "OperationStatus",
    "SyncStatus",
    "DeployStatus",
    "OperationResult",
    "SyncResult",
    "DeployResult",
]
