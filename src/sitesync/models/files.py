"""Data models for the two sides of a sync: local files and remote objects."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True, frozen=True)
class LocalFile:
    """
    A file found under the scanned root.

    Notes:
        - key is the POSIX path relative to the root (no prefix applied).
        - hash is the hex MD5 of the full contents, comparable to a
          single-part S3 ETag.
    """

    path: str
    key: str
    hash: str
    size: int


@dataclass(slots=True, frozen=True)
class RemoteObject:
    """An object listed under the bucket prefix. fingerprint is the unquoted ETag."""

    key: str
    fingerprint: str
    last_modified: Optional[datetime] = None
    size: Optional[int] = None
