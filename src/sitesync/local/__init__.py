"""Public local-scan exports for sitesync."""

from __future__ import annotations

from .scanner import DEFAULT_INCLUDE_GLOB, file_md5, scan_local

__all__ = ["DEFAULT_INCLUDE_GLOB", "file_md5", "scan_local"]
