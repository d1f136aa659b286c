"""CDN invalidation path derivation."""

from __future__ import annotations

from typing import Iterable
from urllib.parse import quote

from .sync_plan import SyncPlan

# Characters left as-is: the unreserved/reserved set a CDN expects unescaped.
# Anything else (spaces, non-ASCII, `%`, `"`, `<`, ...) is percent-encoded.
_SAFE_PATH_CHARS = ";,/?:@&=+$!~*'()#"


def encode_invalidation_path(key: str) -> str:
    """Return the absolute, percent-encoded invalidation path for key."""
    return "/" + quote(key, safe=_SAFE_PATH_CHARS)


def prepare_invalidation_paths(
    plan: SyncPlan,
    extra_paths: Iterable[str] = (),
) -> list[str]:
    """
    Collect paths to invalidate for plan.

    An item contributes when it is marked invalidate and has a remote
    object. extra_paths are appended unchanged, after the plan's own paths.
    """
    paths = [
        encode_invalidation_path(item.remote.key)
        for item in plan.items
        if item.invalidate and item.remote is not None
    ]
    paths.extend(extra_paths)
    return paths
