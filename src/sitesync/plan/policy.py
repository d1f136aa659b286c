"""Cache policy resolution from glob rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from sitesync.config import SyncOptions
from sitesync.util.glob import is_match

from .sink import NullSink, PlanSink

DEFAULT_CACHE_CONTROL: str = "max-age=2628000, public"
INVALIDATE_CACHE_CONTROL: str = "public, must-revalidate"

_MAX_AGE_RE = re.compile(r"(?:^|[\s,])max-age\s*=\s*\"?(\d+)", re.IGNORECASE)


@dataclass(slots=True, frozen=True)
class CachePolicy:
    cache_control: str
    cache: bool


def is_cacheable(cache_control: str) -> bool:
    """Return True if cache_control carries a positive max-age directive."""
    match = _MAX_AGE_RE.search(cache_control)
    return match is not None and int(match.group(1)) > 0


def resolve_cache_policy(
    key: str,
    options: SyncOptions,
    sink: Optional[PlanSink] = None,
) -> CachePolicy:
    """
    Resolve Cache-Control for key.

    Precedence:
        1. options.cache_control, or DEFAULT_CACHE_CONTROL.
        2. Every matching cache_control_glob rule in list order; the last
           match wins.
        3. A match in invalidate_glob forces INVALIDATE_CACHE_CONTROL,
           whatever the rules said.
    """
    sink = sink or NullSink()
    cache_control = options.cache_control or DEFAULT_CACHE_CONTROL

    for rule in options.cache_control_glob:
        if is_match(key, rule.glob):
            sink.emit("cache-rule-matched", key=key, glob=rule.glob, cache_control=rule.cache_control)
            cache_control = rule.cache_control

    if options.invalidate_glob and is_match(key, options.invalidate_glob):
        sink.emit("invalidate-glob-matched", key=key)
        cache_control = INVALIDATE_CACHE_CONTROL

    return CachePolicy(cache_control=cache_control, cache=is_cacheable(cache_control))
