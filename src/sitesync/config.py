"""Option objects for scanning, planning and deploying (validated on construction)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union

from sitesync.errors import ConfigurationError
from sitesync.util.glob import validate_pattern

DEFAULT_BUILD_PATH: str = "dist"

GlobInput = Union[str, Iterable[str], None]


def to_glob_tuple(value: GlobInput, field_name: str) -> tuple[str, ...]:
    """Normalize a glob option (None, a string, or a list) into a tuple."""
    if value is None:
        return ()
    items = (value,) if isinstance(value, str) else tuple(value)
    for item in items:
        try:
            validate_pattern(item)
        except ValueError as exc:
            raise ConfigurationError(
                f"Invalid glob in {field_name}",
                details={"field": field_name, "glob": item},
                cause=exc,
            ) from exc
    return items


@dataclass(slots=True, frozen=True)
class CacheControlRule:
    """A Cache-Control value applied to keys matching glob."""

    glob: str
    cache_control: str

    def __post_init__(self) -> None:
        try:
            validate_pattern(self.glob)
        except ValueError as exc:
            raise ConfigurationError(
                "CacheControlRule.glob is invalid",
                details={"glob": self.glob},
                cause=exc,
            ) from exc
        if not isinstance(self.cache_control, str) or not self.cache_control.strip():
            raise ConfigurationError(
                "CacheControlRule.cache_control must be a non-empty string",
                details={"glob": self.glob},
            )


@dataclass(slots=True, frozen=True)
class ScanOptions:
    """Local scan input: root directory plus include/exclude globs."""

    path: str
    include_glob: tuple[str, ...] = ()
    exclude_glob: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.path, str) or not self.path.strip():
            raise ConfigurationError("ScanOptions.path must be a non-empty string")
        object.__setattr__(self, "include_glob", to_glob_tuple(self.include_glob, "include_glob"))
        object.__setattr__(self, "exclude_glob", to_glob_tuple(self.exclude_glob, "exclude_glob"))


@dataclass(slots=True, frozen=True)
class SyncOptions:
    """
    Planner/bucket options.

    Required:
        - region
        - bucket

    Notes:
        - cache_control_glob rules are applied in order and the LAST matching
          rule wins.
        - invalidate_glob always overrides cache_control_glob.
        - ignore_glob is matched against remote keys (prefix included).
    """

    region: str
    bucket: str
    endpoint: Optional[str] = None
    prefix: Optional[str] = None
    purge: bool = False
    force: bool = False
    invalidate_changes: bool = True
    acl: Optional[str] = None
    cache_control: Optional[str] = None
    cache_control_glob: tuple[CacheControlRule, ...] = ()
    invalidate_glob: tuple[str, ...] = ()
    ignore_glob: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("region", "bucket"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(
                    f"SyncOptions.{name} must be a non-empty string",
                    details={"field": name},
                )

        rules = []
        for rule in self.cache_control_glob or ():
            if isinstance(rule, Mapping):
                rule = CacheControlRule(
                    glob=rule.get("glob"),  # type: ignore[arg-type]
                    cache_control=rule.get("cache_control", rule.get("cacheControl")),  # type: ignore[arg-type]
                )
            if not isinstance(rule, CacheControlRule):
                raise ConfigurationError(
                    "cache_control_glob entries must be CacheControlRule or mappings",
                    details={"entry": repr(rule)},
                )
            rules.append(rule)

        object.__setattr__(self, "cache_control_glob", tuple(rules))
        object.__setattr__(
            self, "invalidate_glob", to_glob_tuple(self.invalidate_glob, "invalidate_glob")
        )
        object.__setattr__(self, "ignore_glob", to_glob_tuple(self.ignore_glob, "ignore_glob"))

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        *,
        defaults: Optional[Mapping[str, Any]] = None,
        ignore_glob: GlobInput = None,
    ) -> "SyncOptions":
        """
        Build options from an already-parsed deploy mapping (camelCase keys).

        `defaults` supplies top-level region/endpoint when the mapping omits them.
        """
        defaults = defaults or {}
        return cls(
            region=data.get("region") or defaults.get("region"),  # type: ignore[arg-type]
            bucket=data.get("bucket"),  # type: ignore[arg-type]
            endpoint=data.get("endpoint") or defaults.get("endpoint"),
            prefix=data.get("prefix"),
            purge=bool(data.get("purge", False)),
            force=bool(data.get("force", False)),
            invalidate_changes=not (data.get("skipChangesInvalidation") is True),
            acl=data.get("acl"),
            cache_control=data.get("cacheControl"),
            cache_control_glob=tuple(data.get("cacheControlGlob") or ()),
            invalidate_glob=data.get("invalidateGlob"),  # type: ignore[arg-type]
            ignore_glob=ignore_glob,  # type: ignore[arg-type]
        )


@dataclass(slots=True, frozen=True)
class CloudfrontOptions:
    """CDN settings of a deploy target. Only the invalidation path list is produced here."""

    distribution_ids: tuple[str, ...] = ()
    invalidate_paths: tuple[str, ...] = ()
    region: Optional[str] = None

    def __post_init__(self) -> None:
        ids = self.distribution_ids
        object.__setattr__(
            self, "distribution_ids", (ids,) if isinstance(ids, str) else tuple(ids or ())
        )
        paths = self.invalidate_paths
        object.__setattr__(
            self, "invalidate_paths", (paths,) if isinstance(paths, str) else tuple(paths or ())
        )

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        *,
        defaults: Optional[Mapping[str, Any]] = None,
    ) -> "CloudfrontOptions":
        defaults = defaults or {}
        return cls(
            distribution_ids=data.get("distributionId") or (),
            invalidate_paths=data.get("invalidatePaths") or (),
            region=data.get("region") or defaults.get("region"),
        )


@dataclass(slots=True, frozen=True)
class DeployTarget:
    """A named deploy: a build directory, its filters, and where it goes."""

    name: str
    build_path: str = DEFAULT_BUILD_PATH
    include_glob: tuple[str, ...] = ()
    ignore_glob: tuple[str, ...] = ()
    s3: Optional[SyncOptions] = None
    cloudfront: Optional[CloudfrontOptions] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationError("DeployTarget.name must be a non-empty string")
        if not isinstance(self.build_path, str) or not self.build_path.strip():
            raise ConfigurationError(
                "DeployTarget.build_path must be a non-empty string",
                details={"target": self.name},
            )
        object.__setattr__(self, "include_glob", to_glob_tuple(self.include_glob, "include_glob"))
        object.__setattr__(self, "ignore_glob", to_glob_tuple(self.ignore_glob, "ignore_glob"))

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        *,
        defaults: Optional[Mapping[str, Any]] = None,
    ) -> "DeployTarget":
        """
        Build a target from a parsed mapping.

        The target's ignoreGlob is both the scanner's exclude list and the
        planner's remote ignore list.
        """
        ignore_glob = to_glob_tuple(data.get("ignoreGlob"), "ignoreGlob")

        s3 = None
        if data.get("s3") is not None:
            s3 = SyncOptions.from_mapping(data["s3"], defaults=defaults, ignore_glob=ignore_glob)

        cloudfront = None
        if data.get("cloudfront") is not None:
            cloudfront = CloudfrontOptions.from_mapping(data["cloudfront"], defaults=defaults)

        return cls(
            name=data.get("name", "default"),
            build_path=data.get("buildPath") or DEFAULT_BUILD_PATH,
            include_glob=data.get("includeGlob"),  # type: ignore[arg-type]
            ignore_glob=ignore_glob,
            s3=s3,
            cloudfront=cloudfront,
        )

    def scan_options(self, root: str) -> ScanOptions:
        """Scan options for this target with build_path resolved under root."""
        return ScanOptions(
            path=os.path.join(root, self.build_path),
            include_glob=self.include_glob,
            exclude_glob=self.ignore_glob,
        )


def load_deploy_targets(data: Mapping[str, Any]) -> list[DeployTarget]:
    """
    Build targets from a parsed deploy configuration.

    `data["deploy"]` may be a single mapping (name defaults to "default") or a
    list of mappings. Top-level region/endpoint are used as defaults.
    """
    if "deploy" not in data:
        raise ConfigurationError("Deploy configuration has no 'deploy' section")

    defaults = {"region": data.get("region"), "endpoint": data.get("endpoint")}
    raw = data["deploy"]
    entries = raw if isinstance(raw, list) else [raw]
    return [DeployTarget.from_mapping(entry, defaults=defaults) for entry in entries]
