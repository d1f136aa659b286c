"""Local directory scanner: walks a build directory and hashes matching files."""

from __future__ import annotations

import hashlib
import logging
import os
from typing import Iterator

from sitesync.config import ScanOptions
from sitesync.errors import ConfigurationError, ScanError
from sitesync.models import LocalFile
from sitesync.util.glob import is_match

logger = logging.getLogger(__name__)

DEFAULT_INCLUDE_GLOB: tuple[str, ...] = ("**",)

_CHUNK_SIZE = 1024 * 1024


def file_md5(path: str, chunk_size: int = _CHUNK_SIZE) -> str:
    """
    Return the hex MD5 of a file, reading it in chunks.

    Raises:
        ScanError: if the file cannot be read.
    """
    digest = hashlib.md5()
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(chunk_size), b""):
                digest.update(chunk)
    except OSError as exc:
        raise ScanError(
            "Failed to read local file",
            details={"path": path},
            cause=exc,
        ) from exc
    return digest.hexdigest()


def scan_local(options: ScanOptions) -> Iterator[LocalFile]:
    """
    Yield a LocalFile for every file under options.path that matches.

    A file matches when its relative POSIX key matches any include glob
    (default: everything) and no exclude glob. Each call walks the tree
    again; iteration order is not guaranteed. Symbolic links are followed,
    except a directory link back onto the path being walked.

    Raises:
        ConfigurationError: if options.path is not a directory.
        ScanError: if a matched file cannot be stat'ed or read.
    """
    root = os.path.abspath(options.path)
    if not os.path.isdir(root):
        raise ConfigurationError(
            "Scan root is not a directory",
            details={"path": root},
        )

    include = options.include_glob or DEFAULT_INCLUDE_GLOB
    exclude = options.exclude_glob

    # Real paths of the directories on the current walk path, per dirpath.
    chains: dict[str, tuple[str, ...]] = {root: (os.path.realpath(root),)}

    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_raise_walk_error, followlinks=True
    ):
        chain = chains.pop(dirpath, (os.path.realpath(dirpath),))
        kept: list[str] = []
        for name in sorted(dirnames):
            child = os.path.join(dirpath, name)
            real = os.path.realpath(child)
            if real in chain:
                logger.warning("Skipping symlink loop at %s", child)
                continue
            chains[child] = chain + (real,)
            kept.append(name)
        dirnames[:] = kept

        for name in sorted(filenames):
            abs_path = os.path.join(dirpath, name)
            if not os.path.isfile(abs_path):
                continue

            key = os.path.relpath(abs_path, root).replace(os.sep, "/")
            if not is_match(key, include):
                continue
            if exclude and is_match(key, exclude):
                logger.debug("Excluded %s", key)
                continue

            yield _describe(abs_path, key)


def _describe(abs_path: str, key: str) -> LocalFile:
    try:
        size = os.stat(abs_path).st_size
    except OSError as exc:
        raise ScanError(
            "Failed to stat local file",
            details={"path": abs_path},
            cause=exc,
        ) from exc
    return LocalFile(path=abs_path, key=key, hash=file_md5(abs_path), size=size)


def _raise_walk_error(exc: OSError) -> None:
    raise ScanError(
        "Failed to list local directory",
        details={"path": getattr(exc, "filename", None)},
        cause=exc,
    ) from exc
