"""FileSystem Protocol and the built-in implementation used to probe candidate installations."""

from __future__ import annotations

import logging
import os
from typing import Final, Protocol, runtime_checkable

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)


@runtime_checkable
class FileSystem(Protocol):
    """Read-only view of a file system; implementations may raise :class:`OSError` from either method."""

    def exists(self, path: str) -> bool: ...

    def list_dir(self, path: str) -> list[str]: ...


class LocalFileSystem(FileSystem):
    """The file system of the running host."""

    def exists(self, path: str) -> bool:  # noqa: PLR6301
        try:
            os.stat(path)
        except OSError:
            _LOGGER.debug("cannot stat %s", path, exc_info=True)
            return False
        return True

    def list_dir(self, path: str) -> list[str]:  # noqa: PLR6301
        try:
            return os.listdir(path)
        except OSError:
            _LOGGER.debug("cannot list %s", path, exc_info=True)
            return []


def probe_exists(file_system: FileSystem, path: str) -> bool:
    """Check *path* exists, treating any probe failure as absence."""
    try:
        found = file_system.exists(path)
    except OSError:
        _LOGGER.debug("probing %s failed", path, exc_info=True)
        return False
    _LOGGER.debug("probed %s: %s", path, "found" if found else "missing")
    return found


def probe_list_dir(file_system: FileSystem, path: str) -> list[str]:
    """List *path*, treating any probe failure as an empty directory."""
    try:
        return file_system.list_dir(path)
    except OSError:
        _LOGGER.debug("listing %s failed", path, exc_info=True)
        return []


__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "probe_exists",
    "probe_list_dir",
]
