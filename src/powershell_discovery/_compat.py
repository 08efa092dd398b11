"""Path and environment helpers that behave per target platform rather than per host."""

from __future__ import annotations

import ntpath
import posixpath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import ModuleType


def path_module(*, windows: bool) -> ModuleType:
    return ntpath if windows else posixpath


def fs_path_id(path: str, *, windows: bool) -> str:
    return ntpath.normcase(path).casefold() if windows else path


def get_env(env: Mapping[str, str], name: str, *, windows: bool) -> str | None:
    """Look up *name* in *env*, ignoring case on Windows; empty values count as unset."""
    value = env.get(name)
    if value is None and windows:
        folded = name.casefold()
        value = next((v for k, v in env.items() if k.casefold() == folded), None)
    return value or None


__all__ = [
    "fs_path_id",
    "get_env",
    "path_module",
]
