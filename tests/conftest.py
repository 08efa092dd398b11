from __future__ import annotations

import ntpath
import posixpath
from typing import TYPE_CHECKING

import pytest

from powershell_discovery._compat import fs_path_id

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


class FakeFileSystem:
    """In-memory file system holding the given files; records every path probed for existence."""

    def __init__(self, files: Iterable[str] = (), *, windows: bool = False) -> None:
        self._windows = windows
        self._path = ntpath if windows else posixpath
        self._files: set[str] = set()
        self._dirs: dict[str, dict[str, str]] = {}
        self.probed: list[str] = []
        for file in files:
            self._files.add(self._key(file))
            child, parent = file, self._path.dirname(file)
            while parent != child:
                self._dirs.setdefault(self._key(parent), {})[self._key(child)] = self._path.basename(child)
                child, parent = parent, self._path.dirname(parent)

    def _key(self, path: str) -> str:
        return fs_path_id(self._path.normpath(path), windows=self._windows)

    def exists(self, path: str) -> bool:
        self.probed.append(path)
        key = self._key(path)
        return key in self._files or key in self._dirs

    def list_dir(self, path: str) -> list[str]:
        key = self._key(path)
        if key not in self._dirs:
            raise FileNotFoundError(path)
        return list(self._dirs[key].values())


@pytest.fixture
def fake_fs() -> Callable[..., FakeFileSystem]:
    return FakeFileSystem
