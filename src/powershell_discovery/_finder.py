from __future__ import annotations

import logging
import os
import sys
from logging import basicConfig
from typing import TYPE_CHECKING, Final

from ._compat import fs_path_id
from ._filesystem import LocalFileSystem, probe_exists
from ._installation import InstallationCandidate
from ._platform import get_platform_details
from ._unix import propose_candidates as unix_propose
from ._windows import fix_windows_legacy_path
from ._windows import propose_candidates as win_propose

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

    from ._filesystem import FileSystem
    from ._installation import Installation
    from ._platform import PlatformDetails

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)


class PowerShellExeFinder:
    """Find the PowerShell installations present on a platform, in order of preference."""

    def __init__(
        self,
        platform_details: PlatformDetails | None = None,
        *,
        exe_name: str = "pwsh",
        additional_exe_paths: Mapping[str, str] | None = None,
        env: Mapping[str, str] | None = None,
        file_system: FileSystem | None = None,
    ) -> None:
        """
        Create a finder.

        :param platform_details: platform to search on, detected from the running process when omitted
        :param exe_name: executable name of PowerShell (without ``.exe``), e.g. ``pwsh``
        :param additional_exe_paths: extra executables to consider after the built-in locations, keyed by display name
        :param env: environment variables used to resolve install roots, defaults to :data:`os.environ`
        :param file_system: file system to probe, defaults to the local one
        :raises UnsupportedPlatformError: if *platform_details* is omitted and the host is not supported
        """
        self.env = os.environ if env is None else env
        self.platform_details = get_platform_details(self.env) if platform_details is None else platform_details
        self.exe_name = exe_name
        self.additional_exe_paths = dict(additional_exe_paths or {})
        self.file_system = LocalFileSystem() if file_system is None else file_system

    def enumerate_candidates(self) -> Generator[InstallationCandidate | None, None, None]:
        """Lazily resolve the locations PowerShell may be installed at; ``None`` for a location that cannot apply."""
        if self.platform_details.is_windows:
            yield from win_propose(self.platform_details, self.exe_name, self.env, self.file_system)
        else:
            yield from unix_propose(self.platform_details, self.exe_name)

    def _enumerate_additional_candidates(self) -> Generator[InstallationCandidate, None, None]:
        for display_name, exe_path in self.additional_exe_paths.items():
            yield InstallationCandidate(os.path.expanduser(exe_path), display_name)

    def get_all_available_installations(self) -> Generator[Installation, None, None]:
        """Yield every PowerShell installation found on disk, most preferred first, each path at most once."""
        windows = self.platform_details.is_windows
        seen: set[str] = set()
        for candidate, additional in self._candidates():
            if candidate is None:
                continue
            path_id = fs_path_id(candidate.exe_path, windows=windows)
            if path_id in seen:
                _LOGGER.debug("skip duplicate %s", candidate.exe_path)
                continue
            if not probe_exists(self.file_system, candidate.exe_path):
                if additional:
                    _LOGGER.warning(
                        "additional PowerShell %r not found at %s", candidate.display_name, candidate.exe_path
                    )
                continue
            seen.add(path_id)
            installation = candidate.validated()
            _LOGGER.info("found %s at %s", installation.display_name, installation.exe_path)
            yield installation

    def _candidates(self) -> Generator[tuple[InstallationCandidate | None, bool], None, None]:
        for candidate in self.enumerate_candidates():
            yield candidate, False
        for candidate in self._enumerate_additional_candidates():
            yield candidate, True

    def get_first_available_installation(self) -> Installation | None:
        """Return the most preferred PowerShell installation, probing no further than needed; ``None`` if none."""
        return next(self.get_all_available_installations(), None)

    def fix_windows_legacy_path(self, path: str) -> str:
        """Map a Windows PowerShell path seen through ``SysWOW64`` or ``Sysnative`` to its ``System32`` form."""
        if not self.platform_details.is_windows:
            return path
        return fix_windows_legacy_path(path)


def _run() -> None:
    basicConfig()
    finder = PowerShellExeFinder()
    installations = [repr(installation) for installation in finder.get_all_available_installations()]
    sys.stdout.write("\n".join(installations))
    sys.stdout.write("\n")


__all__ = [
    "PowerShellExeFinder",
]


if __name__ == "__main__":
    _run()
