"""Fixed install locations of the PowerShell packages for Linux and macOS."""

from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING, Final, NamedTuple

from ._installation import InstallationCandidate
from ._platform import OperatingSystem

if TYPE_CHECKING:
    from collections.abc import Generator

    from ._platform import PlatformDetails


class _Layout(NamedTuple):
    directory: str
    suffix: str
    display_name: str


_LAYOUTS: Final[dict[OperatingSystem, tuple[_Layout, ...]]] = {
    OperatingSystem.LINUX: (
        _Layout("/usr/bin", "", "PowerShell"),
        _Layout("/snap/bin", "", "PowerShell Snap"),
        _Layout("/usr/bin", "-preview", "PowerShell Preview"),
        _Layout("/snap/bin", "-preview", "PowerShell Preview Snap"),
    ),
    OperatingSystem.MACOS: (
        _Layout("/usr/local/bin", "", "PowerShell"),
        _Layout("/usr/local/bin", "-preview", "PowerShell Preview"),
    ),
}


def propose_candidates(details: PlatformDetails, exe_name: str) -> Generator[InstallationCandidate, None, None]:
    for layout in _LAYOUTS[details.operating_system]:
        exe_path = posixpath.join(layout.directory, f"{exe_name}{layout.suffix}")
        yield InstallationCandidate(exe_path, layout.display_name)


__all__ = [
    "propose_candidates",
]
