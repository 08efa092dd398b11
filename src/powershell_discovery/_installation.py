"""PowerShell installation records, before and after their executable is found on disk."""

from __future__ import annotations

import sys
from dataclasses import dataclass

_DC_KW = {"frozen": True, "slots": True} if sys.version_info >= (3, 10) else {"frozen": True}


@dataclass(**_DC_KW)
class InstallationCandidate:
    """A location a PowerShell executable may be installed at."""

    exe_path: str
    display_name: str
    #: whether the executable accepts the full modern command line; every known layout does
    supports_rich_arguments: bool = True

    def validated(self) -> Installation:
        return Installation(self.exe_path, self.display_name, self.supports_rich_arguments)


@dataclass(**_DC_KW)
class Installation(InstallationCandidate):
    """A PowerShell executable that was found on disk."""


__all__ = [
    "Installation",
    "InstallationCandidate",
]
