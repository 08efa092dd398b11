"""Windows PowerShell, the edition shipped with the OS inside the system directory."""

from __future__ import annotations

import logging
import ntpath
import re
from typing import TYPE_CHECKING, Final

from powershell_discovery._compat import get_env
from powershell_discovery._installation import InstallationCandidate

if TYPE_CHECKING:
    from collections.abc import Mapping

    from powershell_discovery._platform import PlatformDetails

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
SYSTEM32: Final[str] = "System32"
SYSWOW64: Final[str] = "SysWOW64"
SYSNATIVE: Final[str] = "Sysnative"
_REDIRECTED_DIR_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    (?<![^\\/])              # start of path or after a separator
    (?:SysWOW64|Sysnative)   # file system redirector alias
    (?![^\\/])               # end of path or before a separator
    """,
    re.VERBOSE | re.IGNORECASE,
)


def system_directories(details: PlatformDetails) -> list[tuple[str, str]]:
    """
    Return ``(directory, arch)`` pairs under ``%windir%`` holding Windows PowerShell, native bitness first.

    WOW64 maps ``System32`` to the 32-bit binaries for 32-bit processes. A 64-bit process reaches those through
    ``SysWOW64``, while a 32-bit process reaches the 64-bit binaries through the virtual ``Sysnative`` directory.
    """
    if details.is_process_64bit:
        return [(SYSTEM32, "x64"), (SYSWOW64, "x86")]
    if details.is_os_64bit:
        return [(SYSTEM32, "x86"), (SYSNATIVE, "x64")]
    return [(SYSTEM32, "x86")]


def find_windows_powershell(system_dir: str, arch: str, env: Mapping[str, str]) -> InstallationCandidate | None:
    windir = get_env(env, "windir", windows=True)
    if windir is None:
        _LOGGER.debug("skip Windows PowerShell in %s, windir is not set", system_dir)
        return None
    exe_path = ntpath.join(windir, system_dir, "WindowsPowerShell", "v1.0", "powershell.exe")
    return InstallationCandidate(exe_path, f"Windows PowerShell ({arch})")


def fix_windows_legacy_path(path: str) -> str:
    """Rewrite a ``SysWOW64`` or ``Sysnative`` path segment to ``System32``, leaving everything else intact."""
    return _REDIRECTED_DIR_RE.sub(SYSTEM32, path)


__all__ = [
    "SYSNATIVE",
    "SYSTEM32",
    "SYSWOW64",
    "find_windows_powershell",
    "fix_windows_legacy_path",
    "system_directories",
]
