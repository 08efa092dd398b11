"""PowerShell installed by the MSI/ZIP packages into ``Program Files`` or by the Microsoft Store."""

from __future__ import annotations

import logging
import ntpath
import re
from typing import TYPE_CHECKING, Final, NamedTuple

from powershell_discovery._compat import get_env
from powershell_discovery._filesystem import probe_exists, probe_list_dir
from powershell_discovery._installation import InstallationCandidate

if TYPE_CHECKING:
    from collections.abc import Mapping

    from powershell_discovery._filesystem import FileSystem
    from powershell_discovery._platform import PlatformDetails

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
_INSTALL_DIR: Final[str] = "PowerShell"
_STABLE_DIR_RE: Final[re.Pattern[str]] = re.compile(r"(\d+)")
_PREVIEW_DIR_RE: Final[re.Pattern[str]] = re.compile(r"(\d+)-preview", re.IGNORECASE)
_STORE_PACKAGE_RE: Final[dict[bool, re.Pattern[str]]] = {
    False: re.compile(r"Microsoft\.PowerShell_.+", re.IGNORECASE),
    True: re.compile(r"Microsoft\.PowerShellPreview_.+", re.IGNORECASE),
}


class ProgramFiles(NamedTuple):
    env_var: str
    arch: str


def program_files_locations(details: PlatformDetails) -> tuple[ProgramFiles, ProgramFiles | None]:
    """Return the native and, when the OS has one, the alternate bitness ``Program Files`` directory."""
    if details.is_process_64bit:
        return ProgramFiles("ProgramFiles", "x64"), ProgramFiles("ProgramFiles(x86)", "x86")
    if details.is_os_64bit:  # WOW64 points ProgramFiles at the x86 folder
        return ProgramFiles("ProgramFiles", "x86"), ProgramFiles("ProgramW6432", "x64")
    return ProgramFiles("ProgramFiles", "x86"), None


def find_program_files_install(
    location: ProgramFiles,
    exe_name: str,
    env: Mapping[str, str],
    file_system: FileSystem,
    *,
    preview: bool,
) -> InstallationCandidate | None:
    """
    Find the highest major version installed under ``<Program Files>\\PowerShell``.

    Stable releases live in directories named after their major version (``7``), previews in ``<major>-preview``.
    """
    root = get_env(env, location.env_var, windows=True)
    if root is None:
        _LOGGER.debug("skip %s Program Files, %s is not set", location.arch, location.env_var)
        return None
    base_dir = ntpath.join(root, _INSTALL_DIR)
    pattern = _PREVIEW_DIR_RE if preview else _STABLE_DIR_RE
    highest: tuple[int, str] | None = None
    for entry in probe_list_dir(file_system, base_dir):
        if not (match := pattern.fullmatch(entry)):
            continue
        version = int(match.group(1))
        if highest is not None and version <= highest[0]:
            continue
        exe_path = ntpath.join(base_dir, entry, f"{exe_name}.exe")
        if probe_exists(file_system, exe_path):
            highest = version, exe_path
    if highest is None:
        return None
    label = "PowerShell Preview" if preview else "PowerShell"
    return InstallationCandidate(highest[1], f"{label} ({location.arch})")


def find_store_install(
    exe_name: str,
    env: Mapping[str, str],
    file_system: FileSystem,
    *,
    preview: bool,
) -> InstallationCandidate | None:
    local_app_data = get_env(env, "LOCALAPPDATA", windows=True)
    if local_app_data is None:
        _LOGGER.debug("skip Store install, LOCALAPPDATA is not set")
        return None
    apps_dir = ntpath.join(local_app_data, "Microsoft", "WindowsApps")
    pattern = _STORE_PACKAGE_RE[preview]
    for entry in sorted(probe_list_dir(file_system, apps_dir)):
        if pattern.fullmatch(entry):
            label = "PowerShell Preview" if preview else "PowerShell"
            return InstallationCandidate(ntpath.join(apps_dir, entry, f"{exe_name}.exe"), f"{label} (Store)")
    return None


__all__ = [
    "ProgramFiles",
    "find_program_files_install",
    "find_store_install",
    "program_files_locations",
]
