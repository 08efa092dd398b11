from __future__ import annotations

from typing import TYPE_CHECKING

from ._program_files import find_program_files_install, find_store_install, program_files_locations
from ._system import find_windows_powershell, system_directories

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

    from powershell_discovery._filesystem import FileSystem
    from powershell_discovery._installation import InstallationCandidate
    from powershell_discovery._platform import PlatformDetails


def propose_candidates(
    details: PlatformDetails,
    exe_name: str,
    env: Mapping[str, str],
    file_system: FileSystem,
) -> Generator[InstallationCandidate | None, None, None]:
    native, alternate = program_files_locations(details)

    yield find_program_files_install(native, exe_name, env, file_system, preview=False)
    if alternate is not None:
        yield find_program_files_install(alternate, exe_name, env, file_system, preview=False)
    yield find_store_install(exe_name, env, file_system, preview=False)

    yield find_program_files_install(native, exe_name, env, file_system, preview=True)
    yield find_store_install(exe_name, env, file_system, preview=True)
    if alternate is not None:
        yield find_program_files_install(alternate, exe_name, env, file_system, preview=True)

    for system_dir, arch in system_directories(details):
        yield find_windows_powershell(system_dir, arch, env)


__all__ = [
    "propose_candidates",
]
