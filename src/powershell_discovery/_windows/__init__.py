"""Windows-specific PowerShell discovery: Program Files, Microsoft Store and the OS bundled Windows PowerShell."""

from __future__ import annotations

from ._program_files import find_program_files_install, find_store_install, program_files_locations
from ._propose import propose_candidates
from ._system import find_windows_powershell, fix_windows_legacy_path, system_directories

__all__ = [
    "find_program_files_install",
    "find_store_install",
    "find_windows_powershell",
    "fix_windows_legacy_path",
    "program_files_locations",
    "propose_candidates",
    "system_directories",
]
