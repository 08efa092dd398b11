"""Discover the PowerShell installations present on Windows, Linux and macOS."""

from __future__ import annotations

from importlib.metadata import version

from ._filesystem import FileSystem, LocalFileSystem
from ._finder import PowerShellExeFinder
from ._installation import Installation, InstallationCandidate
from ._platform import OperatingSystem, PlatformDetails, UnsupportedPlatformError, get_platform_details

__version__ = version("powershell-discovery")

__all__ = [
    "FileSystem",
    "Installation",
    "InstallationCandidate",
    "LocalFileSystem",
    "OperatingSystem",
    "PlatformDetails",
    "PowerShellExeFinder",
    "UnsupportedPlatformError",
    "__version__",
    "get_platform_details",
]
