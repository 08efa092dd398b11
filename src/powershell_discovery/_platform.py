"""Detect the operating system family and bitness PowerShell discovery runs under."""

from __future__ import annotations

import logging
import os
import struct
import sys
from enum import Enum
from typing import TYPE_CHECKING, Final, NamedTuple

from ._compat import get_env

if TYPE_CHECKING:
    from collections.abc import Mapping

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
_64BIT_POINTER_SIZE: Final[int] = 8
# only defined on 64-bit Windows, whatever the process bitness
_PROGRAM_FILES_64_VAR: Final[str] = "ProgramW6432"


class UnsupportedPlatformError(RuntimeError):
    """The host operating system is not one PowerShell can be discovered on."""


class OperatingSystem(Enum):
    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"


class PlatformDetails(NamedTuple):
    operating_system: OperatingSystem
    is_os_64bit: bool
    is_process_64bit: bool

    @property
    def is_windows(self) -> bool:
        return self.operating_system is OperatingSystem.WINDOWS


def _operating_system() -> OperatingSystem:
    if sys.platform == "win32":
        return OperatingSystem.WINDOWS
    if sys.platform.startswith("linux"):
        return OperatingSystem.LINUX
    if sys.platform == "darwin":
        return OperatingSystem.MACOS
    msg = f"cannot discover PowerShell on unsupported platform {sys.platform!r}"
    raise UnsupportedPlatformError(msg)


def _is_process_64bit() -> bool:
    # same as stdlib platform.architecture to account for pointer size != max int
    return struct.calcsize("P") == _64BIT_POINTER_SIZE


def get_platform_details(env: Mapping[str, str] | None = None) -> PlatformDetails:
    """
    Describe the platform of the running process.

    :param env: environment variables to consult, defaults to :data:`os.environ`
    :raises UnsupportedPlatformError: if the host is not Windows, Linux or macOS
    """
    env = os.environ if env is None else env
    operating_system = _operating_system()
    is_process_64bit = _is_process_64bit()
    if operating_system is OperatingSystem.WINDOWS:
        is_os_64bit = is_process_64bit or get_env(env, _PROGRAM_FILES_64_VAR, windows=True) is not None
    else:  # PowerShell is 64-bit only on Linux and macOS
        is_os_64bit = True
    details = PlatformDetails(operating_system, is_os_64bit, is_process_64bit)
    _LOGGER.debug("detected platform %r", details)
    return details


__all__ = [
    "OperatingSystem",
    "PlatformDetails",
    "UnsupportedPlatformError",
    "get_platform_details",
]
