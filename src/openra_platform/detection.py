"""Operating system family detection.

Windows hosts are recognised natively. Everywhere else the kernel name is queried
with `uname -s`: anything mentioning Darwin is OSX, any other answer is Linux. If the
query fails for any reason the platform is UNKNOWN, which directory lookup treats
like Linux. Detection never raises.

The OsProber protocol is the seam for tests: pass a fake prober returning canned
kernel names instead of spawning a process.
"""

import os
import subprocess
from enum import Enum, IntEnum
from typing import Protocol

from loguru import logger

UNAME_TIMEOUT_SECONDS = 10


class PlatformType(IntEnum):
    """Operating system family the process is running on."""

    UNKNOWN = 0
    WINDOWS = 1
    OSX = 2
    LINUX = 3


class Detection(Enum):
    """Outcome of probing the host, before it is folded into a PlatformType."""

    WINDOWS = "windows"
    DARWIN_LIKE = "darwin"
    OTHER_UNIX = "unix"
    FAILED = "failed"

    @property
    def platform_type(self) -> PlatformType:
        return _PLATFORM_TYPES[self]


_PLATFORM_TYPES = {
    Detection.WINDOWS: PlatformType.WINDOWS,
    Detection.DARWIN_LIKE: PlatformType.OSX,
    Detection.OTHER_UNIX: PlatformType.LINUX,
    Detection.FAILED: PlatformType.UNKNOWN,
}


class OsProber(Protocol):
    def is_windows_nt(self) -> bool: ...

    def kernel_name(self) -> str: ...


class UnameProber:
    """Probes the real host: os.name for Windows NT, `uname -s` for everything else."""

    def is_windows_nt(self) -> bool:
        return os.name == "nt"

    def kernel_name(self) -> str:
        """Run `uname -s` and return its standard output. Exit status is not checked."""
        result = subprocess.run(
            ["uname", "-s"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            errors="replace",
            timeout=UNAME_TIMEOUT_SECONDS,
        )
        return result.stdout


def probe(prober: OsProber) -> Detection:
    """Classify the host using `prober`. Failures to run the kernel query become FAILED."""
    if prober.is_windows_nt():
        return Detection.WINDOWS
    try:
        kernel_name = prober.kernel_name()
    except Exception as e:  # any failure to query means the platform is unknown
        logger.debug(f"Kernel name query failed: {e!r}")
        return Detection.FAILED
    if "Darwin" in kernel_name:
        return Detection.DARWIN_LIKE
    return Detection.OTHER_UNIX


def detect_platform(prober: OsProber | None = None) -> PlatformType:
    """Detect the current PlatformType. Not memoized; see PlatformEnvironment.current_platform."""
    detection = probe(prober or UnameProber())
    logger.debug(f"Platform detection: {detection.name} -> {detection.platform_type.name}")
    return detection.platform_type
