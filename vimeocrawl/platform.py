"""Detecting which operating system the program runs on."""

from __future__ import annotations

import enum
import sys
from pathlib import Path

_LSB_RELEASE = Path("/etc/lsb-release")


class OsType(enum.IntEnum):
    """Operating systems the executors distinguish."""

    MACOS = 0
    LINUX = 1
    WINDOWS = 2
    UBUNTU = 3


_NAMES = {
    OsType.WINDOWS: "Windows",
    OsType.MACOS: "macOS",
    OsType.LINUX: "Linux",
    OsType.UBUNTU: "Ubuntu",
}


def _is_ubuntu() -> bool:
    try:
        content = _LSB_RELEASE.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return False
    return "Ubuntu" in content


def current_os() -> OsType:
    """Return the type of the running operating system; unknown ones count as Linux."""
    if sys.platform == "win32":
        return OsType.WINDOWS
    if sys.platform == "darwin":
        return OsType.MACOS
    if sys.platform.startswith("linux") and _is_ubuntu():
        return OsType.UBUNTU
    return OsType.LINUX


def os_name(os_type: int) -> str:
    """Return a display name for an operating-system type."""
    try:
        return _NAMES[OsType(os_type)]
    except ValueError:
        return "Unknown"