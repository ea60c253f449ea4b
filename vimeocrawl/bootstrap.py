"""Setting up the executor and services for the running system."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from vimeocrawl.executor import MacOsExecutor, OsExecutor
from vimeocrawl.linux import LinuxExecutor
from vimeocrawl.m3u8 import M3u8Service
from vimeocrawl.platform import OsType, current_os, os_name
from vimeocrawl.windows import WindowsExecutor

log = logging.getLogger(__name__)


@dataclass
class Runtime:
    """The services the program works with."""

    os_type: int
    executor: OsExecutor | None
    m3u8: M3u8Service | None = None


def create_executor(os_type: int) -> OsExecutor | None:
    """Return the executor for an operating-system type, or None if there is none."""
    if os_type == OsType.WINDOWS:
        return WindowsExecutor()
    if os_type == OsType.LINUX:
        return LinuxExecutor()
    if os_type == OsType.MACOS:
        return MacOsExecutor()
    return None


def validate_runtime(runtime: Runtime) -> None:
    """Check that the runtime has an executor and a valid system type."""
    if runtime.executor is None:
        raise RuntimeError("global OS executor is not initialized")
    if runtime.os_type < 0:
        raise RuntimeError("global OS_SYSTEM is not properly set")
    log.info("OS System validation passed: %s", os_name(runtime.os_type))


def initialize(os_type: int | None = None) -> Runtime:
    """Detect the system (unless given), build its executor and the M3U8 service."""
    if os_type is None:
        os_type = current_os()
    runtime = Runtime(os_type=os_type, executor=create_executor(os_type))
    log.info("OS System initialized: %s (Type: %d)", os_name(os_type), int(os_type))
    validate_runtime(runtime)

    runtime.m3u8 = M3u8Service(runtime.executor)
    log.info("M3U8 service initialized successfully")
    log.info("Initialization completed successfully")
    return runtime