"""Executor for Linux, with package-manager and distribution helpers."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from vimeocrawl.executor import CommandError, OsExecutor, _run, _text

_INSTALL_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("apt-get", "install", "-y"),  # Debian/Ubuntu
    ("yum", "install", "-y"),  # RHEL/CentOS (old)
    ("dnf", "install", "-y"),  # RHEL/CentOS/Fedora (new)
    ("pacman", "-S", "--noconfirm"),  # Arch Linux
    ("zypper", "install", "-y"),  # openSUSE
    ("apk", "add"),  # Alpine Linux
)

_UPDATE_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("apt-get", "update"),
    ("yum", "check-update"),
    ("dnf", "check-update"),
    ("pacman", "-Sy"),
    ("zypper", "refresh"),
    ("apk", "update"),
)

_DISTRO_MARKERS = {
    "debian_version": "debian",
    "redhat-release": "rhel",
    "arch-release": "arch",
    "SuSE-release": "suse",
    "alpine-release": "alpine",
}


class LinuxExecutor(OsExecutor):
    """Executor for Linux."""

    name = "Linux"
    shell = ("bash", "-c")

    def __init__(self, etc_dir: str | os.PathLike[str] = "/etc") -> None:
        self.etc_dir = Path(etc_dir)

    def install_package(self, package_name: str) -> None:
        """Install a package with the first package manager that succeeds."""
        for manager in _INSTALL_COMMANDS:
            tool = manager[0]
            if shutil.which(tool) is None:
                continue
            # The package name is passed after the manager's own arguments too.
            outcome = _run(["sudo", *manager, package_name, package_name])
            if not outcome.ok:
                print(
                    f"Failed to install {package_name} with {tool}: {outcome.reason}\n"
                    f"Output: {_text(outcome.output)}"
                )
                continue
            print(f"Linux: Package {package_name} installed successfully with {tool}")
            return
        raise CommandError(f"no supported package manager found to install {package_name}")

    def update_package_list(self) -> None:
        """Refresh the package list with the first package manager that succeeds."""
        for command in _UPDATE_COMMANDS:
            tool = command[0]
            if shutil.which(tool) is None:
                continue
            outcome = _run(["sudo", *command])
            if not outcome.ok:
                print(
                    f"Failed to update package list with {tool}: {outcome.reason}\n"
                    f"Output: {_text(outcome.output)}"
                )
                continue
            print(f"Linux: Package list updated successfully with {tool}")
            return
        raise CommandError("no supported package manager found for updating package list")

    def install_ffmpeg(self) -> None:
        """Refresh the package list, then install ffmpeg."""
        try:
            self.update_package_list()
        except CommandError:
            pass
        self.install_package("ffmpeg")

    def linux_distribution(self) -> str:
        """Return the distribution id, from os-release or a release marker file."""
        os_release = self.etc_dir / "os-release"
        try:
            lines = os_release.read_text(encoding="utf-8", errors="replace").splitlines()
        except OSError:
            lines = []
        for line in lines:
            if line.startswith("ID="):
                return line.strip().removeprefix("ID=").strip('"')

        for marker, distro in _DISTRO_MARKERS.items():
            if self.file_exists(self.etc_dir / marker):
                return distro
        raise OSError("could not determine Linux distribution")

    def set_file_permissions(self, path: str | os.PathLike[str], mode: int) -> None:
        """Set the permission bits of a file."""
        os.chmod(path, mode)

    def change_file_ownership(self, path: str | os.PathLike[str], owner: str) -> None:
        """Change the owner of a file with sudo chown."""
        argv = ["sudo", "chown", owner, os.fspath(path)]
        outcome = _run(argv)
        if not outcome.ok:
            raise CommandError(
                f"failed to change ownership: {outcome.reason}\nOutput: {_text(outcome.output)}",
                outcome.output,
                argv,
            )