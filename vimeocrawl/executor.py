"""Running commands and managing files and directories on the host system."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Iterable, Sequence
from typing import NamedTuple


class CommandError(OSError):
    """Raised when an external command fails or cannot be started."""

    def __init__(
        self,
        message: str,
        output: bytes = b"",
        command: Sequence[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.output = output
        self.command = list(command) if command is not None else None


class _Outcome(NamedTuple):
    ok: bool
    output: bytes
    reason: str


def _run(argv: Sequence[str]) -> _Outcome:
    """Run a command, capturing stdout and stderr together."""
    try:
        proc = subprocess.run(
            list(argv),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as exc:
        return _Outcome(False, b"", str(exc))
    output = proc.stdout or b""
    if proc.returncode != 0:
        return _Outcome(False, output, f"exit status {proc.returncode}")
    return _Outcome(True, output, "")


def _text(output: bytes) -> str:
    return output.decode("utf-8", errors="replace")


class OsExecutor:
    """File, directory and command operations with POSIX command fallbacks.

    Each operation first uses Python's own file functions and falls back to
    the system's command-line tools when those fail.
    """

    name = "Unix"
    shell: tuple[str, ...] = ("sh", "-c")

    # -- hooks for platform-specific fallbacks -----------------------------

    def _mkdir_fallback(self, path: str) -> tuple[list[str], str]:
        return ["mkdir", "-p", path], "mkdir"

    def _delete_fallback(self, path: str) -> tuple[list[str], str]:
        return ["rm", "-f", path], "rm command"

    def _remove_dir_fallback(self, path: str) -> tuple[list[str], str]:
        return ["rm", "-rf", path], "rm -rf"

    def _loosen_permissions(self, path: str) -> None:
        try:
            os.chmod(path, 0o666)
        except OSError:
            pass

    def _force_delete(self, path: str) -> None:
        first = _run(["rm", "-rf", path])
        if first.ok:
            return
        # Last resort; may prompt for a password.
        sudo = _run(["sudo", "rm", "-rf", path])
        if not sudo.ok:
            raise CommandError(
                f"{self.name} force delete failed: {first.reason}\n"
                f"Output: {_text(first.output)}\nSudo Output: {_text(sudo.output)}",
                first.output,
                ["rm", "-rf", path],
            )

    # -- commands ----------------------------------------------------------

    def execute_command(self, command: str, *args: str) -> bytes:
        """Run a program with arguments and return its combined output."""
        argv = [command, *args]
        outcome = _run(argv)
        if not outcome.ok:
            raise CommandError(
                f"{self.name} command failed: {outcome.reason}\n"
                f"Command: {command} [{' '.join(args)}]\nOutput: {_text(outcome.output)}",
                outcome.output,
                argv,
            )
        return outcome.output

    def execute_shell_command(self, command: str, *args: str) -> bytes:
        """Run a command line through the system shell and return its output."""
        full_command = " ".join([command, *args])
        argv = [*self.shell, full_command]
        outcome = _run(argv)
        if not outcome.ok:
            raise CommandError(
                f"{self.name} shell command failed: {outcome.reason}\n"
                f"Command: {full_command}\nOutput: {_text(outcome.output)}",
                outcome.output,
                argv,
            )
        return outcome.output

    # -- directories -------------------------------------------------------

    def create_dir_if_not_exists(self, path: str | os.PathLike[str]) -> None:
        """Create the directory that would contain the file at path."""
        self.create_directory(os.path.dirname(os.fspath(path)) or ".")

    def create_directory(self, path: str | os.PathLike[str]) -> None:
        """Create a directory and any missing parents."""
        path = os.fspath(path)
        try:
            os.makedirs(path, 0o755, exist_ok=True)
            return
        except OSError:
            pass
        argv, tool = self._mkdir_fallback(path)
        outcome = _run(argv)
        if not outcome.ok:
            raise CommandError(
                f"{self.name} {tool} failed: {outcome.reason}\nOutput: {_text(outcome.output)}",
                outcome.output,
                argv,
            )

    def remove_directory(self, path: str | os.PathLike[str]) -> None:
        """Remove a directory tree; a missing path is not an error."""
        path = os.fspath(path)
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            elif os.path.lexists(path):
                os.remove(path)
            return
        except OSError:
            pass
        argv, tool = self._remove_dir_fallback(path)
        outcome = _run(argv)
        if not outcome.ok:
            raise CommandError(
                f"{self.name} {tool} failed: {outcome.reason}\nOutput: {_text(outcome.output)}",
                outcome.output,
                argv,
            )
        print(f"{self.name}: Directory removed: {path}")

    # -- files -------------------------------------------------------------

    def delete_file(self, path: str | os.PathLike[str]) -> None:
        """Delete a file; a missing file is reported but not an error."""
        path = os.fspath(path)
        if not path:
            raise ValueError("file path cannot be empty")
        if not self.file_exists(path):
            print(f"{self.name}: File doesn't exist: {path}")
            return
        try:
            os.remove(path)
            print(f"{self.name}: File deleted successfully: {path}")
            return
        except OSError:
            pass
        argv, tool = self._delete_fallback(path)
        outcome = _run(argv)
        if not outcome.ok:
            raise CommandError(
                f"{self.name} {tool} failed: {outcome.reason}\nOutput: {_text(outcome.output)}",
                outcome.output,
                argv,
            )
        print(f"{self.name}: File deleted via command: {path}")

    def delete_file_force(self, path: str | os.PathLike[str]) -> None:
        """Delete a file, clearing protections and escalating if needed."""
        path = os.fspath(path)
        if not path:
            raise ValueError("file path cannot be empty")
        if not self.file_exists(path):
            print(f"{self.name}: File doesn't exist: {path}")
            return
        self._loosen_permissions(path)
        try:
            self.delete_file(path)
            return
        except OSError:
            pass
        self._force_delete(path)
        print(f"{self.name}: File force deleted: {path}")

    def delete_files(self, paths: Iterable[str | os.PathLike[str]]) -> None:
        """Delete every file given, then report all failures together."""
        failures = []
        for path in paths:
            try:
                self.delete_file(path)
            except (OSError, ValueError) as exc:
                failures.append(f"failed to delete {os.fspath(path)}: {exc}")
        if failures:
            raise OSError(
                f"{self.name}: some files could not be deleted:\n" + "\n".join(failures)
            )

    def file_exists(self, path: str | os.PathLike[str]) -> bool:
        """Tell whether path exists; errors other than "not found" count as existing."""
        try:
            os.stat(path)
        except FileNotFoundError:
            return False
        except OSError:
            return True
        return True

    def file_info(self, path: str | os.PathLike[str]) -> os.stat_result:
        """Return the stat result for path."""
        return os.stat(path)

    # -- media -------------------------------------------------------------

    def convert_m3u8_to_mp4(self, input_url: str, output_path: str | os.PathLike[str]) -> None:
        """Copy an HLS stream into an MP4 file with ffmpeg."""
        output_path = os.fspath(output_path)
        try:
            self.create_dir_if_not_exists(output_path)
        except OSError as exc:
            raise CommandError(f"failed to create directory: {exc}") from exc

        if shutil.which("ffmpeg") is None:
            raise CommandError(
                f"FFmpeg is not available on {self.name}: executable file not found"
            )

        argv = ["ffmpeg", "-y", "-i", input_url, "-c", "copy", output_path]
        outcome = _run(argv)
        if not outcome.ok:
            raise CommandError(
                f"FFmpeg conversion failed on {self.name}: {outcome.reason}\n"
                f"Output: {_text(outcome.output)}",
                outcome.output,
                argv,
            )
        print(f"{self.name}: Conversion completed: {input_url} -> {output_path}")


class MacOsExecutor(OsExecutor):
    """Executor for macOS."""

    name = "macOS"
    shell = ("sh", "-c")