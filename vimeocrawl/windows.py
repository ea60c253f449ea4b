"""Executor for Windows, falling back to cmd.exe built-ins."""

from __future__ import annotations

from vimeocrawl.executor import CommandError, OsExecutor, _run, _text


def _quoted(path: str) -> str:
    return f'"{path}"'


class WindowsExecutor(OsExecutor):
    """Executor for Windows."""

    name = "Windows"
    shell = ("cmd", "/C")

    def _mkdir_fallback(self, path: str) -> tuple[list[str], str]:
        return ["cmd", "/C", "mkdir", _quoted(path)], "mkdir"

    def _delete_fallback(self, path: str) -> tuple[list[str], str]:
        return ["cmd", "/C", "del", "/F", "/Q", _quoted(path)], "del command"

    def _remove_dir_fallback(self, path: str) -> tuple[list[str], str]:
        return ["cmd", "/C", "rmdir", "/S", "/Q", _quoted(path)], "rmdir"

    def _loosen_permissions(self, path: str) -> None:
        # Clear read-only, hidden and system attributes; failures are ignored.
        _run(["cmd", "/C", "attrib", "-R", "-H", "-S", _quoted(path)])

    def _force_delete(self, path: str) -> None:
        argv = ["cmd", "/C", "del", "/F", "/A", "/Q", _quoted(path)]
        outcome = _run(argv)
        if not outcome.ok:
            raise CommandError(
                f"{self.name} force delete failed: {outcome.reason}\n"
                f"Output: {_text(outcome.output)}",
                outcome.output,
                argv,
            )