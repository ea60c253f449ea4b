"""Saving processing results and rendering progress reports."""

from __future__ import annotations

import json
import math
import os
from collections.abc import Iterable
from typing import Any, Protocol

from vimeocrawl.constants import PATH_FILE_ERROR, PATH_FILE_SUCCESS

_DASHBOARD_WIDTH = 50
_FINAL_WIDTH = 60

# Characters escaped in JSON output so the files stay safe to embed in HTML.
_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class _Record(Protocol):
    def to_dict(self) -> dict[str, Any]: ...


def _to_json(records: Iterable[_Record]) -> str:
    text = json.dumps(
        [record.to_dict() for record in records], indent=2, ensure_ascii=False
    )
    for char, escape in _JSON_ESCAPES.items():
        text = text.replace(char, escape)
    return text


def _write(path: str | os.PathLike[str], text: str, what: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise OSError(f"failed to write {what} file: {exc}") from exc


def save_results(
    successes: Iterable[_Record],
    errors: Iterable[_Record],
    success_path: str | os.PathLike[str] = PATH_FILE_SUCCESS,
    error_path: str | os.PathLike[str] = PATH_FILE_ERROR,
) -> None:
    """Write the successful and the failed records as indented JSON arrays."""
    _write(success_path, _to_json(successes), "success")
    _write(error_path, _to_json(errors), "error")


def _percent(part: int, total: int) -> str:
    if total == 0:
        value = math.nan if part == 0 else math.copysign(math.inf, part)
    else:
        value = part / total * 100
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.1f}"


def render_dashboard(success_count: int, error_count: int, total: int, processed: int) -> str:
    """Return the progress summary shown after each video."""
    rule = "=" * _DASHBOARD_WIDTH
    lines = [
        "",
        rule,
        "PROCESSING DASHBOARD",
        rule,
        f"Progress: {processed}/{total} videos processed ({_percent(processed, total)}%)",
        f"Successful uploads: {success_count}",
        f"Failed uploads: {error_count}",
        f"Remaining: {total - processed}",
        rule,
        "",
    ]
    return "\n".join(lines) + "\n"


def render_final_dashboard(success_count: int, error_count: int, total: int) -> str:
    """Return the report shown once every video has been processed."""
    rule = "=" * _FINAL_WIDTH
    lines = [
        "",
        rule,
        "FINAL PROCESSING REPORT",
        rule,
        f"Total videos processed: {total}",
        f"Successful uploads: {success_count} ({_percent(success_count, total)}%)",
        f"Failed uploads: {error_count} ({_percent(error_count, total)}%)",
        "",
    ]
    if success_count > 0:
        lines.append(f"Success! {success_count} videos uploaded to YouTube")
    if error_count > 0:
        lines.append(
            f"{error_count} videos failed to upload. Check error.json for details"
        )
    lines += [
        "Results saved to:",
        f"   - Success: {PATH_FILE_SUCCESS}",
        f"   - Errors: {PATH_FILE_ERROR}",
        rule,
    ]
    return "\n".join(lines) + "\n"