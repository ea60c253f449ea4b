"""Pulling video ids, player configuration and stream links out of pages."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

_PLAYER_CONFIG = re.compile(r"<script>window\.playerConfig\s*=\s*(\{.*?\})</script>")
_SIGNED_CDN_URL = re.compile(r"exp=(\d+)~acl=([^~]+)~hmac=([a-f0-9]+)/([a-f0-9\-]+)")
_UNSAFE_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')
_VIDEO_ID_AT_START = re.compile(r"^vimeo\.com/(\d+)")
_VIDEO_ID_ANYWHERE = re.compile(r"vimeo\.com/(\d+)")

_MAX_FILENAME_BYTES = 100


class ExtractError(ValueError):
    """Raised when expected data is missing from a page or configuration."""


def _remove_prefix(text: str, prefix: str) -> str:
    return text[len(prefix):] if text.startswith(prefix) else text


def extract_video_id(url: str) -> str:
    """Return the numeric video id of a Vimeo URL, or "" if there is none."""
    for prefix in ("https://", "http://", "www."):
        url = _remove_prefix(url, prefix)
    match = _VIDEO_ID_AT_START.search(url) or _VIDEO_ID_ANYWHERE.search(url)
    return match.group(1) if match else ""


def safe_filename(title: str) -> str:
    """Turn a title into a file name without reserved characters or spaces."""
    safe = _UNSAFE_FILENAME_CHARS.sub("_", title)
    encoded = safe.encode("utf-8")
    if len(encoded) > _MAX_FILENAME_BYTES:
        safe = encoded[:_MAX_FILENAME_BYTES].decode("utf-8", errors="ignore")
    return safe.replace(" ", "_")


def extract_player_config(html: str) -> str:
    """Return the JSON text assigned to window.playerConfig in a player page."""
    match = _PLAYER_CONFIG.search(html)
    if match is None:
        raise ExtractError("window.playerConfig not found")
    return match.group(1)


def parse_player_config(text: str) -> dict[str, Any]:
    """Parse player configuration JSON into a dictionary."""
    try:
        config = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ExtractError(f"failed to parse JSON: {exc}") from exc
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ExtractError(
            f"failed to parse JSON: expected an object, got {type(config).__name__}"
        )
    return config


def _child(node: Any, key: str, message: str) -> Any:
    if not isinstance(node, Mapping) or not isinstance(node.get(key), Mapping):
        raise ExtractError(message)
    return node[key]


def extract_auth(config: Mapping[str, Any]) -> dict[str, str]:
    """Read the signed CDN URL from a player configuration and split its parts."""
    request = _child(config, "request", "request not found")
    files = _child(request, "files", "files not found")
    dash = _child(files, "dash", "dash not found")
    cdns = _child(dash, "cdns", "cdns not found")
    akfire = _child(cdns, "akfire_interconnect_quic", "akfire_interconnect_quic not found")
    url = akfire.get("url")
    if not isinstance(url, str):
        raise ExtractError("url not found")

    match = _SIGNED_CDN_URL.search(url)
    if match is None:
        raise ExtractError("auth token not found in URL")
    exp, acl, signature, video_id = match.groups()
    return {
        "exp": exp,
        "acl": acl,
        "hmac": signature,
        "video_id": video_id,
        "full_auth": f"exp={exp}~acl={acl}~hmac={signature}",
        "full_url": url,
    }


def m3u8_path_from_config(config: Mapping[str, Any]) -> str:
    """Return the HLS playlist link found at request.files.hls.captions."""
    request = _child(config, "request", "request not found in playerConfig")
    files = _child(request, "files", "files not found in playerConfig")
    hls = _child(files, "hls", "hls not found in playerConfig")
    captions = hls.get("captions")
    if not isinstance(captions, str):
        raise ExtractError("captions not found in playerConfig")
    return captions


def contains_ignore_case(text: str, substring: str) -> bool:
    """Tell whether substring occurs in text, ignoring case."""
    return substring.lower() in text.lower()