"""Finding a Vimeo video's HLS playlist and saving the stream as MP4."""

from __future__ import annotations

import os
from collections.abc import Callable

from vimeocrawl.constants import PLAYER_VIMEO_URL
from vimeocrawl.executor import OsExecutor
from vimeocrawl.extract import extract_player_config, m3u8_path_from_config, parse_player_config
from vimeocrawl.fetch import http_get


class M3u8Service:
    """Looks up HLS playlists on the Vimeo player and converts them to MP4."""

    def __init__(self, executor: OsExecutor, fetch: Callable[[str], str] = http_get) -> None:
        self.executor = executor
        self.fetch = fetch

    def path_for_video(self, video_id: str) -> str:
        """Return the HLS playlist link of a Vimeo video."""
        html = self.fetch(PLAYER_VIMEO_URL + video_id)
        config = parse_player_config(extract_player_config(html))
        return m3u8_path_from_config(config)

    def to_mp4(self, input_url: str, out_path: str | os.PathLike[str]) -> None:
        """Save the stream at input_url as an MP4 file at out_path."""
        self.executor.create_dir_if_not_exists(out_path)
        self.executor.convert_m3u8_to_mp4(input_url, out_path)