# vimeocrawl

Helpers for pulling video out of Vimeo player pages and keeping track of a
batch of such jobs.

Given a Vimeo video id, the package fetches the public player page
(`https://player.vimeo.com/video/<id>`), reads the embedded
`window.playerConfig` JSON and takes the HLS (`.m3u8`) playlist address
from `request.files.hls.captions`. That playlist can then be copied into an
MP4 file with `ffmpeg -y -i <url> -c copy <output>` (stream copy, no
re-encoding). Around that core sit file and command helpers for macOS, Linux
and Windows, data models for course/section records, a chaptered
description builder and progress reports for batch runs.

## Requirements

- Python 3.10 or later
- `ffmpeg` on the `PATH` for MP4 conversion

The package has no third-party dependencies; HTTP goes through
`urllib.request`.

## Modules

### `vimeocrawl.extract`

- `extract_video_id(url)` – the numeric id after `vimeo.com/`, or `""`.
  A leading `https://`, `http://` and `www.` are ignored.
- `safe_filename(title)` – replaces `<>:"/\|?*` with `_`, cuts the result to
  100 UTF-8 bytes, then replaces spaces with `_`.
- `extract_player_config(html)` – the JSON text inside
  `<script>window.playerConfig = {...}</script>`.
- `parse_player_config(text)` – that text as a `dict`.
- `m3u8_path_from_config(config)` – the HLS playlist link.
- `extract_auth(config)` – splits the signed CDN URL at
  `request.files.dash.cdns.akfire_interconnect_quic.url` into a dict with
  `exp`, `acl`, `hmac`, `video_id`, `full_auth` and `full_url`.
- `contains_ignore_case(text, substring)`.

Missing or malformed data raises `ExtractError` (a `ValueError`).

### `vimeocrawl.fetch`

`http_get(url)` returns the body as text. Any reply other than 200, or a
connection failure, raises `FetchError` (an `OSError`) whose `status_code`
holds the HTTP status when there was one.

### `vimeocrawl.models`

Dataclasses for the JSON records, each with `from_dict(data)` and
`to_dict()`: `Chapter`, `SectionVideo`, `SectionVideoWithPath`,
`DataError`, and `DataFile`, which nests `LessonData`, `Element` and
`VideoSource`. Missing fields take empty defaults; fields of the wrong type
raise `ValueError`.

### `vimeocrawl.platform`

`OsType` (`MACOS`, `LINUX`, `WINDOWS`, `UBUNTU`), `current_os()` and
`os_name(os_type)`. Linux is reported as `UBUNTU` when `/etc/lsb-release`
mentions Ubuntu; unknown systems count as `LINUX`.

### Executors: `vimeocrawl.executor`, `vimeocrawl.windows`, `vimeocrawl.linux`

`OsExecutor` and its subclasses `MacOsExecutor`, `WindowsExecutor` and
`LinuxExecutor` offer:

- `execute_command(command, *args)` and `execute_shell_command(command, *args)`
  – return the combined stdout/stderr as bytes. The shell is `sh -c` on
  macOS, `bash -c` on Linux and `cmd /C` on Windows.
- `create_directory(path)`, `create_dir_if_not_exists(path)` (creates the
  parent directory of a file path), `remove_directory(path)`.
- `delete_file(path)`, `delete_file_force(path)`, `delete_files(paths)`,
  `file_exists(path)`, `file_info(path)`.
- `convert_m3u8_to_mp4(input_url, output_path)`.

Python's own file functions are tried first; on failure the system tools
(`mkdir`, `rm`, or `cmd` built-ins on Windows) are used. A missing file is
reported on stdout, not raised. `delete_file_force` may fall back to
`sudo rm -rf` on macOS and Linux. Failed commands raise `CommandError`
(an `OSError` carrying `output` and `command`); an empty path raises
`ValueError`.

`LinuxExecutor(etc_dir="/etc")` adds `update_package_list()`,
`install_package(package_name)` and `install_ffmpeg()` (through `sudo` and
the first of apt-get, yum, dnf, pacman, zypper or apk that works),
`linux_distribution()` (from `os-release`, else a release marker file),
`set_file_permissions(path, mode)` and `change_file_ownership(path, owner)`.

### `vimeocrawl.m3u8`

`M3u8Service(executor, fetch=http_get)` with `path_for_video(video_id)` and
`to_mp4(input_url, out_path)`; the output directory is created when
missing.

### `vimeocrawl.bootstrap`

`create_executor(os_type)` returns the matching executor, or `None` for a
type without one (including `OsType.UBUNTU`). `initialize(os_type=None)`
detects the system when no type is given and returns a `Runtime` holding
`os_type`, `executor` and `m3u8`. `validate_runtime(runtime)` raises
`RuntimeError` when there is no executor or the type is negative, so
`initialize()` raises on a system detected as Ubuntu; pass `OsType.LINUX`
there.

### `vimeocrawl.description`

`description_with_chapters(chapters)` builds a Vietnamese-language video
description: a header, one `"<time> <content>"` line per chapter and a
closing thank-you line.

### `vimeocrawl.report`

- `save_results(successes, errors, success_path="data/success.json",
  error_path="data/error.json")` writes both lists of records as JSON
  arrays indented by two spaces, with `<`, `>` and `&` escaped.
- `render_dashboard(success_count, error_count, total, processed)` and
  `render_final_dashboard(success_count, error_count, total)` return the
  report text; print it yourself. With a total of 0 the percentages read
  `NaN` or `+Inf`.

## Examples

Finding the playlist in a player page you already have:

```python
from vimeocrawl.extract import (
    extract_player_config,
    extract_video_id,
    m3u8_path_from_config,
    parse_player_config,
)

video_id = extract_video_id("https://vimeo.com/123456789/abcdef")  # "123456789"
config = parse_player_config(extract_player_config(html))
playlist = m3u8_path_from_config(config)
```

Fetching and converting:

```python
from vimeocrawl.bootstrap import initialize
from vimeocrawl.platform import OsType

runtime = initialize(OsType.LINUX)
playlist = runtime.m3u8.path_for_video("123456789")
runtime.m3u8.to_mp4(playlist, "videos/output.mp4")
```

Records and reports:

```python
from vimeocrawl.description import description_with_chapters
from vimeocrawl.models import DataError, SectionVideo
from vimeocrawl.report import render_dashboard, save_results

video = SectionVideo.from_dict(record)
text = description_with_chapters(video.chapters)

save_results([video], [DataError(course_id=1, section_id=2)])
print(render_dashboard(1, 1, 2, 2))
```

## What the package does not do

- There is no command-line program. Reading a batch file, looping over its
  records, pausing between them and printing the dashboards is left to the
  calling code, using the functions above.
- Nothing is uploaded anywhere. The report texts speak of "uploads", but the
  package has no YouTube client, no Google sign-in and no token handling.

## Running the tests

Install the `test` extra and run `pytest` from the project root.