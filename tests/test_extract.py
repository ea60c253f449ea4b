import pytest

from vimeocrawl.extract import (
    ExtractError,
    contains_ignore_case,
    extract_auth,
    extract_player_config,
    extract_video_id,
    m3u8_path_from_config,
    parse_player_config,
    safe_filename,
)


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://vimeo.com/713179128/dasdasdasda/dasdas", "713179128"),
        ("https://vimeo.com/713179128", "713179128"),
        ("http://www.vimeo.com/713179128", "713179128"),
        ("vimeo.com/713179128", "713179128"),
        ("https://example.com/embed?src=vimeo.com/713179128", "713179128"),
        ("https://example.com/video/713179128", ""),
        ("https://player.vimeo.com/video/713179128", ""),
        ("", ""),
    ],
)
def test_extract_video_id(url, expected):
    assert extract_video_id(url) == expected


def test_safe_filename_replaces_reserved_characters():
    assert safe_filename('a<b>c:d"e') == "a_b_c_d_e"
    assert safe_filename("x/y\\z|w?v*u") == "x_y_z_w_v_u"


def test_safe_filename_replaces_spaces():
    assert safe_filename("my video title") == "my_video_title"


def test_safe_filename_limits_length():
    result = safe_filename("a b" * 100)
    assert len(result.encode("utf-8")) == 100
    assert " " not in result


def test_safe_filename_never_splits_characters():
    result = safe_filename("é" * 80)
    assert len(result.encode("utf-8")) <= 100
    assert set(result) == {"é"}


def test_safe_filename_has_no_reserved_characters():
    result = safe_filename('<>:"/\\|?* title')
    assert not any(ch in result for ch in '<>:"/\\|?* ')


def test_extract_player_config():
    html = '<html><script>window.playerConfig = {"a": {"b": 1}}</script></html>'
    assert extract_player_config(html) == '{"a": {"b": 1}}'


def test_extract_player_config_missing():
    with pytest.raises(ExtractError, match="window.playerConfig not found"):
        extract_player_config("<html><body></body></html>")


def test_parse_player_config():
    assert parse_player_config('{"a": [1, 2], "b": "c"}') == {"a": [1, 2], "b": "c"}


def test_parse_player_config_invalid():
    with pytest.raises(ExtractError, match="failed to parse JSON"):
        parse_player_config("{not json")
    with pytest.raises(ExtractError):
        parse_player_config("[1, 2]")


def test_page_to_config_round_trip():
    html = '<script>window.playerConfig = {"request": {"files": {"hls": {"captions": "https://cdn.example.com/p.m3u8"}}}}</script>'
    config = parse_player_config(extract_player_config(html))
    assert m3u8_path_from_config(config) == "https://cdn.example.com/p.m3u8"


def _auth_config(url):
    return {
        "request": {
            "files": {"dash": {"cdns": {"akfire_interconnect_quic": {"url": url}}}}
        }
    }


def test_extract_auth():
    url = "https://cdn.example.com/exp=1700000000~acl=%2Fv%2F~hmac=deadbeef01/0a1b-2c3d/playlist.json"
    auth = extract_auth(_auth_config(url))
    assert auth["exp"] == "1700000000"
    assert auth["acl"] == "%2Fv%2F"
    assert auth["hmac"] == "deadbeef01"
    assert auth["video_id"] == "0a1b-2c3d"
    assert auth["full_auth"] == "exp=1700000000~acl=%2Fv%2F~hmac=deadbeef01"
    assert auth["full_url"] == url


def test_extract_auth_reports_missing_level():
    with pytest.raises(ExtractError, match="dash not found"):
        extract_auth({"request": {"files": {}}})
    with pytest.raises(ExtractError, match="request not found"):
        extract_auth({})
    with pytest.raises(ExtractError, match="url not found"):
        extract_auth(_auth_config(42))


def test_extract_auth_without_token():
    with pytest.raises(ExtractError, match="auth token not found in URL"):
        extract_auth(_auth_config("https://cdn.example.com/plain.json"))


def test_m3u8_path_missing_pieces():
    with pytest.raises(ExtractError, match="hls not found in playerConfig"):
        m3u8_path_from_config({"request": {"files": {}}})
    with pytest.raises(ExtractError, match="captions not found in playerConfig"):
        m3u8_path_from_config({"request": {"files": {"hls": {}}}})


def test_contains_ignore_case():
    assert contains_ignore_case("Hello World", "WORLD") is True
    assert contains_ignore_case("Hello World", "planet") is False