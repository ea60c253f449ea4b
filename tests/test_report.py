import json

import pytest

from vimeocrawl.constants import PATH_FILE_ERROR, PATH_FILE_SUCCESS
from vimeocrawl.models import Chapter, DataError, SectionVideo
from vimeocrawl.report import render_dashboard, render_final_dashboard, save_results


@pytest.fixture
def video():
    return SectionVideo(
        course_id=7,
        section_id=12,
        section_path="data/toeic/7",
        m3u8_link="https://vimeo.com/713179128",
        chapters=[Chapter(time="00:00:00", content="Intro")],
        title="Lesson 1",
        description="Về bài học",
    )


@pytest.fixture
def failure():
    return DataError(course_id=3, section_id=4, m3u8_link="https://vimeo.com/1")


def test_save_results_round_trip(tmp_path, video, failure):
    success_path = tmp_path / "success.json"
    error_path = tmp_path / "error.json"
    save_results([video], [failure], success_path, error_path)

    successes = json.loads(success_path.read_text(encoding="utf-8"))
    errors = json.loads(error_path.read_text(encoding="utf-8"))
    assert [SectionVideo.from_dict(item) for item in successes] == [video]
    assert [DataError.from_dict(item) for item in errors] == [failure]


def test_save_results_empty_lists_write_empty_arrays(tmp_path):
    success_path = tmp_path / "s.json"
    error_path = tmp_path / "e.json"
    save_results([], [], success_path, error_path)
    assert success_path.read_text(encoding="utf-8") == "[]"
    assert error_path.read_text(encoding="utf-8") == "[]"


def test_save_results_indents_and_keeps_unicode(tmp_path, video):
    success_path = tmp_path / "s.json"
    save_results([video], [], success_path, tmp_path / "e.json")
    text = success_path.read_text(encoding="utf-8")
    assert text.startswith("[\n  {\n    \"course_id\": 7,")
    assert "Về bài học" in text
    assert not text.endswith("\n")


def test_save_results_escapes_html_characters(tmp_path):
    record = DataError(m3u8_link="a<b>&c")
    error_path = tmp_path / "e.json"
    save_results([], [record], tmp_path / "s.json", error_path)
    text = error_path.read_text(encoding="utf-8")
    assert "a\\u003cb\\u003e\\u0026c" in text
    assert DataError.from_dict(json.loads(text)[0]) == record


def test_save_results_missing_directory_raises(tmp_path, video):
    with pytest.raises(OSError, match="failed to write success file"):
        save_results([video], [], tmp_path / "missing" / "s.json", tmp_path / "e.json")


def test_dashboard_layout():
    text = render_dashboard(1, 0, 4, 1)
    lines = text.split("\n")
    assert lines[0] == ""
    assert lines[1] == "=" * 50
    assert lines[2] == "PROCESSING DASHBOARD"
    assert lines[3] == "=" * 50
    assert text.endswith("=" * 50 + "\n\n")


def test_dashboard_counts():
    text = render_dashboard(2, 1, 4, 2)
    assert "Progress: 2/4 videos processed (50.0%)\n" in text
    assert "Successful uploads: 2\n" in text
    assert "Failed uploads: 1\n" in text
    assert "Remaining: 2\n" in text


def test_dashboard_complete_is_full_percent():
    text = render_dashboard(3, 0, 3, 3)
    assert "(100.0%)" in text
    assert "Remaining: 0\n" in text


def test_dashboard_zero_total_is_not_a_number():
    assert "(NaN%)" in render_dashboard(0, 0, 0, 0)


def test_final_dashboard_with_successes_and_errors():
    text = render_final_dashboard(3, 1, 4)
    assert "FINAL PROCESSING REPORT" in text
    assert "Total videos processed: 4\n" in text
    assert "Success! 3 videos uploaded to YouTube\n" in text
    assert "1 videos failed to upload. Check error.json for details\n" in text
    assert f"   - Success: {PATH_FILE_SUCCESS}\n" in text
    assert f"   - Errors: {PATH_FILE_ERROR}\n" in text
    assert text.endswith("=" * 60 + "\n")


def test_final_dashboard_omits_empty_categories():
    text = render_final_dashboard(0, 2, 2)
    assert "Success!" not in text
    assert "2 videos failed to upload" in text
    only_success = render_final_dashboard(2, 0, 2)
    assert "failed to upload." not in only_success
    assert "Success! 2 videos uploaded to YouTube" in only_success


def test_final_dashboard_percentages_sum():
    text = render_final_dashboard(1, 1, 2)
    assert "Successful uploads: 1 (50.0%)\n" in text
    assert "Failed uploads: 1 (50.0%)\n" in text