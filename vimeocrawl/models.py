"""Records read from and written to the JSON data files."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _chapters(data: Mapping[str, Any], key: str) -> list[Chapter]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list, got {value!r}")
    return [Chapter.from_dict(item) for item in value]


@dataclass
class Chapter:
    """A chapter marker: a time stamp such as "00:00:00" and its title."""

    time: str = ""
    content: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Chapter:
        data = _mapping(data, "chapter")
        return cls(time=_str(data, "time"), content=_str(data, "content"))

    def to_dict(self) -> dict[str, Any]:
        return {"time": self.time, "content": self.content}


@dataclass
class SectionVideo:
    """One course section whose video is to be fetched and uploaded."""

    course_id: int = 0
    section_id: int = 0
    section_path: str = ""
    m3u8_link: str = ""
    ytb_video_id: str = ""
    chapters: list[Chapter] = field(default_factory=list)
    title: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> SectionVideo:
        data = _mapping(data, "section video")
        return cls(
            course_id=_int(data, "course_id"),
            section_id=_int(data, "section_id"),
            section_path=_str(data, "section_path"),
            m3u8_link=_str(data, "m3u8_link"),
            ytb_video_id=_str(data, "ytb_video_id"),
            chapters=_chapters(data, "chapters"),
            title=_str(data, "title"),
            description=_str(data, "description"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "course_id": self.course_id,
            "section_id": self.section_id,
            "section_path": self.section_path,
            "m3u8_link": self.m3u8_link,
            "ytb_video_id": self.ytb_video_id,
            "chapters": [chapter.to_dict() for chapter in self.chapters],
            "title": self.title,
            "description": self.description,
        }


@dataclass
class SectionVideoWithPath:
    """A section video that also records the local path of its file."""

    course_id: int = 0
    section_id: int = 0
    section_path: str = ""
    m3u8_link: str = ""
    ytb_video_id: str = ""
    path: str = ""
    chapters: list[Chapter] = field(default_factory=list)
    title: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> SectionVideoWithPath:
        data = _mapping(data, "section video")
        return cls(
            course_id=_int(data, "course_id"),
            section_id=_int(data, "section_id"),
            section_path=_str(data, "section_path"),
            m3u8_link=_str(data, "m3u8_link"),
            ytb_video_id=_str(data, "ytb_video_id"),
            path=_str(data, "path"),
            chapters=_chapters(data, "chapters"),
            title=_str(data, "title"),
            description=_str(data, "description"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "course_id": self.course_id,
            "section_id": self.section_id,
            "section_path": self.section_path,
            "m3u8_link": self.m3u8_link,
            "ytb_video_id": self.ytb_video_id,
            "path": self.path,
            "chapters": [chapter.to_dict() for chapter in self.chapters],
            "title": self.title,
            "description": self.description,
        }


@dataclass
class DataError:
    """A section whose processing failed."""

    course_id: int = 0
    section_id: int = 0
    section_path: str = ""
    m3u8_link: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> DataError:
        data = _mapping(data, "error record")
        return cls(
            course_id=_int(data, "course_id"),
            section_id=_int(data, "section_id"),
            section_path=_str(data, "section_path"),
            m3u8_link=_str(data, "m3u8_link"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "course_id": self.course_id,
            "section_id": self.section_id,
            "section_path": self.section_path,
            "m3u8_link": self.m3u8_link,
        }


@dataclass
class VideoSource:
    """Where a lesson's video lives."""

    web_url: str = ""
    url: str = ""
    extension: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> VideoSource:
        data = _mapping(data, "video source")
        return cls(
            web_url=_str(data, "web_url"),
            url=_str(data, "url"),
            extension=_str(data, "extension"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"web_url": self.web_url, "url": self.url, "extension": self.extension}


@dataclass
class Element:
    """The video element of a lesson."""

    id: int = 0
    name: str = ""
    timestamp_video: list[Chapter] = field(default_factory=list)
    video_source: VideoSource = field(default_factory=VideoSource)

    @classmethod
    def from_dict(cls, data: Any) -> Element:
        data = _mapping(data, "element")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            timestamp_video=_chapters(data, "timestamp_video"),
            video_source=VideoSource.from_dict(data.get("video_source")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "timestamp_video": [chapter.to_dict() for chapter in self.timestamp_video],
            "video_source": self.video_source.to_dict(),
        }


@dataclass
class LessonData:
    """The body of a lesson data file."""

    id: int = 0
    title: str = ""
    course_id: int = 0
    unit_title: str = ""
    content: str = ""
    element: Element = field(default_factory=Element)
    media_path: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> LessonData:
        data = _mapping(data, "lesson data")
        sub_element = _mapping(data.get("sub_element"), "sub element")
        return cls(
            id=_int(data, "id"),
            title=_str(data, "title"),
            course_id=_int(data, "course_id"),
            unit_title=_str(data, "unit_title"),
            content=_str(data, "content"),
            element=Element.from_dict(data.get("element")),
            media_path=_str(sub_element, "media_path"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "course_id": self.course_id,
            "unit_title": self.unit_title,
            "content": self.content,
            "element": self.element.to_dict(),
            "sub_element": {"media_path": self.media_path},
        }


@dataclass
class DataFile:
    """A lesson JSON file as stored under the data directories."""

    data: LessonData = field(default_factory=LessonData)

    @classmethod
    def from_dict(cls, data: Any) -> DataFile:
        data = _mapping(data, "data file")
        return cls(data=LessonData.from_dict(data.get("data")))

    def to_dict(self) -> dict[str, Any]:
        return {"data": self.data.to_dict()}