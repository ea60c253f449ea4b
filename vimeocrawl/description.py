"""Video descriptions for uploads."""

from __future__ import annotations

from collections.abc import Iterable

from vimeocrawl.models import Chapter

_HEADER = "Nội dung video:\n"
_FOOTER = (
    "Cảm ơn các bạn đã xem video! Nếu thấy hay hãy like và đăng ký kênh "
    "để ủng hộ mình nhé!\n"
)


def description_with_chapters(chapters: Iterable[Chapter]) -> str:
    """Build a description listing each chapter's time stamp and title."""
    lines = "".join(f"{chapter.time} {chapter.content}\n" for chapter in chapters)
    return f"{_HEADER}{lines}\n\n{_FOOTER}"