"""
Pydantic data models for read-quran.

- Chapter: Chapter metadata from the chapter-list endpoint
- Verse: A verse ready for display
- Ayah, ChapterDetail, ChapterListResponse, ChapterDetailResponse: API wire shapes
- NavigatorState, NavigatorStatus: Published navigator state
"""

from read_quran.models.chapter import TOTAL_CHAPTERS, Chapter
from read_quran.models.verse import Verse
from read_quran.models.responses import (
    Ayah,
    ChapterDetail,
    ChapterDetailResponse,
    ChapterListResponse,
)
from read_quran.models.state import NavigatorState, NavigatorStatus

__all__ = [
    "TOTAL_CHAPTERS",
    "Chapter",
    "Verse",
    "Ayah",
    "ChapterDetail",
    "ChapterListResponse",
    "ChapterDetailResponse",
    "NavigatorState",
    "NavigatorStatus",
]
