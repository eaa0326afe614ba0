"""
Navigator state data model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from read_quran.models.chapter import TOTAL_CHAPTERS, Chapter
from read_quran.models.verse import Verse


class NavigatorStatus(str, Enum):
    """Fetch status of the navigator."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class NavigatorState(BaseModel):
    """
    Snapshot of everything the presentation layer may render.

    Errors are non-destructive: in the ERROR status `verses` and `chapters`
    still hold the last data that loaded successfully.

    Attributes:
        current_chapter_number: Chapter under the cursor (1-114)
        current_verse_index: Index into `verses`
        verses: Verses of the loaded chapter
        chapters: Chapter list, fetched once at startup
        status: Fetch status
        last_error: Message of the most recent failure
    """

    model_config = ConfigDict(frozen=True)

    current_chapter_number: int = Field(default=1, ge=1, le=TOTAL_CHAPTERS)
    current_verse_index: int = Field(default=0, ge=0)
    verses: tuple[Verse, ...] = Field(default_factory=tuple)
    chapters: tuple[Chapter, ...] = Field(default_factory=tuple)
    status: NavigatorStatus = Field(default=NavigatorStatus.IDLE)
    last_error: Optional[str] = Field(default=None)

    @property
    def is_loading(self) -> bool:
        return self.status == NavigatorStatus.LOADING

    @property
    def current_verse(self) -> Verse:
        """Verse under the cursor, or the placeholder when nothing is loaded."""
        if not self.verses:
            return Verse.placeholder()
        return self.verses[min(self.current_verse_index, len(self.verses) - 1)]

    def __str__(self) -> str:
        return (
            f"NavigatorState(chapter={self.current_chapter_number}, "
            f"index={self.current_verse_index}, verses={len(self.verses)}, "
            f"status={self.status.value})"
        )
