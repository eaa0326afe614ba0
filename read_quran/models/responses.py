"""
Wire models for the alquran.cloud REST API.

Both endpoints wrap their payload in the same envelope:
    {"code": 200, "status": "OK", "data": ...}
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from read_quran.models.chapter import Chapter


class Ayah(BaseModel):
    """One verse as returned inside a chapter-detail response."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int = Field(..., description="Global verse number (1-6236)", ge=1)
    text: str
    number_in_surah: int = Field(..., alias="numberInSurah", ge=1)
    audio: Optional[str] = None


class ChapterDetail(BaseModel):
    """The `data` object of a chapter-detail response."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int = Field(..., ge=1, le=114)
    name: str
    english_name: str = Field(..., alias="englishName")
    english_name_translation: str = Field(..., alias="englishNameTranslation")
    ayahs: list[Ayah]


class ChapterListResponse(BaseModel):
    """Response of GET /surah."""

    code: int
    status: str
    data: list[Chapter]


class ChapterDetailResponse(BaseModel):
    """Response of GET /surah/{n}."""

    code: int
    status: str
    data: ChapterDetail
