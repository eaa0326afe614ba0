"""
Chapter (surah) data model.
"""

from pydantic import BaseModel, ConfigDict, Field

TOTAL_CHAPTERS = 114


class Chapter(BaseModel):
    """
    Metadata for one chapter, as listed by the chapter-list endpoint.

    Attributes:
        number: Chapter number (1-114)
        name: Chapter name in Arabic script
        english_name: Transliterated chapter name
        verse_count: Number of verses in the chapter
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int = Field(
        ...,
        description="Chapter number (1-114)",
        ge=1,
        le=TOTAL_CHAPTERS,
    )
    name: str = Field(
        ...,
        description="Chapter name in Arabic script",
    )
    english_name: str = Field(
        ...,
        alias="englishName",
        description="Transliterated chapter name",
    )
    verse_count: int = Field(
        ...,
        alias="numberOfAyahs",
        description="Number of verses in the chapter",
        ge=1,
    )

    @property
    def title(self) -> str:
        """Display title, e.g. "Al-Faatiha (سُورَةُ ٱلْفَاتِحَةِ)"."""
        return f"{self.english_name} ({self.name})"

    def matches(self, query: str) -> bool:
        """Whether a chapter-picker search string selects this chapter."""
        if not query:
            return True
        return (
            query.lower() in self.english_name.lower()
            or query in self.name
            or query in str(self.number)
        )

    def __str__(self) -> str:
        return f"Chapter({self.number}, {self.english_name}, {self.verse_count} verses)"
