"""
Verse (ayah) view model.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

PLACEHOLDER_TEXT = "Loading..."


class Verse(BaseModel):
    """
    A single verse ready for display.

    Attributes:
        text: Verse text
        reference: Human-readable locator, e.g. "Al-Faatiha (سُورَةُ ٱلْفَاتِحَةِ) 1:1"
        audio_url: Recitation audio for the verse, if any
        transliteration: Not provided by the API; always None
        translation: Not provided by the API; always None
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Verse text")
    reference: str = Field(..., description="Human-readable locator")
    audio_url: Optional[str] = Field(default=None, description="Recitation audio URL")
    transliteration: Optional[str] = Field(default=None)
    translation: Optional[str] = Field(default=None)

    @classmethod
    def placeholder(cls) -> "Verse":
        """Verse shown while nothing has been loaded yet."""
        return cls(text=PLACEHOLDER_TEXT, reference="")

    @property
    def has_audio(self) -> bool:
        return self.audio_url is not None

    def __str__(self) -> str:
        return f"{self.text}\n{self.reference}" if self.reference else self.text
