"""
Response decoding for the alquran.cloud API.

Pure functions turning raw response bodies into typed records. Any
malformed JSON or schema mismatch raises a single DecodeError; there is
no partial decoding.
"""

from typing import Optional

from pydantic import ValidationError

from read_quran.exceptions import DecodeError
from read_quran.models import Chapter, ChapterDetail, ChapterDetailResponse, ChapterListResponse, Verse

AUDIO_CDN_BASE = "https://cdn.islamic.network/quran/audio"
DEFAULT_AUDIO_BITRATE = 128
DEFAULT_AUDIO_EDITION = "ar.alafasy"


def default_audio_url(
    number: int,
    edition: str = DEFAULT_AUDIO_EDITION,
    bitrate: int = DEFAULT_AUDIO_BITRATE,
    base: str = AUDIO_CDN_BASE,
) -> str:
    """
    Build the CDN audio URL for a verse.

    Args:
        number: Global verse number (1-6236), not the number within the chapter

    Returns:
        e.g. "https://cdn.islamic.network/quran/audio/128/ar.alafasy/1.mp3"
    """
    return f"{base.rstrip('/')}/{bitrate}/{edition}/{number}.mp3"


def _preview(raw: bytes | str) -> str:
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    return text[:80]


def decode_chapter_list(raw: bytes | str) -> list[Chapter]:
    """
    Decode a GET /surah response.

    Raises:
        DecodeError: If the body is not a valid chapter-list response
    """
    try:
        response = ChapterListResponse.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"Invalid chapter list: {e}", payload=_preview(raw)) from e
    return list(response.data)


def decode_chapter_detail(
    raw: bytes | str,
    edition: str = DEFAULT_AUDIO_EDITION,
    bitrate: int = DEFAULT_AUDIO_BITRATE,
    base: str = AUDIO_CDN_BASE,
) -> ChapterDetail:
    """
    Decode a GET /surah/{n} response.

    Verses without an `audio` field (or with a null one) get a synthesized
    CDN URL built from their global number.

    Raises:
        DecodeError: If the body is not a valid chapter-detail response
    """
    try:
        response = ChapterDetailResponse.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"Invalid chapter detail: {e}", payload=_preview(raw)) from e

    detail = response.data
    ayahs = [
        ayah if ayah.audio is not None
        else ayah.model_copy(update={"audio": default_audio_url(ayah.number, edition, bitrate, base)})
        for ayah in detail.ayahs
    ]
    return detail.model_copy(update={"ayahs": ayahs})


def build_verses(detail: ChapterDetail, chapter_number: Optional[int] = None) -> list[Verse]:
    """
    Map a decoded chapter to display verses.

    Args:
        detail: Decoded chapter
        chapter_number: Number used in the reference (default: detail.number)

    Returns:
        Verses with references like "Al-Faatiha (سُورَةُ ٱلْفَاتِحَةِ) 1:1"
    """
    number = chapter_number if chapter_number is not None else detail.number
    return [
        Verse(
            text=ayah.text,
            reference=f"{detail.english_name} ({detail.name}) {number}:{ayah.number_in_surah}",
            audio_url=ayah.audio,
        )
        for ayah in detail.ayahs
    ]
