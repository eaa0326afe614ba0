"""
API module for read-quran.

Provides the alquran.cloud HTTP client and the response decoders.
"""

from read_quran.api.client import QuranAPIClient
from read_quran.api.decoder import (
    build_verses,
    decode_chapter_detail,
    decode_chapter_list,
    default_audio_url,
)

__all__ = [
    "QuranAPIClient",
    "build_verses",
    "decode_chapter_detail",
    "decode_chapter_list",
    "default_audio_url",
]
