"""
read-quran: read the Quran verse by verse from the alquran.cloud API.

Usage:
    import asyncio
    from read_quran import VerseNavigator

    async def main():
        async with VerseNavigator() as navigator:
            await navigator.fetch_chapters()
            print(navigator.chapter_title())
            print(navigator.current_verse())

            task = navigator.next()
            if task is not None:
                await task
            await navigator.play_current_verse_audio()

    asyncio.run(main())
"""

from read_quran.models import (
    Chapter,
    NavigatorState,
    NavigatorStatus,
    Verse,
)
from read_quran.config import ReadQuranSettings, get_settings, configure
from read_quran.exceptions import (
    ReadQuranError,
    NetworkError,
    DecodeError,
    InvalidInputError,
    ConfigurationError,
    AudioPlaybackError,
)
from read_quran.api import QuranAPIClient
from read_quran.core import VerseNavigator

__version__ = "1.0.0"
__all__ = [
    # Version
    "__version__",
    # Models
    "Chapter",
    "Verse",
    "NavigatorState",
    "NavigatorStatus",
    # Config
    "ReadQuranSettings",
    "get_settings",
    "configure",
    # Exceptions
    "ReadQuranError",
    "NetworkError",
    "DecodeError",
    "InvalidInputError",
    "ConfigurationError",
    "AudioPlaybackError",
    # Client / core
    "QuranAPIClient",
    "VerseNavigator",
]
