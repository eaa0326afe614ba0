"""
Static fallback data.

Loaded when the very first chapter fetch fails so there is always
something to display.
"""

from read_quran.models import Chapter, Verse


_FALLBACK_VERSES = (
    ("In the name of Allah, the Entirely Merciful, the Especially Merciful.", "Al-Fatihah 1:1"),
    ("All praise is due to Allah, Lord of the worlds.", "Al-Fatihah 1:2"),
    ("The Entirely Merciful, the Especially Merciful.", "Al-Fatihah 1:3"),
)

_FALLBACK_CHAPTERS = (
    (1, "الفاتحة", "Al-Fatihah", 7),
    (2, "البقرة", "Al-Baqarah", 286),
)


def load_fallback_verses() -> list[Verse]:
    """
    Get the first three verses of Al-Fatihah (English, no audio).

    Returns:
        List of 3 Verse objects
    """
    return [Verse(text=text, reference=reference) for text, reference in _FALLBACK_VERSES]


def load_fallback_chapters() -> list[Chapter]:
    """
    Get metadata for the first two chapters.

    Returns:
        List of 2 Chapter objects
    """
    return [
        Chapter(number=number, name=name, english_name=english_name, verse_count=verse_count)
        for number, name, english_name, verse_count in _FALLBACK_CHAPTERS
    ]
