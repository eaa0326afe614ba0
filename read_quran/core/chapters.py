"""
Chapter lookup helpers used by the navigator and the chapter picker.
"""

from typing import Iterable, Optional

from read_quran.models import Chapter

LOADING_CHAPTERS_TITLE = "Loading Chapters..."


def find_chapter(chapters: Iterable[Chapter], number: int) -> Optional[Chapter]:
    """
    Find a chapter by number.

    Returns:
        Chapter if loaded, None otherwise
    """
    for chapter in chapters:
        if chapter.number == number:
            return chapter
    return None


def chapter_title(chapters: list[Chapter], number: int) -> str:
    """
    Header title for the chapter under the cursor.

    Returns:
        "English (Native)" when the chapter is loaded, "Loading Chapters..."
        before the chapter list arrives, "Chapter N" otherwise
    """
    if not chapters:
        return LOADING_CHAPTERS_TITLE

    chapter = find_chapter(chapters, number)
    if chapter is not None:
        return chapter.title

    return f"Chapter {number}"


def filter_chapters(chapters: Iterable[Chapter], query: str = "") -> list[Chapter]:
    """
    Filter chapters for the chapter picker.

    A chapter matches when the query is a case-insensitive substring of its
    English name, a substring of its native name, or a substring of its
    number. An empty query matches everything.
    """
    return [chapter for chapter in chapters if chapter.matches(query.strip())]
