"""
Core modules for read-quran.

This package contains the reading logic:
- Chapter lookup and chapter-picker filtering
- The verse navigator state machine
"""

from read_quran.core.chapters import chapter_title, filter_chapters, find_chapter
from read_quran.core.navigator import VerseNavigator

__all__ = [
    # Chapters
    "chapter_title",
    "filter_chapters",
    "find_chapter",
    # Navigator
    "VerseNavigator",
]
