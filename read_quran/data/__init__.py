"""
Static data module for read-quran.

Provides the built-in fallback shown when the API cannot be reached.
"""

from read_quran.data.fallback import load_fallback_chapters, load_fallback_verses

__all__ = [
    "load_fallback_chapters",
    "load_fallback_verses",
]
