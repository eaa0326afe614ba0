"""
Audio module for read-quran.

Provides the abstract player interface and a pydub implementation.
"""

from read_quran.audio.base import BaseAudioPlayer
from read_quran.audio.pydub_player import PydubAudioPlayer

__all__ = [
    "BaseAudioPlayer",
    "PydubAudioPlayer",
]
