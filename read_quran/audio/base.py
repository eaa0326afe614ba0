"""
Abstract base class for verse audio playback.

This module defines the interface that all audio player implementations must follow.
"""

from abc import ABC, abstractmethod


class BaseAudioPlayer(ABC):
    """
    Abstract interface for audio playback.

    A player owns at most one playback handle. Starting playback always
    stops the previous handle before creating the new one.

    Example:
        class MyPlayer(BaseAudioPlayer):
            def play(self, url: str) -> None:
                self.stop()
                ...
    """

    @abstractmethod
    def play(self, url: str) -> None:
        """
        Stop any current playback and start playing `url`.

        Args:
            url: Audio URL (mp3)

        Raises:
            AudioPlaybackError: If the audio cannot be fetched, decoded or played
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop current playback, if any. Safe to call when idle."""
        pass

    @property
    @abstractmethod
    def is_playing(self) -> bool:
        """Whether audio is currently playing."""
        pass

    def close(self) -> None:
        """Release playback resources."""
        self.stop()

    def __enter__(self) -> "BaseAudioPlayer":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
