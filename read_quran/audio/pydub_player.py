"""
pydub-based verse audio player.

Downloads the verse mp3, decodes it with pydub (needs ffmpeg on PATH) and
plays the raw PCM through simpleaudio so playback can be stopped.
"""

import io
import threading

import httpx

from read_quran._logging import get_logger
from read_quran.audio.base import BaseAudioPlayer
from read_quran.config import ReadQuranSettings, get_settings
from read_quran.exceptions import AudioPlaybackError

logger = get_logger(__name__)


class PydubAudioPlayer(BaseAudioPlayer):
    """
    Plays one verse at a time.

    Example:
        with PydubAudioPlayer() as player:
            player.play("https://cdn.islamic.network/quran/audio/128/ar.alafasy/1.mp3")
    """

    def __init__(
        self,
        settings: ReadQuranSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings or get_settings()
        self._transport = transport
        self._play_lock = threading.Lock()
        self._play_obj = None
        self._generation = 0

    @property
    def is_playing(self) -> bool:
        with self._play_lock:
            return self._play_obj is not None and self._play_obj.is_playing()

    def _download(self, url: str) -> bytes:
        try:
            with httpx.Client(
                timeout=httpx.Timeout(
                    self._settings.request_timeout,
                    connect=self._settings.connect_timeout,
                ),
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise AudioPlaybackError(url, str(e) or type(e).__name__) from e
        return response.content

    def _decode(self, url: str, data: bytes):
        try:
            from pydub import AudioSegment
        except ImportError:
            raise AudioPlaybackError(
                url,
                "pydub not installed. Install with: pip install read-quran[audio]",
            )

        try:
            return AudioSegment.from_file(io.BytesIO(data), format="mp3")
        except Exception as e:
            raise AudioPlaybackError(url, f"decode failed: {e}") from e

    def play(self, url: str) -> None:
        with self._play_lock:
            self._stop_locked()
            generation = self._generation

        data = self._download(url)
        segment = self._decode(url, data)

        try:
            import simpleaudio
        except ImportError:
            raise AudioPlaybackError(
                url,
                "simpleaudio not installed. Install with: pip install read-quran[audio]",
            )

        with self._play_lock:
            if generation != self._generation:
                # stop() or a newer play() ran while downloading
                logger.debug(f"Playback of {url} cancelled before start")
                return
            try:
                self._play_obj = simpleaudio.play_buffer(
                    segment.raw_data,
                    num_channels=segment.channels,
                    bytes_per_sample=segment.sample_width,
                    sample_rate=segment.frame_rate,
                )
            except Exception as e:
                self._play_obj = None
                raise AudioPlaybackError(url, str(e)) from e

        logger.info(f"Playing {url} ({len(segment) / 1000:.1f}s)")

    def _stop_locked(self) -> None:
        self._generation += 1
        if self._play_obj is not None:
            self._play_obj.stop()
            self._play_obj = None
            logger.debug("Playback stopped")

    def stop(self) -> None:
        with self._play_lock:
            self._stop_locked()
