"""
Verse navigator: the fetch/decode/navigate state machine.

The navigator owns the reading cursor (chapter number, verse index) and
the loaded chapter list and verses. All state lives on the asyncio event
loop that drives it; the presentation layer reads the published fields
(or subscribes to snapshots) and calls the operations, never mutating
state directly.

Example:
    async with VerseNavigator() as navigator:
        await navigator.fetch_chapters()
        print(navigator.current_verse())

        task = navigator.next()
        if task is not None:
            await task
"""

import asyncio
from typing import Callable, Optional

from read_quran._logging import get_logger, log_error, log_navigation, log_warning
from read_quran.api import QuranAPIClient, build_verses
from read_quran.audio import BaseAudioPlayer, PydubAudioPlayer
from read_quran.config import ReadQuranSettings, get_settings
from read_quran.core.chapters import chapter_title, filter_chapters, find_chapter
from read_quran.data import load_fallback_chapters, load_fallback_verses
from read_quran.exceptions import (
    AudioPlaybackError,
    DecodeError,
    InvalidInputError,
    NetworkError,
    ReadQuranError,
)
from read_quran.models import TOTAL_CHAPTERS, Chapter, NavigatorState, NavigatorStatus, Verse

logger = get_logger(__name__)

NO_AUDIO_MESSAGE = "No audio available for this verse"

StateCallback = Callable[[NavigatorState], None]


def _describe(error: ReadQuranError) -> str:
    if isinstance(error, DecodeError):
        return f"Failed to decode: {error.message}"
    if isinstance(error, NetworkError):
        return f"Network error: {error}"
    return str(error)


class VerseNavigator:
    """
    Reading cursor over chapters and verses.

    Verse fetches run as asyncio tasks. Starting a new verse fetch cancels
    the one in flight, so the most recently issued fetch is the one whose
    result is published. Errors never propagate out of the fetch operations;
    they are recorded in `last_error` and the last good data stays in place.

    Attributes:
        current_chapter_number: Chapter under the cursor (1-114)
        current_verse_index: Index into `verses`
        verses: Verses of the loaded chapter
        chapters: Chapter list, fetched once at startup
        status: Fetch status
        last_error: Message of the most recent failure
    """

    def __init__(
        self,
        client: QuranAPIClient | None = None,
        player: BaseAudioPlayer | None = None,
        settings: ReadQuranSettings | None = None,
    ):
        """
        Initialize the navigator.

        Args:
            client: API client (default: a new QuranAPIClient owned by the navigator)
            player: Audio player (default: a PydubAudioPlayer owned by the navigator)
            settings: Settings instance to use
        """
        self._settings = settings or (client.settings if client else get_settings())
        self._owns_client = client is None
        self._client = client or QuranAPIClient(self._settings)
        self._owns_player = player is None
        self._player = player or PydubAudioPlayer(self._settings)

        self.current_chapter_number: int = self._settings.initial_chapter
        self.current_verse_index: int = 0
        self.verses: list[Verse] = []
        self.chapters: list[Chapter] = []
        self.status: NavigatorStatus = NavigatorStatus.IDLE
        self.last_error: Optional[str] = None

        self._fetch_task: Optional[asyncio.Task] = None
        self._subscribers: list[StateCallback] = []

    # ------------------------------------------------------------------
    # Published state
    # ------------------------------------------------------------------

    @property
    def is_loading(self) -> bool:
        return self.status == NavigatorStatus.LOADING

    @property
    def state(self) -> NavigatorState:
        """Immutable snapshot of the published fields."""
        return NavigatorState(
            current_chapter_number=self.current_chapter_number,
            current_verse_index=self.current_verse_index,
            verses=tuple(self.verses),
            chapters=tuple(self.chapters),
            status=self.status,
            last_error=self.last_error,
        )

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """
        Register a callback receiving a state snapshot after every change.

        Returns:
            A function that removes the callback
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self) -> None:
        if not self._subscribers:
            return
        snapshot = self.state
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception:
                log_error("State subscriber failed", exc_info=True, status=snapshot.status.value)

    def current_verse(self) -> Verse:
        """Verse under the cursor, or a "Loading..." placeholder. Never out of range."""
        if not self.verses:
            return Verse.placeholder()
        return self.verses[min(self.current_verse_index, len(self.verses) - 1)]

    def current_chapter(self) -> Optional[Chapter]:
        return find_chapter(self.chapters, self.current_chapter_number)

    def chapter_title(self) -> str:
        return chapter_title(self.chapters, self.current_chapter_number)

    def filter_chapters(self, query: str = "") -> list[Chapter]:
        return filter_chapters(self.chapters, query)

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    async def fetch_chapters(self) -> None:
        """
        Fetch the chapter list, then the verses of the current chapter.

        On failure `last_error` is set and previous chapters and verses are
        left untouched. This is also the manual retry after an error.
        """
        self.status = NavigatorStatus.LOADING
        self.last_error = None
        self._publish()

        try:
            chapters = await self._client.fetch_chapters()
        except (NetworkError, DecodeError) as e:
            self._record_failure(e)
            self._publish()
            return

        self.chapters = chapters
        logger.info(f"Loaded {len(chapters)} chapters")
        self._publish()

        task = self.fetch_verses_for_chapter(self.current_chapter_number)
        # a newer fetch may cancel this one; that is not our failure
        await asyncio.wait([task])

    def fetch_verses_for_chapter(
        self,
        chapter_number: int,
        on_complete: Optional[Callable[[], None]] = None,
    ) -> asyncio.Task:
        """
        Start fetching the verses of a chapter.

        Any verse fetch still in flight is cancelled. Must be called from a
        running event loop.

        Args:
            chapter_number: Chapter to load (1-114)
            on_complete: Called after the new verses are published (success only)

        Returns:
            The task performing the fetch
        """
        if self._fetch_task is not None and not self._fetch_task.done():
            logger.debug("Cancelling superseded verse fetch")
            self._fetch_task.cancel()

        self._fetch_task = asyncio.get_running_loop().create_task(
            self._load_verses(chapter_number, on_complete)
        )
        return self._fetch_task

    async def _load_verses(
        self,
        chapter_number: int,
        on_complete: Optional[Callable[[], None]],
    ) -> None:
        self.status = NavigatorStatus.LOADING
        self.last_error = None
        self._publish()

        try:
            detail = await self._client.fetch_chapter(chapter_number)
        except (NetworkError, DecodeError, InvalidInputError) as e:
            self._record_failure(e)
            if not self.verses:
                self._load_fallback()
            self._publish()
            return

        self.verses = build_verses(detail, chapter_number)
        self.status = NavigatorStatus.READY
        logger.info(f"Loaded chapter {chapter_number} ({len(self.verses)} verses)")

        if on_complete is not None:
            on_complete()
        self._publish()

    def _record_failure(self, error: ReadQuranError) -> None:
        self.status = NavigatorStatus.ERROR
        self.last_error = _describe(error)
        log_error(self.last_error)

    def _load_fallback(self) -> None:
        log_warning("Using built-in fallback verses")
        self.verses = load_fallback_verses()
        if not self.chapters:
            self.chapters = load_fallback_chapters()

    async def wait_until_idle(self) -> None:
        """Wait for the verse fetch in flight, including any that supersede it."""
        while self._fetch_task is not None and not self._fetch_task.done():
            await asyncio.wait([self._fetch_task])

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def next(self) -> Optional[asyncio.Task]:
        """
        Move to the next verse.

        At the end of a chapter this moves to verse 0 of the following
        chapter (114 wraps to 1) and starts fetching it.

        Returns:
            The fetch task, or None if no fetch was needed
        """
        if self.current_verse_index < len(self.verses) - 1:
            self.current_verse_index += 1
            log_navigation(self.current_chapter_number, self.current_verse_index)
            self._publish()
            return None

        if self.current_chapter_number < TOTAL_CHAPTERS:
            self.current_chapter_number += 1
        else:
            self.current_chapter_number = 1
        self.current_verse_index = 0
        log_navigation(self.current_chapter_number, self.current_verse_index)

        return self.fetch_verses_for_chapter(self.current_chapter_number)

    def previous(self) -> Optional[asyncio.Task]:
        """
        Move to the previous verse.

        At the start of a chapter this loads the preceding chapter and jumps
        to its last verse. At chapter 1 verse 0 nothing happens: backward
        navigation does not wrap.

        Returns:
            The fetch task, or None if no fetch was needed
        """
        if self.current_verse_index > 0:
            self.current_verse_index -= 1
            log_navigation(self.current_chapter_number, self.current_verse_index)
            self._publish()
            return None

        if self.current_chapter_number <= 1:
            return None

        self.current_chapter_number -= 1
        log_navigation(self.current_chapter_number, self.current_verse_index)

        def jump_to_last_verse() -> None:
            self.current_verse_index = max(len(self.verses) - 1, 0)

        return self.fetch_verses_for_chapter(self.current_chapter_number, jump_to_last_verse)

    def select_chapter(self, chapter_number: int, strict: bool = False) -> Optional[asyncio.Task]:
        """
        Jump to verse 0 of a chapter and start fetching it.

        Args:
            chapter_number: Chapter number (1-114)
            strict: Raise on an out-of-range number instead of ignoring it

        Returns:
            The fetch task, or None if the number was ignored

        Raises:
            InvalidInputError: If strict and chapter_number is out of range
        """
        if chapter_number < 1 or chapter_number > TOTAL_CHAPTERS:
            if strict:
                raise InvalidInputError(chapter_number)
            log_warning("Ignoring chapter selection", chapter_number=chapter_number)
            return None

        self.current_chapter_number = chapter_number
        self.current_verse_index = 0
        log_navigation(self.current_chapter_number, self.current_verse_index)

        return self.fetch_verses_for_chapter(chapter_number)

    # ------------------------------------------------------------------
    # Audio
    # ------------------------------------------------------------------

    async def play_current_verse_audio(self) -> None:
        """
        Play the current verse's recitation, stopping any previous playback.

        Playback failures are recorded in `last_error`.
        """
        audio_url = self.current_verse().audio_url
        if audio_url is None:
            self.last_error = NO_AUDIO_MESSAGE
            self._publish()
            return

        self._player.stop()
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, self._player.play, audio_url)
        except AudioPlaybackError as e:
            self.last_error = str(e)
            log_error("Audio playback failed", url=audio_url, reason=e.reason)
            self._publish()

    def stop_audio(self) -> None:
        self._player.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Cancel the fetch in flight, stop audio, and close what the navigator created."""
        if self._fetch_task is not None and not self._fetch_task.done():
            self._fetch_task.cancel()
            await asyncio.wait([self._fetch_task])
        if self._owns_player:
            self._player.close()
        else:
            self._player.stop()
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "VerseNavigator":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def __str__(self) -> str:
        return (
            f"VerseNavigator(chapter={self.current_chapter_number}, "
            f"index={self.current_verse_index}, status={self.status.value})"
        )
