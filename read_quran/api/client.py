"""
HTTP client for the alquran.cloud REST API.

Example:
    async with QuranAPIClient() as client:
        chapters = await client.fetch_chapters()
        detail = await client.fetch_chapter(1)
"""

from typing import Optional

import httpx

from read_quran._logging import log_fetch_complete, log_fetch_failed, log_fetch_start
from read_quran.api.decoder import decode_chapter_detail, decode_chapter_list
from read_quran.config import ReadQuranSettings, get_settings
from read_quran.exceptions import InvalidInputError, NetworkError
from read_quran.models import TOTAL_CHAPTERS, Chapter, ChapterDetail


class QuranAPIClient:
    """
    Async client for the chapter-list and chapter-detail endpoints.

    The underlying httpx.AsyncClient is created lazily and closed by
    `aclose()` or on leaving an `async with` block.
    """

    def __init__(
        self,
        settings: ReadQuranSettings | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            settings: Settings instance to use (default: process-wide settings)
            transport: Custom httpx transport, e.g. httpx.MockTransport in tests
        """
        self._settings = settings or get_settings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def settings(self) -> ReadQuranSettings:
        return self._settings

    @property
    def is_open(self) -> bool:
        """Whether the HTTP client has been created and not closed."""
        return self._client is not None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(
                    self._settings.request_timeout,
                    connect=self._settings.connect_timeout,
                ),
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "QuranAPIClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def get_raw(self, url: str) -> bytes:
        """
        GET a URL and return the response body.

        Raises:
            NetworkError: On transport failure or a non-2xx status
        """
        log_fetch_start(url)
        try:
            response = await self._get_client().get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = NetworkError(
                f"HTTP {e.response.status_code}",
                url=url,
                status_code=e.response.status_code,
            )
            log_fetch_failed(url, error)
            raise error from e
        except httpx.RequestError as e:
            error = NetworkError(str(e) or type(e).__name__, url=url)
            log_fetch_failed(url, error)
            raise error from e

        log_fetch_complete(url, len(response.content), response.text)
        return response.content

    async def fetch_chapters(self) -> list[Chapter]:
        """
        Fetch metadata for all chapters.

        Raises:
            NetworkError: If the request fails
            DecodeError: If the response is malformed
        """
        raw = await self.get_raw(self._settings.chapters_url)
        return decode_chapter_list(raw)

    async def fetch_chapter(self, chapter_number: int) -> ChapterDetail:
        """
        Fetch one chapter with its verses.

        Args:
            chapter_number: Chapter number (1-114)

        Raises:
            InvalidInputError: If chapter_number is out of range
            NetworkError: If the request fails
            DecodeError: If the response is malformed
        """
        if chapter_number < 1 or chapter_number > TOTAL_CHAPTERS:
            raise InvalidInputError(chapter_number)

        raw = await self.get_raw(self._settings.chapter_url(chapter_number))
        return decode_chapter_detail(
            raw,
            edition=self._settings.audio_edition,
            bitrate=self._settings.audio_bitrate,
            base=self._settings.audio_cdn_base,
        )
