"""Shared fixtures: a fake alquran.cloud API served through httpx.MockTransport."""

import asyncio
import json
import re

import httpx
import pytest

from read_quran.api import QuranAPIClient
from read_quran.audio import BaseAudioPlayer
from read_quran.config import ReadQuranSettings
from read_quran.core import VerseNavigator
from read_quran.exceptions import AudioPlaybackError

API_BASE = "https://api.test/v1"

_CHAPTER_PATH = re.compile(r"/surah/(\d+)$")


def verse_count(chapter_number: int) -> int:
    return {1: 7, 114: 6}.get(chapter_number, 3)


def first_global_number(chapter_number: int) -> int:
    return sum(verse_count(n) for n in range(1, chapter_number)) + 1


def chapter_list_payload() -> dict:
    return {
        "code": 200,
        "status": "OK",
        "data": [
            {
                "number": n,
                "name": f"سورة {n}",
                "englishName": f"Surah-{n}",
                "englishNameTranslation": f"Chapter {n}",
                "numberOfAyahs": verse_count(n),
                "revelationType": "Meccan",
            }
            for n in range(1, 115)
        ],
    }


def chapter_payload(chapter_number: int, with_audio: bool = False) -> dict:
    start = first_global_number(chapter_number)
    ayahs = []
    for i in range(verse_count(chapter_number)):
        ayah = {
            "number": start + i,
            "text": f"verse {chapter_number}:{i + 1}",
            "numberInSurah": i + 1,
            "juz": 1,
        }
        if with_audio:
            ayah["audio"] = f"https://audio.test/{start + i}.mp3"
        ayahs.append(ayah)

    return {
        "code": 200,
        "status": "OK",
        "data": {
            "number": chapter_number,
            "name": f"سورة {chapter_number}",
            "englishName": f"Surah-{chapter_number}",
            "englishNameTranslation": f"Chapter {chapter_number}",
            "revelationType": "Meccan",
            "numberOfAyahs": len(ayahs),
            "ayahs": ayahs,
        },
    }


class FakeQuranAPI:
    """
    In-memory stand-in for api.alquran.cloud.

    Attributes:
        requests: Paths requested, in order
        failing: Chapters answering HTTP 500
        unreachable: Chapters raising a connection error
        broken: Chapters answering with a body missing "name"
        gates: Chapters whose response waits until the event is set
        fail_chapter_list: Make GET /surah answer HTTP 500
        break_chapter_list: Make GET /surah answer with a body missing "name"
    """

    def __init__(self):
        self.requests: list[str] = []
        self.failing: set[int] = set()
        self.unreachable: set[int] = set()
        self.broken: set[int] = set()
        self.gates: dict[int, asyncio.Event] = {}
        self.fail_chapter_list = False
        self.break_chapter_list = False

    @property
    def chapter_requests(self) -> list[int]:
        return [
            int(match.group(1))
            for match in (_CHAPTER_PATH.search(path) for path in self.requests)
            if match
        ]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requests.append(path)

        if path.endswith("/surah"):
            if self.fail_chapter_list:
                return httpx.Response(500, text="server error")
            payload = chapter_list_payload()
            if self.break_chapter_list:
                del payload["data"][0]["name"]
            return httpx.Response(200, json=payload)

        match = _CHAPTER_PATH.search(path)
        if not match:
            return httpx.Response(404, json={"code": 404, "status": "Not Found"})

        number = int(match.group(1))
        if number in self.gates:
            await self.gates[number].wait()
        if number in self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if number in self.failing:
            return httpx.Response(500, text="server error")

        payload = chapter_payload(number)
        if number in self.broken:
            del payload["data"]["name"]
        return httpx.Response(200, content=json.dumps(payload).encode("utf-8"))


class RecordingPlayer(BaseAudioPlayer):
    """Audio player that records calls instead of playing."""

    def __init__(self, fail_with: str | None = None):
        self.events: list[tuple] = []
        self.fail_with = fail_with
        self._current: str | None = None

    def play(self, url: str) -> None:
        self.stop()
        if self.fail_with:
            raise AudioPlaybackError(url, self.fail_with)
        self.events.append(("play", url))
        self._current = url

    def stop(self) -> None:
        self.events.append(("stop",))
        self._current = None

    def close(self) -> None:
        self.events.append(("close",))
        self._current = None

    @property
    def is_playing(self) -> bool:
        return self._current is not None


@pytest.fixture
def settings() -> ReadQuranSettings:
    return ReadQuranSettings(api_base_url=API_BASE, initial_chapter=1)


@pytest.fixture
def api() -> FakeQuranAPI:
    return FakeQuranAPI()


@pytest.fixture
def client(settings, api) -> QuranAPIClient:
    return QuranAPIClient(settings, transport=api.transport)


@pytest.fixture
def player() -> RecordingPlayer:
    return RecordingPlayer()


@pytest.fixture
def navigator(client, player, settings) -> VerseNavigator:
    return VerseNavigator(client=client, player=player, settings=settings)


@pytest.fixture
def drive(navigator, client):
    """Run `scenario(navigator)` on a fresh event loop, closing everything afterwards."""

    def _drive(scenario):
        async def main():
            try:
                await scenario(navigator)
            finally:
                await navigator.aclose()
                await client.aclose()

        asyncio.run(main())

    return _drive
