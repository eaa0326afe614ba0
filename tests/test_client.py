"""Tests for the HTTP client."""

import asyncio

import pytest

from read_quran.exceptions import DecodeError, InvalidInputError, NetworkError


def run(client, coro_fn):
    async def main():
        try:
            return await coro_fn()
        finally:
            await client.aclose()

    return asyncio.run(main())


def test_fetch_chapters(client, api):
    chapters = run(client, client.fetch_chapters)

    assert len(chapters) == 114
    assert api.requests == ["/v1/surah"]


def test_fetch_chapter(client, api):
    detail = run(client, lambda: client.fetch_chapter(2))

    assert detail.number == 2
    assert len(detail.ayahs) == 3
    assert detail.ayahs[0].number == 8
    assert detail.ayahs[0].audio == "https://cdn.islamic.network/quran/audio/128/ar.alafasy/8.mp3"
    assert api.chapter_requests == [2]


def test_http_error_becomes_network_error(client, api):
    api.failing.add(5)

    with pytest.raises(NetworkError) as exc_info:
        run(client, lambda: client.fetch_chapter(5))

    assert exc_info.value.status_code == 500
    assert exc_info.value.url == "https://api.test/v1/surah/5"


def test_transport_error_becomes_network_error(client, api):
    api.unreachable.add(5)

    with pytest.raises(NetworkError) as exc_info:
        run(client, lambda: client.fetch_chapter(5))

    assert exc_info.value.status_code is None
    assert "connection refused" in str(exc_info.value)


def test_malformed_body_becomes_decode_error(client, api):
    api.break_chapter_list = True

    with pytest.raises(DecodeError):
        run(client, client.fetch_chapters)


@pytest.mark.parametrize("number", [0, 115])
def test_out_of_range_chapter_is_rejected_without_request(client, api, number):
    with pytest.raises(InvalidInputError):
        run(client, lambda: client.fetch_chapter(number))

    assert api.requests == []


def test_client_is_created_lazily_and_closed(client):
    assert not client.is_open

    async def scenario():
        await client.fetch_chapters()
        assert client.is_open
        await client.aclose()
        assert not client.is_open

    asyncio.run(scenario())
