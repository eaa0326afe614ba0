"""Tests for the terminal front end."""

import pytest

from read_quran.cli import READ_HELP, build_parser, handle_command, render
from read_quran.models import NavigatorStatus, Verse


def test_render_states(navigator):
    assert "Loading..." in render(navigator)

    navigator.status = NavigatorStatus.LOADING
    assert render(navigator) == "Loading..."

    navigator.status = NavigatorStatus.ERROR
    navigator.last_error = "Network error: HTTP 500"
    assert render(navigator).startswith("! Network error: HTTP 500")

    navigator.status = NavigatorStatus.READY
    navigator.last_error = None
    navigator.verses = [Verse(text="text", reference="Surah-1 (سورة 1) 1:1")]
    assert render(navigator).splitlines() == [
        "Loading Chapters...",
        "-" * 40,
        "text",
        "  Surah-1 (سورة 1) 1:1",
    ]


def test_reader_commands(drive, api, capsys):
    async def scenario(navigator):
        await navigator.fetch_chapters()

        assert await handle_command(navigator, "n")
        assert navigator.current_verse_index == 1

        assert await handle_command(navigator, "c 3")
        assert navigator.current_chapter_number == 3
        assert len(navigator.verses) == 3

        assert await handle_command(navigator, "p")
        assert navigator.current_chapter_number == 2

        assert await handle_command(navigator, "c 200")
        assert navigator.current_chapter_number == 2

        assert await handle_command(navigator, "what")
        assert await handle_command(navigator, "")
        assert not await handle_command(navigator, "q")

    drive(scenario)

    out = capsys.readouterr().out
    assert "No chapter 200" in out
    assert READ_HELP in out
    assert api.chapter_requests == [1, 3, 2]


def test_parser():
    parser = build_parser()

    args = parser.parse_args(["show", "2", "255"])
    assert (args.command, args.chapter, args.verse) == ("show", 2, 255)

    args = parser.parse_args(["--debug", "chapters", "--search", "baq"])
    assert args.debug and args.search == "baq"

    assert parser.parse_args(["read"]).chapter is None


@pytest.mark.parametrize("argv", [["show", "115"], ["show", "x"], ["read", "--chapter", "0"], []])
def test_parser_rejects_bad_input(argv):
    with pytest.raises(SystemExit):
        build_parser().parse_args(argv)
