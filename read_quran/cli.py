"""
Terminal front end for read-quran.

Usage:
    read-quran chapters                 # List all chapters
    read-quran chapters --search baq    # Filter the chapter list
    read-quran show 2 255               # Print one verse
    read-quran read --chapter 36        # Interactive reader
"""

import argparse
import asyncio
import sys
from typing import Optional

from read_quran._logging import configure_logging, enable_debug_logging
from read_quran.api import QuranAPIClient, build_verses
from read_quran.config import get_settings
from read_quran.core import VerseNavigator, filter_chapters
from read_quran.exceptions import ReadQuranError
from read_quran.models import TOTAL_CHAPTERS

READ_HELP = "[n]ext  [p]revious  [c N] chapter  [a]udio  [s]top  [r]etry  [q]uit"


def render(navigator: VerseNavigator) -> str:
    """Text view of the navigator: loading, error or the current verse."""
    if navigator.is_loading:
        return "Loading..."

    if navigator.last_error:
        return f"! {navigator.last_error}\n  (r to try again)"

    verse = navigator.current_verse()
    lines = [navigator.chapter_title(), "-" * 40, verse.text]
    if verse.reference:
        lines.append(f"  {verse.reference}")
    return "\n".join(lines)


async def list_chapters(search: str = "") -> int:
    async with QuranAPIClient() as client:
        chapters = await client.fetch_chapters()

    for chapter in filter_chapters(chapters, search):
        print(f"{chapter.number:>3}  {chapter.english_name:<20} {chapter.verse_count:>4} verses  {chapter.name}")
    return 0


async def show_verse(chapter_number: int, verse_number: int = 1) -> int:
    async with QuranAPIClient() as client:
        detail = await client.fetch_chapter(chapter_number)

    verses = build_verses(detail, chapter_number)
    if verse_number < 1 or verse_number > len(verses):
        print(
            f"Chapter {chapter_number} has {len(verses)} verses; got {verse_number}",
            file=sys.stderr,
        )
        return 1

    verse = verses[verse_number - 1]
    print(verse.text)
    print(f"  {verse.reference}")
    if verse.audio_url:
        print(f"  {verse.audio_url}")
    return 0


async def handle_command(navigator: VerseNavigator, command: str) -> bool:
    """
    Apply one reader command.

    Returns:
        False when the reader should exit
    """
    parts = command.strip().split()
    if not parts:
        return True

    action, args = parts[0].lower(), parts[1:]
    if action in ("q", "quit"):
        return False
    elif action in ("n", "next"):
        navigator.next()
    elif action in ("p", "prev", "previous"):
        navigator.previous()
    elif action in ("c", "chapter"):
        if not args or not args[0].isdigit():
            print(f"Usage: c N  (1-{TOTAL_CHAPTERS})")
            return True
        if navigator.select_chapter(int(args[0])) is None:
            print(f"No chapter {args[0]}")
    elif action in ("a", "audio"):
        await navigator.play_current_verse_audio()
    elif action in ("s", "stop"):
        navigator.stop_audio()
    elif action in ("r", "retry"):
        await navigator.fetch_chapters()
    else:
        print(READ_HELP)
        return True

    await navigator.wait_until_idle()
    return True


async def read(chapter_number: Optional[int] = None) -> int:
    loop = asyncio.get_running_loop()

    settings = get_settings()
    if chapter_number is not None:
        settings = settings.model_copy(update={"initial_chapter": chapter_number})

    async with VerseNavigator(settings=settings) as navigator:
        await navigator.fetch_chapters()

        print(READ_HELP)
        while True:
            print()
            print(render(navigator))
            try:
                command = await loop.run_in_executor(None, input, "> ")
            except EOFError:
                break
            if not await handle_command(navigator, command):
                break
    return 0


def chapter_number_arg(raw: str) -> int:
    value = int(raw)
    if value < 1 or value > TOTAL_CHAPTERS:
        raise argparse.ArgumentTypeError(f"chapter must be 1-{TOTAL_CHAPTERS}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="read-quran", description="Read the Quran verse by verse")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    chapters_parser = subparsers.add_parser("chapters", help="List chapters")
    chapters_parser.add_argument("--search", default="", help="Filter by name or number")

    show_parser = subparsers.add_parser("show", help="Print one verse")
    show_parser.add_argument("chapter", type=chapter_number_arg, help="Chapter number (1-114)")
    show_parser.add_argument("verse", type=int, nargs="?", default=1, help="Verse number within the chapter")

    read_parser = subparsers.add_parser("read", help="Interactive reader")
    read_parser.add_argument("--chapter", type=chapter_number_arg, default=None, help="Starting chapter")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.debug:
            enable_debug_logging()
        else:
            configure_logging(level=get_settings().log_level)

        if args.command == "chapters":
            return asyncio.run(list_chapters(args.search))
        if args.command == "show":
            return asyncio.run(show_verse(args.chapter, args.verse))
        return asyncio.run(read(args.chapter))
    except ReadQuranError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
