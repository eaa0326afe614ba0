"""
Basic usage example for read-quran.

This example demonstrates the core workflow:
1. Load the chapter list and the first chapter
2. Step through verses, crossing a chapter boundary
3. Jump to a chapter and play a verse
"""

import asyncio

from read_quran import VerseNavigator
from read_quran._logging import configure_logging


def show(navigator: VerseNavigator) -> None:
    verse = navigator.current_verse()
    print(f"   {verse.reference}")
    print(f"   {verse.text[:60]}")


async def main() -> None:
    configure_logging(level="INFO")

    async with VerseNavigator() as navigator:
        # Step 1: chapters, then the verses of chapter 1
        print("\n📖 Step 1: Loading chapters...")
        await navigator.fetch_chapters()
        if navigator.last_error:
            print(f"   ⚠️ {navigator.last_error}")
        print(f"   Loaded {len(navigator.chapters)} chapters")
        print(f"   {navigator.chapter_title()}")
        show(navigator)

        # Step 2: walk past the end of Al-Fatihah into Al-Baqarah
        print("\n➡️  Step 2: Reading forward...")
        for _ in range(len(navigator.verses)):
            task = navigator.next()
            if task is not None:
                await task
        print(f"   {navigator.chapter_title()}")
        show(navigator)

        # Step 3: jump to Ya-Sin and play the first verse
        print("\n🔊 Step 3: Ya-Sin, verse 1...")
        for chapter in navigator.filter_chapters("36"):
            print(f"   Found: {chapter.title}")
        await navigator.select_chapter(36)
        show(navigator)
        await navigator.play_current_verse_audio()
        if navigator.last_error:
            print(f"   ⚠️ {navigator.last_error}")
        await asyncio.sleep(5)
        navigator.stop_audio()


if __name__ == "__main__":
    asyncio.run(main())
