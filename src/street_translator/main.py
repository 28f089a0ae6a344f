"""Main entry point for the street translator."""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from street_translator.coordinators import ConversationCoordinator
from street_translator.core import Language, Speaker, traveler_languages
from street_translator.services import (
    FileKeyValueStorage,
    GeminiTranslationService,
    MyMemoryTranslationService,
    PhraseDictionary,
    SettingsManager,
    TranslationCache,
    TranslationResolver,
)

logger = logging.getLogger(__name__)

LANGUAGE_CHOICES = [language.value for language in Language]


@dataclass
class Application:
    """Wired components, owned by the composition root."""

    settings: SettingsManager
    cache: TranslationCache
    mymemory: MyMemoryTranslationService
    gemini: GeminiTranslationService
    resolver: TranslationResolver

    async def close(self) -> None:
        await self.mymemory.close()


def build_application(settings: Optional[SettingsManager] = None) -> Application:
    """
    Bootstrap the translator following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    settings = settings or SettingsManager()

    storage = FileKeyValueStorage(settings.get_cache_dir())
    cache = TranslationCache(storage)

    mymemory = MyMemoryTranslationService(email=settings.get_mymemory_email())
    gemini = GeminiTranslationService(
        api_key=settings.get_gemini_api_key(),
        model=settings.get_gemini_model() or GeminiTranslationService.MODEL_NAME,
    )
    if not gemini.is_available():
        logger.warning("GEMINI_API_KEY not configured; Gemini fallback disabled")

    resolver = TranslationResolver(
        cache=cache,
        dictionary=PhraseDictionary(),
        providers=[mymemory, gemini],
    )
    return Application(settings, cache, mymemory, gemini, resolver)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="street-translator",
        description="Translate between a street vendor and a traveler.",
    )
    parser.add_argument("text", nargs="*", help="Text to translate")
    parser.add_argument("--from", dest="from_lang", choices=LANGUAGE_CHOICES, default=Language.PT_BR.value)
    parser.add_argument("--to", dest="to_lang", choices=LANGUAGE_CHOICES, default=Language.EN_US.value)
    parser.add_argument("--interactive", action="store_true", help="Start a vendor/tourist conversation")
    parser.add_argument(
        "--traveler",
        choices=[language.value for language in traveler_languages()],
        default=Language.EN_US.value,
        help="Traveler language for --interactive",
    )
    parser.add_argument("--clear-cache", action="store_true", help="Delete all cached translations")
    parser.add_argument("--stats", action="store_true", help="Show translation cache statistics")
    parser.add_argument("--check-key", action="store_true", help="Check the Gemini API key")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


async def run_conversation(coordinator: ConversationCoordinator, stdin: TextIO, stdout: TextIO) -> None:
    """
    Line-based conversation loop.

    Lines starting with `v:` are said by the vendor, `t:` by the tourist.
    `/phrase <id>` sends a catalogue phrase. An empty line or EOF ends the loop.
    """
    speakers = {"v": Speaker.VENDOR, "t": Speaker.TOURIST}
    while True:
        raw = await asyncio.to_thread(stdin.readline)
        line = raw.strip()
        if not line:
            break

        if line.startswith("/phrase "):
            try:
                message = coordinator.send_common_phrase(line.split(maxsplit=1)[1])
            except KeyError as e:
                print(f"! {e}", file=stdout)
                continue
        else:
            prefix, _, text = line.partition(":")
            speaker = speakers.get(prefix.strip().lower())
            if speaker is None or not text.strip():
                print("! Use 'v: <text>' or 't: <text>'", file=stdout)
                continue
            message = await coordinator.on_speech_result(text, True, speaker)

        if message is not None:
            print(f"[{message.sender.value}] {message.original_text} -> {message.translated_text}", file=stdout)


async def run(args: argparse.Namespace) -> int:
    app = build_application()
    try:
        if args.clear_cache:
            app.resolver.clear_cache()
            print("Translation cache cleared")

        if args.stats:
            stats = app.resolver.cache_stats()
            print(f"Cached translations: {stats.size}")
            if stats.oldest_timestamp is not None:
                print(f"Oldest entry (epoch ms): {stats.oldest_timestamp:.0f}")

        if args.check_key:
            status = await app.gemini.validate_api_key()
            print(f"Gemini API key: {status.value}")

        if args.interactive:
            coordinator = ConversationCoordinator(app.resolver, Language(args.traveler))
            await run_conversation(coordinator, sys.stdin, sys.stdout)
        elif args.text:
            text = " ".join(args.text)
            print(await app.resolver.resolve(text, Language(args.from_lang), Language(args.to_lang)))
    finally:
        await app.close()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
