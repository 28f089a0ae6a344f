"""Translation Resolver - cache, phrase dictionary, then remote providers, in that order."""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from street_translator.core import Language
from street_translator.services.caching import CacheStats, TranslationCache
from street_translator.services.phrases import PhraseDictionary
from street_translator.services.text_processing import make_cache_key
from street_translator.services.translation.translation_service import (
    FailureKind,
    TranslationProvider,
    TranslationResult,
)

logger = logging.getLogger(__name__)


class ResolutionStage(str, Enum):
    """Stage of the resolution chain that produced a result."""

    IDENTITY = "identity"
    EMPTY = "empty"
    CACHE = "cache"
    DICTIONARY = "dictionary"
    PROVIDER = "provider"
    DEGRADED = "degraded"


@dataclass(frozen=True)
class Resolution:
    """What a single resolve call returned and where it came from."""

    text: str
    stage: ResolutionStage
    provider: Optional[str] = None


DEGRADED_MESSAGES: Mapping[Language, str] = MappingProxyType({
    Language.PT_BR: "Erro na tradução.",
    Language.EN_US: "Translation error.",
    Language.ES_ES: "Error en la traducción.",
})


class TranslationResolver:
    """
    Resolves a translation through a fixed chain of stages.

    Order: cache, phrase dictionary, then each provider in the order given.
    The first hit wins; every hit except a cache hit is written back to the
    cache. Every stage is tried at most once per call and providers are
    awaited one after another, never raced.

    `resolve` always returns a string. When every stage fails it returns
    the degraded message for the speaker's language, which is never cached.
    Identical concurrent requests are not de-duplicated.

    `last_resolution` is diagnostic only. It records the most recently
    finished call, so with overlapping `resolve` calls the last one to
    complete wins and it may not describe the caller's own request.
    """

    def __init__(
        self,
        cache: TranslationCache,
        dictionary: PhraseDictionary,
        providers: Sequence[TranslationProvider],
        degraded_messages: Mapping[Language, str] = DEGRADED_MESSAGES,
    ):
        self._cache = cache
        self._dictionary = dictionary
        self._providers = tuple(providers)
        self._degraded_messages = degraded_messages
        self.last_resolution: Optional[Resolution] = None

    @property
    def providers(self) -> tuple[TranslationProvider, ...]:
        return self._providers

    async def resolve(self, text: str, from_lang: Language, to_lang: Language) -> str:
        """Translate text, falling back stage by stage. Never raises for provider failures."""
        resolution = await self._resolve(text, Language(from_lang), Language(to_lang))
        self.last_resolution = resolution
        return resolution.text

    def clear_cache(self) -> None:
        self._cache.clear()

    def cache_stats(self) -> CacheStats:
        return self._cache.stats()

    def degraded_message(self, language: Language) -> str:
        return self._degraded_messages[language]

    async def _resolve(self, text: str, from_lang: Language, to_lang: Language) -> Resolution:
        if from_lang == to_lang:
            return Resolution(text, ResolutionStage.IDENTITY)
        if not text.strip():
            return Resolution("", ResolutionStage.EMPTY)

        key = make_cache_key(text, from_lang, to_lang)

        cached = self._cache.get(key)
        if cached:
            logger.debug("Cache hit: %r", text)
            return Resolution(cached, ResolutionStage.CACHE)

        phrase = self._dictionary.lookup(text, from_lang, to_lang)
        if phrase:
            logger.debug("Phrase hit: %r", text)
            self._cache.set(key, phrase)
            return Resolution(phrase, ResolutionStage.DICTIONARY)

        last_stage = ResolutionStage.DICTIONARY.value
        for provider in self._providers:
            if not provider.is_available():
                logger.debug("Skipping %s: provider unavailable", provider.name)
                continue

            result = await self._call_provider(provider, text, from_lang, to_lang)
            last_stage = provider.name
            if result.is_error:
                if result.failure is FailureKind.UNAVAILABLE:
                    logger.debug("Skipping %s: %s", provider.name, result.error)
                else:
                    logger.info("%s failed, falling back: %s", provider.name, result.error)
                continue

            logger.debug("%s translation: %r", provider.name, text)
            self._cache.set(key, result.text)
            return Resolution(result.text, ResolutionStage.PROVIDER, provider.name)

        logger.warning(
            "All translation methods failed for %s->%s (degraded after %s)",
            from_lang.value,
            to_lang.value,
            last_stage,
        )
        return Resolution(self._degraded_messages[from_lang], ResolutionStage.DEGRADED)

    @staticmethod
    async def _call_provider(
        provider: TranslationProvider, text: str, from_lang: Language, to_lang: Language
    ) -> TranslationResult:
        try:
            return await provider.translate(text, from_lang, to_lang)
        except Exception as e:
            # Providers report failures as results; anything raised is a bug in one.
            logger.exception("Provider %s raised instead of returning a result", provider.name)
            return TranslationResult.failed(provider.name, FailureKind.ERROR, str(e))
