"""Services layer - business logic and external integrations."""

from street_translator.services.settings_manager import SettingsManager
from street_translator.services.exceptions import (
    PersistenceError,
    ProviderError,
    ProviderUnavailable,
    StreetTranslatorError,
)

# Text processing services
from street_translator.services.text_processing import make_cache_key, normalize_phrase, normalize_text

# Caching services
from street_translator.services.caching import (
    CacheEntry,
    CacheStats,
    FileKeyValueStorage,
    InMemoryKeyValueStorage,
    KeyValueStorage,
    TranslationCache,
)

# Phrase services
from street_translator.services.phrases import (
    CATEGORY_LABELS,
    COMMON_PHRASES,
    PRE_TRANSLATED_PHRASES,
    PhraseDictionary,
    PhraseEntry,
    all_pre_translations,
    phrase_by_id,
    phrases_by_category,
    search_phrases,
)

# Translation services
from street_translator.services.translation import (
    ApiKeyStatus,
    DEGRADED_MESSAGES,
    FailureKind,
    GeminiTranslationService,
    MyMemoryTranslationService,
    Resolution,
    ResolutionStage,
    TranslationProvider,
    TranslationResolver,
    TranslationResult,
)

__all__ = [
    "SettingsManager",
    "PersistenceError",
    "ProviderError",
    "ProviderUnavailable",
    "StreetTranslatorError",
    "make_cache_key",
    "normalize_phrase",
    "normalize_text",
    "CacheEntry",
    "CacheStats",
    "FileKeyValueStorage",
    "InMemoryKeyValueStorage",
    "KeyValueStorage",
    "TranslationCache",
    "CATEGORY_LABELS",
    "COMMON_PHRASES",
    "PRE_TRANSLATED_PHRASES",
    "PhraseDictionary",
    "PhraseEntry",
    "all_pre_translations",
    "phrase_by_id",
    "phrases_by_category",
    "search_phrases",
    "ApiKeyStatus",
    "DEGRADED_MESSAGES",
    "FailureKind",
    "GeminiTranslationService",
    "MyMemoryTranslationService",
    "Resolution",
    "ResolutionStage",
    "TranslationProvider",
    "TranslationResolver",
    "TranslationResult",
]
