"""Translation services - provider interface, remote providers and the resolver."""

from street_translator.services.translation.translation_service import (
    FailureKind,
    TranslationProvider,
    TranslationResult,
)
from street_translator.services.translation.mymemory_translation_service import MyMemoryTranslationService
from street_translator.services.translation.gemini_translation_service import ApiKeyStatus, GeminiTranslationService
from street_translator.services.translation.translation_resolver import (
    DEGRADED_MESSAGES,
    Resolution,
    ResolutionStage,
    TranslationResolver,
)

__all__ = [
    "FailureKind",
    "TranslationProvider",
    "TranslationResult",
    "MyMemoryTranslationService",
    "ApiKeyStatus",
    "GeminiTranslationService",
    "DEGRADED_MESSAGES",
    "Resolution",
    "ResolutionStage",
    "TranslationResolver",
]
