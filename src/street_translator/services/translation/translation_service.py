"""Translation Service - provider interface shared by every remote backend."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from street_translator.core import Language


class FailureKind(str, Enum):
    """Why a provider produced no translation."""

    UNAVAILABLE = "unavailable"  # structurally unusable, e.g. no credential
    ERROR = "error"


@dataclass(frozen=True)
class TranslationResult:
    """Result of a translation request: a text or a failure kind."""

    provider: str
    text: str = ""
    failure: Optional[FailureKind] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, provider: str, text: str) -> "TranslationResult":
        return cls(provider=provider, text=text)

    @classmethod
    def failed(cls, provider: str, kind: FailureKind, error: str) -> "TranslationResult":
        return cls(provider=provider, failure=kind, error=error)

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.failure is not None


class TranslationProvider(ABC):
    """
    Abstract remote translation backend.

    Implementations (MyMemoryTranslationService, GeminiTranslationService)
    handle API calls and never raise from `translate`: every failure comes
    back as a TranslationResult with `is_error` set.
    """

    name: str = "provider"

    def is_available(self) -> bool:
        """False when the provider cannot be used at all (e.g. no credential)."""
        return True

    @abstractmethod
    async def translate(self, text: str, from_lang: Language, to_lang: Language) -> TranslationResult:
        """
        Translate text between two supported languages.

        Args:
            text: Text to translate.
            from_lang: Language the text is written in.
            to_lang: Language to translate into.

        Returns:
            TranslationResult with text or failure kind.
        """
        pass
