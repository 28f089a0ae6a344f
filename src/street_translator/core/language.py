"""Language entity - the closed set of languages the translator speaks."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Language(str, Enum):
    """Supported languages. The vendor always speaks PT_BR."""

    PT_BR = "pt-BR"
    EN_US = "en-US"
    ES_ES = "es-ES"


VENDOR_LANGUAGE = Language.PT_BR


@dataclass(frozen=True)
class LanguageInfo:
    """Display and provider metadata for a language."""

    code: Language
    name: str
    native_name: str
    flag: str
    speech_code: str
    provider_code: str

    @property
    def model_name(self) -> str:
        """Name used when talking to a generative model."""
        return self.name


SUPPORTED_LANGUAGES: List[LanguageInfo] = [
    LanguageInfo(
        code=Language.PT_BR,
        name="Portuguese",
        native_name="Português",
        flag="🇧🇷",
        speech_code="pt-BR",
        provider_code="pt-BR",
    ),
    LanguageInfo(
        code=Language.EN_US,
        name="English",
        native_name="English",
        flag="🇺🇸",
        speech_code="en-US",
        provider_code="en-US",
    ),
    LanguageInfo(
        code=Language.ES_ES,
        name="Spanish",
        native_name="Español",
        flag="🇪🇸",
        speech_code="es-ES",
        provider_code="es-ES",
    ),
]

_INFO_BY_CODE = {info.code: info for info in SUPPORTED_LANGUAGES}


def get_language_info(language: Language) -> LanguageInfo:
    """Return metadata for a supported language."""
    return _INFO_BY_CODE[Language(language)]


def get_language_by_name(name: str) -> Optional[LanguageInfo]:
    """Find a language by its English name, ignoring case."""
    wanted = name.strip().lower()
    for info in SUPPORTED_LANGUAGES:
        if info.name.lower() == wanted:
            return info
    return None


def traveler_languages() -> List[Language]:
    """Languages a traveler can pick (everything but the vendor's)."""
    return [info.code for info in SUPPORTED_LANGUAGES if info.code != VENDOR_LANGUAGE]
