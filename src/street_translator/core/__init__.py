"""Core domain entities."""

from .language import (
    Language,
    LanguageInfo,
    SUPPORTED_LANGUAGES,
    VENDOR_LANGUAGE,
    get_language_by_name,
    get_language_info,
    traveler_languages,
)
from .message import Message, Speaker

__all__ = [
    "Language",
    "LanguageInfo",
    "SUPPORTED_LANGUAGES",
    "VENDOR_LANGUAGE",
    "get_language_by_name",
    "get_language_info",
    "traveler_languages",
    "Message",
    "Speaker",
]
