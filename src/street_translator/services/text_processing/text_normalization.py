"""Text normalization utilities for consistent cache keying and phrase lookups."""

from street_translator.core import Language


def normalize_phrase(text: str) -> str:
    """
    Normalize text for phrase table lookups.

    Rules:
    - Trim leading and trailing whitespace
    - Case-sensitive (phrase keys are authored with their own casing)

    Args:
        text: Original text typed or spoken.

    Returns:
        Normalized text string.
    """
    return text.strip()


def normalize_text(text: str) -> str:
    """
    Normalize text for cache keying.

    Rules:
    - Trim leading and trailing whitespace
    - Lowercase, so "Olá" and " olá " share a cache entry
    - Accents and punctuation are preserved as-is

    Args:
        text: Original text typed or spoken.

    Returns:
        Normalized text string.
    """
    return text.strip().lower()


def make_cache_key(text: str, from_lang: Language, to_lang: Language) -> str:
    """Build the cache key for a translation request."""
    return f"{Language(from_lang).value}:{Language(to_lang).value}:{normalize_text(text)}"
