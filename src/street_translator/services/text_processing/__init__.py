"""Text processing services - normalization and cache keying."""

from street_translator.services.text_processing.text_normalization import (
    make_cache_key,
    normalize_phrase,
    normalize_text,
)

__all__ = [
    "make_cache_key",
    "normalize_phrase",
    "normalize_text",
]
