"""Phrase services - curated catalogue, flat phrase table and the lookup dictionary."""

from street_translator.services.phrases.phrase_catalogue import (
    CATEGORY_LABELS,
    COMMON_PHRASES,
    CategoryLabel,
    PhraseCategory,
    PhraseEntry,
    phrase_by_id,
    phrases_by_category,
    search_phrases,
)
from street_translator.services.phrases.pre_translated_phrases import PRE_TRANSLATED_PHRASES, all_pre_translations
from street_translator.services.phrases.phrase_dictionary import PhraseDictionary

__all__ = [
    "CATEGORY_LABELS",
    "COMMON_PHRASES",
    "CategoryLabel",
    "PhraseCategory",
    "PhraseEntry",
    "phrase_by_id",
    "phrases_by_category",
    "search_phrases",
    "PRE_TRANSLATED_PHRASES",
    "all_pre_translations",
    "PhraseDictionary",
]
