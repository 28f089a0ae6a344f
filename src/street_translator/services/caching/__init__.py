"""Caching services - persistent medium abstraction and the translation cache."""

from street_translator.services.caching.key_value_storage import KeyValueStorage, InMemoryKeyValueStorage
from street_translator.services.caching.file_key_value_storage import FileKeyValueStorage
from street_translator.services.caching.translation_cache import TranslationCache, CacheEntry, CacheStats

__all__ = [
    "KeyValueStorage",
    "InMemoryKeyValueStorage",
    "FileKeyValueStorage",
    "TranslationCache",
    "CacheEntry",
    "CacheStats",
]
