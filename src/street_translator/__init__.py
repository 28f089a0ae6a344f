"""
Street Translator - a point-of-sale conversation translator for beach vendors.

This package provides:
- Translation resolution: cache, phrase tables, MyMemory, then Gemini
- A persistent translation cache with 30-day expiry
- A curated vendor phrase catalogue
- A conversation coordinator keeping the running transcript
"""

__version__ = "0.1.0"

# Make key components available at package level
from street_translator.core import Language, Message, Speaker
from street_translator.services import TranslationResolver

__all__ = [
    "Language",
    "Message",
    "Speaker",
    "TranslationResolver",
]
