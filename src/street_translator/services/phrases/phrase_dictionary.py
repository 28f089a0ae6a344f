"""Phrase Dictionary - exact-match lookups over the static phrase tables."""

from typing import Dict, Iterable, Mapping, Optional, Tuple

from street_translator.core import Language
from street_translator.services.phrases.phrase_catalogue import COMMON_PHRASES, PhraseEntry
from street_translator.services.phrases.pre_translated_phrases import PRE_TRANSLATED_PHRASES
from street_translator.services.text_processing import normalize_phrase


class PhraseDictionary:
    """
    Zero-cost translation of known phrases.

    Looks up the trimmed text, case-sensitively, first in the flat
    pre-translated table and then in the curated catalogue. The catalogue
    is indexed by (language, text) once at construction so every lookup is
    a pair of dict probes.
    """

    def __init__(
        self,
        flat_table: Mapping[Language, Mapping[str, Mapping[Language, str]]] = PRE_TRANSLATED_PHRASES,
        catalogue: Iterable[PhraseEntry] = COMMON_PHRASES,
    ):
        self._flat_table = flat_table
        self._catalogue_index: Dict[Tuple[Language, str], PhraseEntry] = {}
        for phrase in catalogue:
            for language, text in phrase.translations.items():
                self._catalogue_index.setdefault((language, text), phrase)

    def lookup(self, text: str, from_lang: Language, to_lang: Language) -> Optional[str]:
        """Return the stored translation, or None when the phrase is unknown."""
        key = normalize_phrase(text)
        if not key:
            return None

        row = self._flat_table.get(from_lang, {}).get(key)
        if row is not None and row.get(to_lang):
            return row[to_lang]

        phrase = self._catalogue_index.get((from_lang, key))
        if phrase is not None:
            return phrase.translations.get(to_lang)

        return None
