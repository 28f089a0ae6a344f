"""Conversation Coordinator - turns speech and typed input into translated transcript lines."""

import logging
import time
import uuid
from typing import Callable, List, Optional

from street_translator.core import Language, Message, Speaker, VENDOR_LANGUAGE
from street_translator.services import PhraseEntry, TranslationResolver, phrase_by_id

logger = logging.getLogger(__name__)


class ConversationCoordinator:
    """
    Orchestrates the vendor/tourist conversation.

    Responsibilities:
    - Pick the translation direction from who is speaking.
    - Resolve final speech transcripts and typed text through the resolver.
    - Send catalogue phrases without any translation lookup.
    - Keep the running transcript.
    """

    def __init__(
        self,
        resolver: TranslationResolver,
        traveler_language: Language = Language.EN_US,
        clock: Callable[[], float] = time.time,
    ):
        self.resolver = resolver
        self._traveler_language = VENDOR_LANGUAGE
        self.set_traveler_language(traveler_language)
        self._clock = clock
        self._messages: List[Message] = []

    @property
    def traveler_language(self) -> Language:
        return self._traveler_language

    @property
    def transcript(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def set_traveler_language(self, language: Language) -> None:
        """Switch the tourist's language. It cannot be the vendor's."""
        language = Language(language)
        if language == VENDOR_LANGUAGE:
            raise ValueError(f"Traveler language must differ from {VENDOR_LANGUAGE.value}")
        self._traveler_language = language

    def direction(self, speaker: Speaker) -> tuple[Language, Language]:
        """(from, to) languages for a line said by `speaker`."""
        if speaker == Speaker.VENDOR:
            return VENDOR_LANGUAGE, self._traveler_language
        return self._traveler_language, VENDOR_LANGUAGE

    async def on_speech_result(self, transcript: str, is_final: bool, speaker: Speaker) -> Optional[Message]:
        """
        Called for every speech recognition event.

        Interim results are ignored; only a final transcript is translated.
        """
        if not is_final:
            return None
        return await self.submit_text(transcript, speaker)

    async def submit_text(self, text: str, speaker: Speaker) -> Optional[Message]:
        """Translate a typed or spoken line and append it to the transcript."""
        text = text.strip()
        if not text:
            return None

        from_lang, to_lang = self.direction(speaker)
        translated = await self.resolver.resolve(text, from_lang, to_lang)
        return self._append(speaker, text, translated, from_lang, to_lang)

    def send_common_phrase(self, phrase_id: str) -> Message:
        """Send a catalogue phrase from the vendor using its stored translation."""
        phrase: Optional[PhraseEntry] = phrase_by_id(phrase_id)
        if phrase is None:
            raise KeyError(f"Unknown phrase: {phrase_id}")

        return self._append(
            Speaker.VENDOR,
            phrase.text(VENDOR_LANGUAGE),
            phrase.text(self._traveler_language),
            VENDOR_LANGUAGE,
            self._traveler_language,
            is_from_common_phrase=True,
        )

    def clear_transcript(self) -> None:
        self._messages.clear()

    def _append(
        self,
        speaker: Speaker,
        original: str,
        translated: str,
        from_lang: Language,
        to_lang: Language,
        is_from_common_phrase: bool = False,
    ) -> Message:
        message = Message(
            id=uuid.uuid4().hex,
            sender=speaker,
            original_text=original,
            translated_text=translated,
            timestamp=self._clock(),
            original_language=from_lang,
            target_language=to_lang,
            is_from_common_phrase=is_from_common_phrase,
        )
        self._messages.append(message)
        logger.debug("%s: %r -> %r", speaker.value, original, translated)
        return message
