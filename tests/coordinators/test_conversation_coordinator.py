"""Unit tests for ConversationCoordinator."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from street_translator.coordinators import ConversationCoordinator
from street_translator.core import Language, Speaker


@pytest.fixture
def mock_resolver():
    """Provide a mocked TranslationResolver."""
    resolver = MagicMock()
    resolver.resolve = AsyncMock(return_value="translated")
    return resolver


@pytest.fixture
def coordinator(mock_resolver):
    """Create a ConversationCoordinator with mocked dependencies."""
    return ConversationCoordinator(resolver=mock_resolver, traveler_language=Language.ES_ES, clock=lambda: 123.0)


class TestConversationCoordinatorInitialization:
    """Tests for traveler language handling."""

    def test_traveler_language_is_set(self, coordinator):
        assert coordinator.traveler_language is Language.ES_ES
        assert coordinator.transcript == ()

    def test_vendor_language_cannot_be_traveler_language(self, mock_resolver):
        with pytest.raises(ValueError):
            ConversationCoordinator(resolver=mock_resolver, traveler_language=Language.PT_BR)

    def test_direction_depends_on_speaker(self, coordinator):
        assert coordinator.direction(Speaker.VENDOR) == (Language.PT_BR, Language.ES_ES)
        assert coordinator.direction(Speaker.TOURIST) == (Language.ES_ES, Language.PT_BR)

    def test_switching_traveler_language(self, coordinator):
        coordinator.set_traveler_language(Language.EN_US)
        assert coordinator.direction(Speaker.VENDOR) == (Language.PT_BR, Language.EN_US)


class TestSpeechInput:
    """Tests for speech recognition events."""

    @pytest.mark.asyncio
    async def test_interim_results_are_ignored(self, coordinator, mock_resolver):
        message = await coordinator.on_speech_result("Quanto cu", False, Speaker.VENDOR)

        assert message is None
        mock_resolver.resolve.assert_not_called()
        assert coordinator.transcript == ()

    @pytest.mark.asyncio
    async def test_final_result_is_translated_and_recorded(self, coordinator, mock_resolver):
        message = await coordinator.on_speech_result(" Quanto custa? ", True, Speaker.VENDOR)

        mock_resolver.resolve.assert_awaited_once_with("Quanto custa?", Language.PT_BR, Language.ES_ES)
        assert message.original_text == "Quanto custa?"
        assert message.translated_text == "translated"
        assert message.sender is Speaker.VENDOR
        assert message.timestamp == 123.0
        assert message.is_from_common_phrase is False
        assert coordinator.transcript == (message,)

    @pytest.mark.asyncio
    async def test_blank_final_result_is_ignored(self, coordinator, mock_resolver):
        assert await coordinator.on_speech_result("   ", True, Speaker.TOURIST) is None
        mock_resolver.resolve.assert_not_called()

    @pytest.mark.asyncio
    async def test_tourist_text_is_translated_to_portuguese(self, coordinator, mock_resolver):
        message = await coordinator.submit_text("¿Tienes agua?", Speaker.TOURIST)

        mock_resolver.resolve.assert_awaited_once_with("¿Tienes agua?", Language.ES_ES, Language.PT_BR)
        assert message.original_language is Language.ES_ES
        assert message.target_language is Language.PT_BR


class TestCommonPhrases:
    """Tests for quick-send catalogue phrases."""

    def test_send_common_phrase_uses_catalogue(self, coordinator, mock_resolver):
        message = coordinator.send_common_phrase("product_beer")

        mock_resolver.resolve.assert_not_called()
        assert message.original_text == "Cerveja gelada"
        assert message.translated_text == "Cerveza fría"
        assert message.is_from_common_phrase is True

    def test_unknown_phrase_raises(self, coordinator):
        with pytest.raises(KeyError):
            coordinator.send_common_phrase("nope")


class TestTranscript:
    """Tests for the running transcript."""

    @pytest.mark.asyncio
    async def test_messages_keep_order_and_clear(self, coordinator):
        first = coordinator.send_common_phrase("greeting_hello")
        second = await coordinator.submit_text("Hola", Speaker.TOURIST)

        assert coordinator.transcript == (first, second)
        assert first.id != second.id

        coordinator.clear_transcript()
        assert coordinator.transcript == ()
