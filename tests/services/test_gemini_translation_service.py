"""Unit tests for GeminiTranslationService."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from street_translator.core import Language
from street_translator.services import ApiKeyStatus, FailureKind, GeminiTranslationService


def make_client(text=None, side_effect=None) -> MagicMock:
    """Provide a mocked google.genai client exposing the async models API."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=MagicMock(text=text),
        side_effect=side_effect,
    )
    return client


@pytest.fixture
def sleep():
    return AsyncMock()


def make_service(client, sleep, api_key="test-key", jitter=lambda: 0.25) -> GeminiTranslationService:
    return GeminiTranslationService(api_key=api_key, client=client, sleep=sleep, jitter=jitter)


class TestGeminiAvailability:
    """Tests for the missing-credential path."""

    @pytest.mark.parametrize("api_key", [None, "", "   "])
    @pytest.mark.asyncio
    async def test_missing_key_is_unavailable_without_a_call(self, api_key, sleep):
        client = make_client(text="Hello")
        service = make_service(client, sleep, api_key=api_key)

        result = await service.translate("Oi", Language.PT_BR, Language.EN_US)

        assert not service.is_available()
        assert result.failure is FailureKind.UNAVAILABLE
        client.aio.models.generate_content.assert_not_called()
        sleep.assert_not_called()


class TestGeminiTranslate:
    """Tests for translation requests."""

    @pytest.mark.asyncio
    async def test_success_is_trimmed(self, sleep):
        client = make_client(text="  Hello there \n")
        service = make_service(client, sleep)

        result = await service.translate("Olá", Language.PT_BR, Language.EN_US)

        assert not result.is_error
        assert result.text == "Hello there"
        assert result.provider == "gemini"

    @pytest.mark.asyncio
    async def test_prompt_names_languages_in_full(self, sleep):
        client = make_client(text="Hola")
        service = make_service(client, sleep)

        await service.translate("Hi there", Language.EN_US, Language.ES_ES)

        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == GeminiTranslationService.MODEL_NAME
        assert "from English to Spanish" in kwargs["contents"]
        assert '"Hi there"' in kwargs["contents"]
        assert "en-US" not in kwargs["contents"]

    @pytest.mark.asyncio
    async def test_jitter_delay_before_call(self, sleep):
        service = make_service(make_client(text="Hello"), sleep, jitter=lambda: 0.42)

        await service.translate("Oi", Language.PT_BR, Language.EN_US)

        sleep.assert_awaited_once_with(0.42)

    def test_default_jitter_is_within_half_a_second(self):
        service = GeminiTranslationService(api_key="k")
        for _ in range(50):
            assert 0 <= service._jitter() <= 0.5

    @pytest.mark.parametrize("text", [None, "", "   "])
    @pytest.mark.asyncio
    async def test_empty_response_is_an_error(self, text, sleep):
        service = make_service(make_client(text=text), sleep)

        result = await service.translate("Oi", Language.PT_BR, Language.EN_US)

        assert result.failure is FailureKind.ERROR

    @pytest.mark.asyncio
    async def test_client_exception_is_an_error_not_retried(self, sleep):
        client = make_client(side_effect=RuntimeError("429 RESOURCE_EXHAUSTED"))
        service = make_service(client, sleep)

        result = await service.translate("Oi", Language.PT_BR, Language.EN_US)

        assert result.failure is FailureKind.ERROR
        assert result.error == "API quota exceeded"
        assert client.aio.models.generate_content.await_count == 1


class TestGeminiValidateApiKey:
    """Tests for the credential probe."""

    @pytest.mark.asyncio
    async def test_missing(self, sleep):
        service = make_service(make_client(text="Hi"), sleep, api_key=None)
        assert await service.validate_api_key() is ApiKeyStatus.MISSING

    @pytest.mark.asyncio
    async def test_valid(self, sleep):
        service = make_service(make_client(text="Hi!"), sleep)
        assert await service.validate_api_key() is ApiKeyStatus.VALID

    @pytest.mark.asyncio
    async def test_invalid_on_error(self, sleep):
        service = make_service(make_client(side_effect=RuntimeError("API_KEY_INVALID")), sleep)
        assert await service.validate_api_key() is ApiKeyStatus.INVALID

    @pytest.mark.asyncio
    async def test_invalid_on_empty_response(self, sleep):
        service = make_service(make_client(text=None), sleep)
        assert await service.validate_api_key() is ApiKeyStatus.INVALID


class TestGeminiDetectLanguage:
    """Tests for the best-effort language classifier."""

    @pytest.mark.parametrize(
        "answer, expected",
        [
            ("Portuguese", Language.PT_BR),
            ("português", Language.PT_BR),
            ("Spanish.", Language.ES_ES),
            ("English", Language.EN_US),
            ("Klingon", Language.EN_US),
            ("English or Spanish", Language.ES_ES),
            ("Spanish, maybe Portuguese", Language.PT_BR),
        ],
    )
    @pytest.mark.asyncio
    async def test_maps_answer_to_language(self, answer, expected, sleep):
        service = make_service(make_client(text=answer), sleep)
        assert await service.detect_language("algum texto") is expected

    @pytest.mark.asyncio
    async def test_falls_back_to_english_on_error(self, sleep):
        service = make_service(make_client(side_effect=RuntimeError("boom")), sleep)
        assert await service.detect_language("algum texto") is Language.EN_US

    @pytest.mark.asyncio
    async def test_no_call_without_key(self, sleep):
        client = make_client(text="Spanish")
        service = make_service(client, sleep, api_key=None)

        assert await service.detect_language("hola") is Language.EN_US
        client.aio.models.generate_content.assert_not_called()
