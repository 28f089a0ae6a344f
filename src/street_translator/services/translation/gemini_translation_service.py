"""Gemini Translation Service - Implements translation via Google Gemini API."""

import asyncio
import logging
import random
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

import google.genai as genai
from google.genai import types

from street_translator.core import Language, SUPPORTED_LANGUAGES, get_language_info
from street_translator.services.exceptions import ProviderError, ProviderUnavailable
from street_translator.services.translation.translation_service import (
    FailureKind,
    TranslationProvider,
    TranslationResult,
)

logger = logging.getLogger(__name__)


class ApiKeyStatus(str, Enum):
    """Outcome of the credential probe."""

    VALID = "valid"
    INVALID = "invalid"
    MISSING = "missing"


class GeminiTranslationService(TranslationProvider):
    """
    Translation service using Google Gemini API.

    The backend is quota-limited, so each call waits a random 0-500 ms
    before going out, and no call is made at all without an API key.
    Uses the async surface of the google.genai package.
    """

    name = "gemini"
    MODEL_NAME = "gemini-2.5-flash"
    MAX_JITTER_SECONDS = 0.5

    TRANSLATION_PROMPT = (
        "Translate the following text from {source} to {target}. "
        "Return ONLY the translated text without any explanations, "
        'quotation marks, or additional commentary: "{text}"'
    )

    DETECTION_PROMPT = (
        "Detect the language of this text and respond with ONLY one word: "
        '{choices}. Text: "{text}"'
    )

    def __init__(
        self,
        api_key: Optional[str],
        model: str = MODEL_NAME,
        client: Optional[Any] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        jitter: Optional[Callable[[], float]] = None,
    ):
        self._api_key = api_key.strip() if api_key and api_key.strip() else None
        self._model = model
        self._client = client
        self._sleep = sleep
        self._jitter = jitter or (lambda: random.uniform(0, self.MAX_JITTER_SECONDS))

    @property
    def model(self) -> str:
        return self._model

    def is_available(self) -> bool:
        return self._api_key is not None

    async def translate(self, text: str, from_lang: Language, to_lang: Language) -> TranslationResult:
        """
        Translate text using Gemini API.

        Returns:
            TranslationResult with translated text, UNAVAILABLE when no
            API key is configured, or ERROR when the call failed.
        """
        try:
            translated = await self._translate(text, from_lang, to_lang)
        except ProviderUnavailable as e:
            return TranslationResult.failed(self.name, FailureKind.UNAVAILABLE, str(e))
        except ProviderError as e:
            logger.warning("Gemini translation failed: %s", e)
            return TranslationResult.failed(self.name, FailureKind.ERROR, str(e))
        return TranslationResult.success(self.name, translated)

    async def _translate(self, text: str, from_lang: Language, to_lang: Language) -> str:
        client = self._get_client()
        prompt = self.TRANSLATION_PROMPT.format(
            source=get_language_info(from_lang).model_name,
            target=get_language_info(to_lang).model_name,
            text=text,
        )

        await self._sleep(self._jitter())

        logger.debug("Gemini request: model=%s, input=%r", self._model, text[:100])
        response_text = await self._generate(client, prompt)

        translated = (response_text or "").strip()
        if not translated:
            raise ProviderError("Empty response from API")
        return translated

    async def validate_api_key(self) -> ApiKeyStatus:
        """Check whether the configured key can make a real request."""
        if not self.is_available():
            return ApiKeyStatus.MISSING

        try:
            response_text = await self._generate(self._get_client(), "Hello")
        except (ProviderError, ProviderUnavailable) as e:
            logger.error("API key validation failed: %s", e)
            return ApiKeyStatus.INVALID

        return ApiKeyStatus.VALID if response_text else ApiKeyStatus.INVALID

    async def detect_language(self, text: str) -> Language:
        """
        Best-effort language classification.

        Falls back to English on any failure. Not part of translation.
        """
        fallback = Language.EN_US
        if not self.is_available() or not text.strip():
            return fallback

        choices = ", ".join(f'"{info.name}"' for info in SUPPORTED_LANGUAGES)
        prompt = self.DETECTION_PROMPT.format(choices=choices, text=text)
        try:
            detected = (await self._generate(self._get_client(), prompt) or "").strip().lower()
        except (ProviderError, ProviderUnavailable) as e:
            logger.error("Language detection error: %s", e)
            return fallback

        # Portuguese, then Spanish; anything else is English.
        for language in (Language.PT_BR, Language.ES_ES):
            info = get_language_info(language)
            if info.name.lower() in detected or info.native_name.lower() in detected:
                return language
        return fallback

    def _get_client(self) -> Any:
        if self._api_key is None:
            raise ProviderUnavailable("GEMINI_API_KEY not configured")
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def _generate(self, client: Any, prompt: str) -> Optional[str]:
        """Single generation call; every client failure becomes ProviderError."""
        try:
            response = await client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=0.3,
                    max_output_tokens=1024,
                ),
            )
            return response.text
        except Exception as e:
            raise ProviderError(self._describe_error(e)) from e

    @staticmethod
    def _describe_error(error: Exception) -> str:
        error_msg = str(error).lower()
        if "429" in error_msg or "resource_exhausted" in error_msg or "quota" in error_msg:
            return "API quota exceeded"
        if "api_key" in error_msg or "authentication" in error_msg or "permission" in error_msg:
            return f"Invalid API key or request: {error}"
        if "deadline" in error_msg or "timeout" in error_msg:
            return "Request timed out"
        return f"Translation failed: {error}"
