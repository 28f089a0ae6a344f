"""MyMemory Translation Service - free community machine translation over HTTP."""

import logging
from typing import Any, Optional

import httpx

from street_translator.core import Language, get_language_info
from street_translator.services.exceptions import ProviderError
from street_translator.services.translation.translation_service import (
    FailureKind,
    TranslationProvider,
    TranslationResult,
)

logger = logging.getLogger(__name__)


class MyMemoryTranslationService(TranslationProvider):
    """
    Translation via the MyMemory API (free tier, about 5000 chars/day).

    Success is reported inside the JSON body: `responseStatus` must be 200.
    The HTTP status code alone is not trusted.
    """

    name = "mymemory"
    ENDPOINT = "https://api.mymemory.translated.net/get"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        endpoint: str = ENDPOINT,
        email: Optional[str] = None,
        timeout: float = 10.0,
    ):
        self._client = client
        self._owns_client = client is None
        self._endpoint = endpoint
        self._email = email
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def translate(self, text: str, from_lang: Language, to_lang: Language) -> TranslationResult:
        try:
            translated = await self._request(text, from_lang, to_lang)
        except ProviderError as e:
            logger.warning("MyMemory translation failed: %s", e)
            return TranslationResult.failed(self.name, FailureKind.ERROR, str(e))
        return TranslationResult.success(self.name, translated)

    async def _request(self, text: str, from_lang: Language, to_lang: Language) -> str:
        source = get_language_info(from_lang).provider_code
        target = get_language_info(to_lang).provider_code
        params = {"q": text, "langpair": f"{source}|{target}"}
        if self._email:
            params["de"] = self._email

        client = await self._get_client()
        try:
            response = await client.get(self._endpoint, params=params)
        except httpx.HTTPError as e:
            raise ProviderError(f"MyMemory request failed: {e}") from e

        try:
            data: Any = response.json()
        except ValueError as e:
            raise ProviderError(f"MyMemory returned non-JSON body (HTTP {response.status_code})") from e

        if not isinstance(data, dict):
            raise ProviderError("MyMemory returned an unexpected body")

        status = data.get("responseStatus")
        if status != 200:
            raise ProviderError(f"MyMemory Error: {status}")

        response_data = data.get("responseData")
        translated = response_data.get("translatedText") if isinstance(response_data, dict) else None
        if not isinstance(translated, str) or not translated.strip():
            raise ProviderError("MyMemory returned an empty translation")

        return translated
