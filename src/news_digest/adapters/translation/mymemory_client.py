"""MyMemory translation API client."""

from typing import Any, Optional

import httpx

from news_digest.core import TranslationError, Translator


class MyMemoryTranslator(Translator):
    """Translate text with the free MyMemory API."""

    def __init__(
        self,
        timeout: float = 10.0,
        contact_email: Optional[str] = None,
        base_url: str = "https://api.mymemory.translated.net/get",
    ) -> None:
        self.timeout = timeout
        self.contact_email = contact_email
        self.base_url = base_url

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Translate text, raising TranslationError on a rejected request."""
        params: dict[str, Any] = {
            "q": text,
            "langpair": f"{source_lang}|{target_lang}",
        }
        # Registered contact address raises the daily quota
        if self.contact_email:
            params["de"] = self.contact_email

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(self.base_url, params=params)

        if response.status_code != 200:
            raise TranslationError(f"HTTP {response.status_code}")

        data = response.json()
        return self._extract_translation(data)

    def _extract_translation(self, data: Any) -> str:
        """Pull the translated text out of a MyMemory response body.

        MyMemory reports errors in ``responseStatus`` even on HTTP 200.
        """
        if not isinstance(data, dict):
            raise TranslationError("Unexpected response format")

        status = data.get("responseStatus")
        response_data = data.get("responseData")
        if str(status) != "200" or not isinstance(response_data, dict):
            details = data.get("responseDetails") or f"status {status}"
            raise TranslationError(str(details))

        translated = response_data.get("translatedText")
        if not isinstance(translated, str):
            raise TranslationError("Response has no translated text")
        return translated
