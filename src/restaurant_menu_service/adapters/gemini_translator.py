"""Gemini translation adapter.

This adapter asks Google's Gemini ``generateContent`` REST endpoint for a
structured JSON translation of menu text into Arabic, Russian and Chinese.
"""

import logging
from typing import Any

import httpx

from restaurant_menu_service.adapters.base_translator import TranslationAdapter

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-3-flash-preview"

PROMPT_TEMPLATE = (
    "You are a professional translator for a luxury hotel menu.\n"
    "Translate the following English text into Arabic (ar), Russian (ru), and Chinese (zh).\n"
    "Maintain the culinary context and tone.\n"
    "\n"
    'Input text: "{text}"'
)

RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "en": {"type": "STRING", "description": "The original English text"},
        "ar": {"type": "STRING", "description": "Arabic translation"},
        "ru": {"type": "STRING", "description": "Russian translation"},
        "zh": {"type": "STRING", "description": "Simplified Chinese translation"},
    },
    "required": ["en", "ar", "ru", "zh"],
}


class GeminiTranslationAdapter(TranslationAdapter):
    """Adapter for the Gemini generative language API.

    Uses API key authentication. A missing key is not an error at
    construction time: every translation simply reports unavailable.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = 20.0,
        base_url: str = GEMINI_BASE_URL,
    ) -> None:
        """Initialize Gemini adapter.

        Args:
            api_key: Gemini API key, None if not configured
            model: Gemini model name
            timeout_seconds: Request timeout for each translation call
            base_url: API base URL
        """
        super().__init__("gemini")
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds
        self.base_url = base_url.rstrip("/")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def build_request(self, text: str) -> dict[str, Any]:
        """Build the generateContent request body.

        Args:
            text: Canonical English text

        Returns:
            dict: Request body asking for a JSON response matching RESPONSE_SCHEMA
        """
        return {
            "contents": [{"role": "user", "parts": [{"text": PROMPT_TEMPLATE.format(text=text)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }

    async def request_translations(self, text: str) -> str | None:
        """Call Gemini and return the JSON text of the first candidate.

        Args:
            text: Canonical English text

        Returns:
            str: JSON text produced by the model, or None if the API key is
            missing, the API answered with an error, or no candidate text came back
        """
        if not self.api_key:
            logger.error("GEMINI_API_KEY is not configured, translation cannot proceed")
            return None

        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            response = await client.post(
                self.endpoint,
                json=self.build_request(text),
                headers={"x-goog-api-key": self.api_key},
            )

        if response.status_code != 200:
            logger.error(f"Gemini translation request failed: {response.status_code}")
            return None

        return self._extract_text(response.json())

    @staticmethod
    def _extract_text(body: dict[str, Any]) -> str | None:
        """Pull the generated text out of a generateContent response."""
        candidates = body.get("candidates") or []
        if not candidates:
            return None

        parts = candidates[0].get("content", {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts)
        return text or None
