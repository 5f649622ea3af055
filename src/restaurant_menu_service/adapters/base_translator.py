"""Base adapter for machine translation providers.

This module defines the translation gateway contract shared by all providers.
Following the pattern used across the service, expected failures are reported
with a None return value rather than by raising: an unavailable translation
must never block saving a menu change.
"""

import json
import logging
import time
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from restaurant_menu_service.models.menu_models import MultilingualText
from restaurant_menu_service.observability.decorators import traced
from restaurant_menu_service.observability.metrics import (
    record_translation_duration,
    record_translation_failure,
    record_translation_request,
)

logger = logging.getLogger(__name__)

MIN_TRANSLATABLE_LENGTH = 2


class TranslationPayload(BaseModel):
    """Shape a provider must return: all four languages, none empty."""

    model_config = ConfigDict(extra="ignore")

    en: str
    ar: str
    ru: str
    zh: str

    @field_validator("en", "ar", "ru", "zh")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Validate that a translated slot holds text."""
        if not v.strip():
            raise ValueError("translation slot must not be empty")
        return v


class TranslationAdapter(ABC):
    """Abstract base class for translation providers.

    ``translate`` implements the gateway contract on top of the provider call:
    - inputs shorter than two trimmed characters never reach the provider
    - any exception, empty body or malformed payload yields None
    - the canonical slot of a result is always the input text, whatever the
      provider returned for it
    """

    def __init__(self, provider_name: str) -> None:
        """Initialize the translation adapter.

        Args:
            provider_name: Name of the translation provider (e.g., 'gemini')
        """
        self.provider_name = provider_name

    @abstractmethod
    async def request_translations(self, text: str) -> str | None:
        """Ask the provider to translate English text into ar, ru and zh.

        Args:
            text: Canonical English text

        Returns:
            str: Raw JSON text with ``en``, ``ar``, ``ru`` and ``zh`` keys, or
            None if the provider cannot be called (e.g., missing credential)

        Note:
            May raise on transport errors; ``translate`` treats a raise the
            same as a None return.
        """

    @traced("translation.translate")
    async def translate(self, text: str) -> MultilingualText | None:
        """Translate canonical text into all menu languages.

        Args:
            text: Canonical English text

        Returns:
            MultilingualText with every slot filled and ``en`` equal to
            ``text``, or None if translation is unavailable
        """
        if not text or len(text.strip()) < MIN_TRANSLATABLE_LENGTH:
            return None

        record_translation_request(self.provider_name)
        started = time.monotonic()
        try:
            raw = await self.request_translations(text)
        except Exception as e:
            logger.error(f"{self.provider_name} translation call failed: {e}")
            record_translation_failure("provider_error")
            return None
        finally:
            record_translation_duration(time.monotonic() - started)

        if not raw:
            logger.warning(f"{self.provider_name} returned no translation for {text!r}")
            record_translation_failure("empty_response")
            return None

        try:
            payload = TranslationPayload.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"{self.provider_name} returned a malformed translation: {e}")
            record_translation_failure("malformed_response")
            return None

        # The provider is trusted for translated slots only
        return MultilingualText(en=text, ar=payload.ar, ru=payload.ru, zh=payload.zh)
