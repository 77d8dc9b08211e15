"""Google Cloud Translation (v2) adapter for language detection and translation.

Both calls go through the TimedRequestExecutor. Any failure, including a
response missing the expected fields, is classified onto the ErrorBanner
and degrades to a sentinel value instead of raising.
"""

from __future__ import annotations

import structlog

from lingochat.core.config import Settings
from lingochat.services.base import ServiceResult
from lingochat.services.http.errors import ErrorBanner
from lingochat.services.http.executor import TimedRequestExecutor
from lingochat.services.http.payload import read_json, require_text
from lingochat.services.language.base import (
    DETECTION_UNKNOWN,
    TRANSLATION_FAILED,
    LanguageService,
)

logger = structlog.get_logger(__name__)


class GoogleTranslateAdapter(LanguageService):
    """Language detection and translation via the Translation v2 REST API."""

    def __init__(
        self,
        executor: TimedRequestExecutor,
        banner: ErrorBanner,
        settings: Settings,
    ) -> None:
        self._executor = executor
        self._banner = banner
        self._settings = settings

    async def detect(self, text: str) -> ServiceResult:
        """Return the language tag of the first detection candidate."""
        try:
            request = self._executor.build_request(
                "GET",
                self._settings.detect_endpoint,
                params={
                    "q": text,
                    "key": self._settings.google_translate_api_key,
                },
            )
            response = await self._executor.execute(
                request, self._settings.request_timeout_ms
            )
            language = require_text(
                read_json(response), "data", "detections", 0, 0, "language"
            )
            logger.debug("language_detected", language=language, text_len=len(text))
            return ServiceResult.success(language)
        except Exception as e:
            message = self._banner.report(e, context="detect_language")
            return ServiceResult.failure(DETECTION_UNKNOWN, message)

    async def translate(self, text: str, target_language: str) -> ServiceResult:
        """Return the first translation of *text* into *target_language*."""
        try:
            request = self._executor.build_request(
                "GET",
                self._settings.translate_endpoint,
                params={
                    "q": text,
                    "target": target_language,
                    "key": self._settings.google_translate_api_key,
                },
            )
            response = await self._executor.execute(
                request, self._settings.request_timeout_ms
            )
            translated = require_text(
                read_json(response), "data", "translations", 0, "translatedText"
            )
            logger.debug(
                "text_translated",
                target_language=target_language,
                text_len=len(text),
            )
            return ServiceResult.success(translated)
        except Exception as e:
            message = self._banner.report(e, context="translate_text")
            return ServiceResult.failure(TRANSLATION_FAILED, message)
