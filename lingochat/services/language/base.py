"""Abstract language service interface.

The orchestrator depends on this interface only. The concrete adapter is
built once in the FastAPI lifespan and injected everywhere.
"""

from abc import ABC, abstractmethod

from lingochat.services.base import ServiceResult

DETECTION_UNKNOWN = "unknown"
TRANSLATION_FAILED = "Translation failed"


class LanguageService(ABC):
    """Detects the language of a text and translates it."""

    @abstractmethod
    async def detect(self, text: str) -> ServiceResult:
        """Detect the language of *text*.

        Returns:
            ServiceResult whose value is a language tag such as "en", or
            DETECTION_UNKNOWN on failure. Never raises for remote failures.
        """
        ...

    @abstractmethod
    async def translate(self, text: str, target_language: str) -> ServiceResult:
        """Translate *text* into *target_language*.

        Returns:
            ServiceResult whose value is the translated text, or
            TRANSLATION_FAILED on failure. Never raises for remote failures.
        """
        ...
