"""Shared pytest fixtures for the LingoChat test suite.

Provides:
  - test_settings: Settings with both credentials present, no .env file read
  - missing_settings: Settings with both credentials blank
  - mock_language: in-memory LanguageService with call tracking
  - mock_summarizer: in-memory Summarizer with call tracking
  - banner / orchestrator: wired with the mocks above

All remote services are mocked in every test. Real HTTP is replaced with
httpx.MockTransport where the transport itself is under test.
"""

from __future__ import annotations

import pytest

from lingochat.core.config import Settings
from lingochat.core.environment import EnvironmentValidator
from lingochat.services.base import ServiceResult
from lingochat.services.conversation.orchestrator import ConversationOrchestrator
from lingochat.services.conversation.state import ConversationState
from lingochat.services.http.errors import ErrorBanner
from lingochat.services.language.base import LanguageService
from lingochat.services.llm.base import Summarizer

ENGLISH_PASSAGE = (
    "The committee met on Tuesday to review the quarterly budget. After a long "
    "discussion, members agreed to postpone the new library wing until spring. "
    "The vote passed easily."
)


def make_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "google_translate_api_key": "test-google-key",
        "openai_api_key": "test-openai-key",
        "detect_endpoint": "https://translate.test/v2/detect",
        "translate_endpoint": "https://translate.test/v2",
        "completion_endpoint": "https://llm.test/v1/chat/completions",
        "request_timeout_ms": 5000,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


# ---------------------------------------------------------------------------
# Mock services
# ---------------------------------------------------------------------------


class MockLanguageService(LanguageService):
    """Mock language service. Returns configurable results."""

    def __init__(
        self,
        language: str = "en",
        translation: str = "Texto traducido",
    ) -> None:
        self.detect_result = ServiceResult.success(language)
        self.translate_result = ServiceResult.success(translation)
        self.detect_calls: list[str] = []
        self.translate_calls: list[tuple[str, str]] = []

    async def detect(self, text: str) -> ServiceResult:
        self.detect_calls.append(text)
        return self.detect_result

    async def translate(self, text: str, target_language: str) -> ServiceResult:
        self.translate_calls.append((text, target_language))
        return self.translate_result


class MockSummarizer(Summarizer):
    """Mock summarizer. Returns a configurable result."""

    def __init__(self, summary: str = "A short summary.") -> None:
        self.result = ServiceResult.success(summary)
        self.calls: list[str] = []

    async def summarize(self, text: str) -> ServiceResult:
        self.calls.append(text)
        return self.result


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    return make_settings()


@pytest.fixture
def missing_settings() -> Settings:
    return make_settings(google_translate_api_key="", openai_api_key="")


@pytest.fixture
def mock_language() -> MockLanguageService:
    return MockLanguageService()


@pytest.fixture
def mock_summarizer() -> MockSummarizer:
    return MockSummarizer()


@pytest.fixture
def banner() -> ErrorBanner:
    return ErrorBanner()


@pytest.fixture
def orchestrator(
    test_settings: Settings,
    mock_language: MockLanguageService,
    mock_summarizer: MockSummarizer,
    banner: ErrorBanner,
) -> ConversationOrchestrator:
    return ConversationOrchestrator(
        language=mock_language,
        summarizer=mock_summarizer,
        validator=EnvironmentValidator(test_settings),
        banner=banner,
        state=ConversationState(),
    )
