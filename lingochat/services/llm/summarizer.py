"""Chat-completion summarizer.

Uses the OpenAI chat completions REST endpoint directly through the
TimedRequestExecutor so timeouts and HTTP failures are classified the same
way as the translation calls.
"""

from __future__ import annotations

import structlog

from lingochat.core.config import Settings
from lingochat.services.base import ServiceResult
from lingochat.services.http.errors import ErrorBanner
from lingochat.services.http.executor import TimedRequestExecutor
from lingochat.services.http.payload import read_json, require_text
from lingochat.services.llm.base import SUMMARIZATION_FAILED, Summarizer

logger = structlog.get_logger(__name__)

SUMMARY_SYSTEM_PROMPT = "Summarize the following text"


class ChatCompletionSummarizer(Summarizer):
    """Single-turn summary request against an OpenAI-compatible API."""

    def __init__(
        self,
        executor: TimedRequestExecutor,
        banner: ErrorBanner,
        settings: Settings,
    ) -> None:
        self._executor = executor
        self._banner = banner
        self._settings = settings

    def _payload(self, text: str) -> dict:
        return {
            "model": self._settings.summary_model,
            "messages": [
                {"role": "system", "content": SUMMARY_SYSTEM_PROMPT},
                {"role": "user", "content": text},
            ],
            "temperature": self._settings.summary_temperature,
        }

    async def summarize(self, text: str) -> ServiceResult:
        """Return the first completion choice's content as the summary."""
        try:
            request = self._executor.build_request(
                "POST",
                self._settings.completion_endpoint,
                json=self._payload(text),
                headers={
                    "Authorization": f"Bearer {self._settings.openai_api_key}",
                    "Content-Type": "application/json",
                },
            )
            response = await self._executor.execute(
                request, self._settings.request_timeout_ms
            )
            summary = require_text(
                read_json(response), "choices", 0, "message", "content"
            )
            logger.debug(
                "text_summarized",
                model=self._settings.summary_model,
                text_len=len(text),
                summary_len=len(summary),
            )
            return ServiceResult.success(summary)
        except Exception as e:
            message = self._banner.report(e, context="summarize_text")
            return ServiceResult.failure(SUMMARIZATION_FAILED, message)
