"""Conversation orchestrator: detect-on-send, summarize and translate on demand.

send() does exactly these things in order:
1. Ignore empty/whitespace text (no message, no network call)
2. Set the global loading flag (rejects overlapping sends)
3. Append a pending message and clear the draft
4. Validate credentials, then detect the language
5. Update that message by id: language + summarizable
6. Clear the loading flag, whatever happened

Adapters degrade failures to sentinel values, so the only exceptions seen
here are ones that escape them (e.g. ConfigurationError). Those mark the
message "Detection failed" and go to the error banner. A summary or
translation call that raises ends FAILED with its sentinel; one that is
cancelled ends FAILED too and the cancellation propagates.
"""

from __future__ import annotations

import asyncio
import uuid

import structlog

from lingochat.core.environment import EnvironmentValidator
from lingochat.core.exceptions import NotSummarizableError
from lingochat.core.languages import TargetLanguage
from lingochat.services.base import ServiceResult
from lingochat.services.conversation.state import (
    ConversationState,
    Message,
    Sender,
)
from lingochat.services.http.errors import UNEXPECTED_ERROR_MESSAGE, ErrorBanner
from lingochat.services.language.base import TRANSLATION_FAILED, LanguageService
from lingochat.services.llm.base import SUMMARIZATION_FAILED, Summarizer

logger = structlog.get_logger(__name__)


class ConversationOrchestrator:
    """Sequences remote calls against the conversation state."""

    def __init__(
        self,
        language: LanguageService,
        summarizer: Summarizer,
        validator: EnvironmentValidator,
        banner: ErrorBanner,
        state: ConversationState | None = None,
    ) -> None:
        self._language = language
        self._summarizer = summarizer
        self._validator = validator
        self._banner = banner
        self._state = state or ConversationState()

    @property
    def state(self) -> ConversationState:
        return self._state

    @property
    def banner(self) -> ErrorBanner:
        return self._banner

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._state.messages

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def target_language(self) -> TargetLanguage:
        return self._state.target_language

    @property
    def error(self) -> str | None:
        return self._banner.message

    def get_message(self, message_id: uuid.UUID) -> Message:
        return self._state.get(message_id)

    def update_draft(self, text: str) -> None:
        self._state.update_draft(text)

    def select_target_language(self, code: str) -> TargetLanguage:
        """Change the target for translations requested from now on."""
        language = TargetLanguage.from_code(code)
        self._state.select_target_language(language)
        logger.info("target_language_selected", language=language.value)
        return language

    async def send(self, text: str | None = None) -> Message | None:
        """Append *text* (or the current draft) and detect its language.

        Returns:
            The message after detection, or None when the text is blank.

        Raises:
            ConversationBusyError: Another send is still detecting.
        """
        if text is None:
            text = self._state.draft
        if not text.strip():
            return None

        self._state.begin_send()
        try:
            message = self._state.append_pending(text, sender=Sender.USER)
            logger.info(
                "message_sent",
                message_id=str(message.id),
                text_len=len(text),
            )
            try:
                self._validator.validate()
                result = await self._language.detect(text)
            except asyncio.CancelledError:
                self._state.apply_detection_failure(message.id)
                raise
            except Exception as e:
                self._banner.report(e, context="send_message")
                return self._state.apply_detection_failure(message.id)

            updated = self._state.apply_detection(message.id, result.value)
            logger.info(
                "message_detected",
                message_id=str(message.id),
                language=updated.language,
                summarizable=updated.summarizable,
            )
            return updated
        finally:
            self._state.end_send()

    async def request_summary(self, message_id: uuid.UUID) -> Message:
        """Summarize a summarizable message.

        Raises:
            MessageNotFoundError: Unknown id.
            NotSummarizableError: The message is not English or too short.
        """
        message = self._state.get(message_id)
        if not message.summarizable:
            raise NotSummarizableError()

        request_seq = self._state.begin_summary(message_id)
        logger.info(
            "summary_requested",
            message_id=str(message_id),
            request_seq=request_seq,
        )
        try:
            result = await self._summarizer.summarize(message.text)
        except asyncio.CancelledError:
            self._state.complete_summary(
                message_id, request_seq, _cancelled(SUMMARIZATION_FAILED)
            )
            raise
        except Exception as e:
            message_text = self._banner.report(e, context="summarize_text")
            result = ServiceResult.failure(SUMMARIZATION_FAILED, message_text)
        return self._state.complete_summary(message_id, request_seq, result)

    async def request_translation(self, message_id: uuid.UUID) -> Message:
        """Translate a message into the target selected at call time.

        Raises:
            MessageNotFoundError: Unknown id.
        """
        message = self._state.get(message_id)
        target = self._state.target_language

        request_seq = self._state.begin_translation(message_id, target)
        logger.info(
            "translation_requested",
            message_id=str(message_id),
            target_language=target.value,
            request_seq=request_seq,
        )
        try:
            result = await self._language.translate(message.text, target.value)
        except asyncio.CancelledError:
            self._state.complete_translation(
                message_id, request_seq, _cancelled(TRANSLATION_FAILED)
            )
            raise
        except Exception as e:
            message_text = self._banner.report(e, context="translate_text")
            result = ServiceResult.failure(TRANSLATION_FAILED, message_text)
        return self._state.complete_translation(message_id, request_seq, result)


def _cancelled(sentinel: str) -> ServiceResult:
    # Cancellation is not shown on the banner; the operation just ends failed.
    return ServiceResult.failure(sentinel, UNEXPECTED_ERROR_MESSAGE)
