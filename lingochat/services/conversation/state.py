"""Conversation state container.

Single-writer discipline: every mutation is one synchronous method per
event, replaces the affected immutable Message, and bumps ``version``.
Because the methods never await, each one is atomic on the event loop and
concurrent workflows cannot interleave inside an update.

Summary and translation each carry an OperationState. Re-entrant requests
are allowed; each start takes a new sequence number and only the
completion matching the latest started request is committed
(latest-started-wins). Stale completions are dropped.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum

import structlog

from lingochat.core.exceptions import ConversationBusyError, MessageNotFoundError
from lingochat.core.languages import DEFAULT_TARGET_LANGUAGE, TargetLanguage
from lingochat.services.base import ServiceResult

logger = structlog.get_logger(__name__)

LANGUAGE_PENDING = "Detecting..."
DETECTION_FAILED = "Detection failed"
SUMMARY_LANGUAGE = "en"


class Sender(str, Enum):
    USER = "user"
    SYSTEM = "system"


class OperationStatus(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationState:
    """Progress and last committed result of one per-message operation."""

    status: OperationStatus = OperationStatus.IDLE
    result: str | None = None
    error: str | None = None
    request_seq: int = 0
    target_language: str | None = None

    @property
    def in_flight(self) -> bool:
        return self.status == OperationStatus.IN_FLIGHT


@dataclass(frozen=True)
class Message:
    """One chat entry. Text and sender never change after creation."""

    text: str
    sender: Sender = Sender.USER
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    language: str = LANGUAGE_PENDING
    summarizable: bool = False
    summary: OperationState = field(default_factory=OperationState)
    translation: OperationState = field(default_factory=OperationState)
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def detection_pending(self) -> bool:
        return self.language == LANGUAGE_PENDING


class ConversationState:
    """Owns the transcript, the input draft and the global flags."""

    def __init__(
        self,
        target_language: TargetLanguage = DEFAULT_TARGET_LANGUAGE,
        summarize_min_length: int = 150,
    ) -> None:
        self._order: list[uuid.UUID] = []
        self._messages: dict[uuid.UUID, Message] = {}
        self._draft = ""
        self._loading = False
        self._target_language = target_language
        self._summarize_min_length = summarize_min_length
        self._pending_targets: dict[tuple[uuid.UUID, int], str] = {}
        self._version = 0

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def version(self) -> int:
        return self._version

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def target_language(self) -> TargetLanguage:
        return self._target_language

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages[message_id] for message_id in self._order)

    def get(self, message_id: uuid.UUID) -> Message:
        try:
            return self._messages[message_id]
        except KeyError:
            raise MessageNotFoundError(f"Message {message_id} not found") from None

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _commit(self, message: Message | None = None) -> None:
        if message is not None:
            self._messages[message.id] = message
        self._version += 1

    def update_draft(self, text: str) -> None:
        self._draft = text
        self._commit()

    def begin_send(self) -> None:
        if self._loading:
            raise ConversationBusyError()
        self._loading = True
        self._commit()

    def end_send(self) -> None:
        self._loading = False
        self._commit()

    def append_pending(self, text: str, sender: Sender = Sender.USER) -> Message:
        """Append a message awaiting detection and clear the draft."""
        message = Message(text=text, sender=sender)
        self._order.append(message.id)
        self._draft = ""
        self._commit(message)
        return message

    def apply_detection(self, message_id: uuid.UUID, language: str) -> Message:
        """Record the detected language and fix ``summarizable`` for good."""
        message = self.get(message_id)
        if not message.detection_pending:
            logger.warning(
                "detection_already_applied",
                message_id=str(message_id),
                language=message.language,
            )
            return message
        updated = replace(
            message,
            language=language,
            summarizable=(
                language == SUMMARY_LANGUAGE
                and len(message.text) > self._summarize_min_length
            ),
        )
        self._commit(updated)
        return updated

    def apply_detection_failure(self, message_id: uuid.UUID) -> Message:
        message = self.get(message_id)
        if not message.detection_pending:
            return message
        updated = replace(message, language=DETECTION_FAILED, summarizable=False)
        self._commit(updated)
        return updated

    def begin_summary(self, message_id: uuid.UUID) -> int:
        return self._begin(message_id, "summary")

    def complete_summary(
        self, message_id: uuid.UUID, request_seq: int, result: ServiceResult
    ) -> Message:
        return self._complete(message_id, "summary", request_seq, result)

    def begin_translation(
        self, message_id: uuid.UUID, target_language: TargetLanguage
    ) -> int:
        return self._begin(message_id, "translation", target_language.value)

    def complete_translation(
        self, message_id: uuid.UUID, request_seq: int, result: ServiceResult
    ) -> Message:
        return self._complete(message_id, "translation", request_seq, result)

    def select_target_language(self, language: TargetLanguage) -> None:
        self._target_language = language
        self._commit()

    # ------------------------------------------------------------------
    # Operation bookkeeping
    # ------------------------------------------------------------------

    def _begin(
        self,
        message_id: uuid.UUID,
        operation: str,
        target_language: str | None = None,
    ) -> int:
        message = self.get(message_id)
        current: OperationState = getattr(message, operation)
        request_seq = current.request_seq + 1
        started = replace(
            current,
            status=OperationStatus.IN_FLIGHT,
            request_seq=request_seq,
        )
        self._commit(replace(message, **{operation: started}))
        if target_language is not None:
            self._pending_targets[(message_id, request_seq)] = target_language
        return request_seq

    def _complete(
        self,
        message_id: uuid.UUID,
        operation: str,
        request_seq: int,
        result: ServiceResult,
    ) -> Message:
        message = self.get(message_id)
        current: OperationState = getattr(message, operation)
        target_language = self._pending_targets.pop((message_id, request_seq), None)
        if request_seq != current.request_seq:
            logger.info(
                "stale_completion_discarded",
                message_id=str(message_id),
                operation=operation,
                request_seq=request_seq,
                latest_seq=current.request_seq,
            )
            return message
        finished = OperationState(
            status=OperationStatus.DONE if result.ok else OperationStatus.FAILED,
            result=result.value,
            error=result.error,
            request_seq=request_seq,
            target_language=target_language,
        )
        updated = replace(message, **{operation: finished})
        self._commit(updated)
        return updated
