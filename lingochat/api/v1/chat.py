"""Conversation endpoints."""

from __future__ import annotations

from uuid import UUID

import structlog
from fastapi import APIRouter, Depends

from lingochat.api.deps import get_orchestrator
from lingochat.schemas.chat import (
    ConversationResponse,
    DraftUpdateRequest,
    ErrorBannerResponse,
    MessageResponse,
    SendMessageRequest,
    SendMessageResponse,
    TargetLanguageRequest,
)
from lingochat.services.conversation.orchestrator import ConversationOrchestrator

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def _snapshot(orchestrator: ConversationOrchestrator) -> ConversationResponse:
    state = orchestrator.state
    banner = orchestrator.banner
    error = None
    if banner.message is not None:
        error = ErrorBannerResponse(message=banner.message, code=banner.code)
    return ConversationResponse(
        messages=[MessageResponse.model_validate(m) for m in state.messages],
        draft=state.draft,
        loading=state.loading,
        target_language=state.target_language.value,
        error=error,
        version=state.version,
    )


@router.get("", response_model=ConversationResponse)
async def get_conversation(
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
) -> ConversationResponse:
    """Full transcript plus the draft, flags and error banner."""
    return _snapshot(orchestrator)


@router.put("/draft", response_model=ConversationResponse)
async def update_draft(
    body: DraftUpdateRequest,
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
) -> ConversationResponse:
    orchestrator.update_draft(body.text)
    return _snapshot(orchestrator)


@router.post("/messages", response_model=SendMessageResponse)
async def send_message(
    body: SendMessageRequest,
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
) -> SendMessageResponse:
    """Append a message and detect its language.

    Blank text is a no-op and returns ``message: null``. A send while another
    one is detecting is rejected with 409.
    """
    message = await orchestrator.send(body.text)
    if message is None:
        return SendMessageResponse(message=None)
    return SendMessageResponse(message=MessageResponse.model_validate(message))


@router.post("/messages/{message_id}/summary", response_model=MessageResponse)
async def summarize_message(
    message_id: UUID,
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
) -> MessageResponse:
    message = await orchestrator.request_summary(message_id)
    return MessageResponse.model_validate(message)


@router.post("/messages/{message_id}/translation", response_model=MessageResponse)
async def translate_message(
    message_id: UUID,
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
) -> MessageResponse:
    message = await orchestrator.request_translation(message_id)
    return MessageResponse.model_validate(message)


@router.put("/target-language", response_model=ConversationResponse)
async def select_target_language(
    body: TargetLanguageRequest,
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
) -> ConversationResponse:
    orchestrator.select_target_language(body.code)
    return _snapshot(orchestrator)


@router.delete("/error", response_model=ConversationResponse)
async def dismiss_error(
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
) -> ConversationResponse:
    orchestrator.banner.clear()
    logger.debug("error_banner_dismissed")
    return _snapshot(orchestrator)
