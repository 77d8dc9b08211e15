"""Chat request/response schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from lingochat.services.conversation.state import OperationStatus, Sender


class OperationStateResponse(BaseModel):
    """Summary or translation progress for one message."""

    model_config = ConfigDict(from_attributes=True)

    status: OperationStatus
    in_flight: bool
    result: str | None = None
    error: str | None = None
    target_language: str | None = None


class MessageResponse(BaseModel):
    """Single message in the conversation."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    text: str
    sender: Sender
    language: str
    summarizable: bool
    summary: OperationStateResponse
    translation: OperationStateResponse
    created_at: datetime


class ErrorBannerResponse(BaseModel):
    """Most recent classified error."""

    model_config = ConfigDict(from_attributes=True)

    message: str
    code: str | None = None


class ConversationResponse(BaseModel):
    """GET /v1/chat response body."""

    messages: list[MessageResponse] = []
    draft: str = ""
    loading: bool = False
    target_language: str
    error: ErrorBannerResponse | None = None
    version: int


class SendMessageRequest(BaseModel):
    """POST /v1/chat/messages request body. Falls back to the draft."""

    text: str | None = None


class SendMessageResponse(BaseModel):
    """POST /v1/chat/messages response body. ``message`` is null for blank input."""

    message: MessageResponse | None = None


class DraftUpdateRequest(BaseModel):
    """PUT /v1/chat/draft request body."""

    text: str


class TargetLanguageRequest(BaseModel):
    """PUT /v1/chat/target-language request body."""

    code: str
