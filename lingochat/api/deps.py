"""Shared FastAPI dependencies.

The ConversationOrchestrator is created once during the FastAPI lifespan
and stored on app.state. Route handlers retrieve it via Depends(), never
by direct import.
"""

from fastapi import Request

from lingochat.services.conversation.orchestrator import ConversationOrchestrator


async def get_orchestrator(request: Request) -> ConversationOrchestrator:
    """Return the process-wide conversation orchestrator."""
    return request.app.state.orchestrator
