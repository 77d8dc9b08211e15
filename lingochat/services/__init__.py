"""Service layer.

Imports are intentionally NOT eagerly loaded here. Use explicit imports:
    from lingochat.services.conversation.orchestrator import ConversationOrchestrator
"""
