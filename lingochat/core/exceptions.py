"""Custom exception classes for structured error handling.

Transport-layer errors (timeout, offline, HTTP status, malformed body) are
raised by the TimedRequestExecutor and the service adapters, and never cross
the adapter boundary. Orchestration errors surface through the API with
their status code.
"""

from typing import Any, Iterable


class LingoChatError(Exception):
    """Base exception for all LingoChat errors."""

    def __init__(self, code: str, message: str, status_code: int = 500) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(LingoChatError):
    def __init__(self, missing_keys: Iterable[str]) -> None:
        self.missing_keys = frozenset(missing_keys)
        super().__init__(
            code="CONFIGURATION_ERROR",
            message=(
                "Missing required environment variables: "
                + ", ".join(sorted(self.missing_keys))
            ),
            status_code=500,
        )


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------


class RequestTimeoutError(LingoChatError):
    def __init__(self, timeout_ms: int) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(
            code="REQUEST_TIMEOUT",
            message=f"Request did not settle within {timeout_ms}ms",
            status_code=504,
        )


class OfflineError(LingoChatError):
    def __init__(self, message: str = "Remote service is unreachable") -> None:
        super().__init__(code="OFFLINE", message=message, status_code=503)


class HttpStatusError(LingoChatError):
    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(
            code="HTTP_ERROR",
            message=f"HTTP error! Status: {status}",
            status_code=502,
        )


class MalformedResponseError(LingoChatError):
    def __init__(self, message: str = "Invalid API response format") -> None:
        super().__init__(code="MALFORMED_RESPONSE", message=message, status_code=502)


class UnknownServiceError(LingoChatError):
    def __init__(self, message: str = "Unexpected service failure") -> None:
        super().__init__(code="UNKNOWN_ERROR", message=message, status_code=500)


# ---------------------------------------------------------------------------
# Conversation
# ---------------------------------------------------------------------------


class ConversationBusyError(LingoChatError):
    def __init__(self, message: str = "A message is already being sent") -> None:
        super().__init__(code="CONVERSATION_BUSY", message=message, status_code=409)


class MessageNotFoundError(LingoChatError):
    def __init__(self, message: str = "Message not found") -> None:
        super().__init__(code="MESSAGE_NOT_FOUND", message=message, status_code=404)


class NotSummarizableError(LingoChatError):
    def __init__(
        self,
        message: str = "Only English messages longer than the summary threshold can be summarized",
    ) -> None:
        super().__init__(code="NOT_SUMMARIZABLE", message=message, status_code=409)


class UnsupportedLanguageError(LingoChatError):
    def __init__(self, code: str) -> None:
        self.language_code = code
        super().__init__(
            code="UNSUPPORTED_LANGUAGE",
            message=f"Unsupported target language: {code}",
            status_code=422,
        )
