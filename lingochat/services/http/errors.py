"""Error classification into user-facing messages, and the shared error banner."""

from __future__ import annotations

import structlog

from lingochat.core.exceptions import (
    HttpStatusError,
    LingoChatError,
    OfflineError,
    RequestTimeoutError,
    UnknownServiceError,
)

logger = structlog.get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

_STATUS_MESSAGES = {
    401: "Invalid API key",
    403: "API quota exceeded",
    429: "Too many requests",
}


def classify(error: BaseException) -> str:
    """Map an error to the message shown to the user. Pure and total.

    Checked in precedence order; the first match wins.
    """
    if isinstance(error, RequestTimeoutError):
        return f"Request timeout after {error.timeout_ms}ms"
    if isinstance(error, OfflineError):
        return "No internet connection"
    if isinstance(error, HttpStatusError):
        return _STATUS_MESSAGES.get(error.status, f"Server error ({error.status})")
    return UNEXPECTED_ERROR_MESSAGE


class ErrorBanner:
    """Most recent classified error, shared by every workflow.

    Later reports overwrite earlier ones; the banner only ever shows the
    latest failure.
    """

    def __init__(self) -> None:
        self._message: str | None = None
        self._code: str | None = None
        self._error: LingoChatError | None = None

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def code(self) -> str | None:
        return self._code

    @property
    def last_error(self) -> LingoChatError | None:
        return self._error

    def report(self, error: BaseException, context: str) -> str:
        """Classify *error*, log it against *context*, and display it."""
        message = classify(error)
        if isinstance(error, LingoChatError):
            recorded = error
        else:
            recorded = UnknownServiceError(str(error) or type(error).__name__)
            recorded.__cause__ = error
        code = recorded.code
        logger.error(
            "api_error",
            context=context,
            code=code,
            error=str(error),
            user_message=message,
        )
        self._message = message
        self._code = code
        self._error = recorded
        return message

    def clear(self) -> None:
        self._message = None
        self._code = None
        self._error = None
