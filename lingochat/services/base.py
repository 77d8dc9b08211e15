"""Result type returned by the remote service adapters.

Adapters never raise to their caller. A failure degrades to a sentinel
value and carries the classified user-facing message alongside it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceResult:
    """Value from a remote call, or a sentinel plus the classified error."""

    value: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: str) -> "ServiceResult":
        return cls(value=value)

    @classmethod
    def failure(cls, sentinel: str, error: str) -> "ServiceResult":
        return cls(value=sentinel, error=error)
