"""Abstract summarization interface."""

from abc import ABC, abstractmethod

from lingochat.services.base import ServiceResult

SUMMARIZATION_FAILED = "Summarization failed"


class Summarizer(ABC):
    """Produces a summary of a text with a language model."""

    @abstractmethod
    async def summarize(self, text: str) -> ServiceResult:
        """Summarize *text*.

        Returns:
            ServiceResult whose value is the summary, or SUMMARIZATION_FAILED
            on failure. Never raises for remote failures.
        """
        ...
