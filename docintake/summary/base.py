from abc import ABC, abstractmethod

from docintake.summary.models import AIReport


class BaseSummarizer(ABC):
    """Contract for document summarizers."""

    @abstractmethod
    def summarize(self, text: str) -> AIReport:
        """Produce a validated five-field report for extracted document text.

        Raises:
            AIRequestFailedError: if the AI endpoint call fails.
            InvalidAIResponseError: if the answer is malformed or incomplete.
        """

    def close(self) -> None:
        """Release resources held by the underlying client."""
