from abc import ABC, abstractmethod


class BaseSummaryClient(ABC):
    """Contract for provider-specific generative AI clients."""

    @abstractmethod
    def generate(
        self,
        *,
        prompt: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        """Send one prompt and return the model's answer as plain text.

        Raises:
            AIRequestFailedError: on transport errors, non-2xx responses,
                or a response without any answer text.
        """

    def close(self) -> None:
        """Release transport resources held by the client."""
