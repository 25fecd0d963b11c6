import httpx
import openai

from docintake.summary.client_base import BaseSummaryClient
from docintake.summary.exceptions import AIRequestFailedError


class OpenAIClientAdapter(BaseSummaryClient):
    """Summary client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._model = model
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def close(self) -> None:
        self._client.close()

    def generate(
        self,
        *,
        prompt: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=temperature,
                max_tokens=max_output_tokens,
                response_format={"type": "json_object"},
                messages=[{"role": "user", "content": prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AIRequestFailedError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AIRequestFailedError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AIRequestFailedError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise AIRequestFailedError("AI returned empty response")
        return content
