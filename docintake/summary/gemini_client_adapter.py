from typing import Any

import httpx

from docintake.logging.logger import Log
from docintake.summary.client_base import BaseSummaryClient
from docintake.summary.exceptions import AIRequestFailedError


class GeminiClientAdapter(BaseSummaryClient):
    """Client for the Gemini ``generateContent`` REST endpoint."""

    DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout_seconds)

    def __enter__(self) -> "GeminiClientAdapter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this adapter created it."""
        if self._owns_client:
            self._client.close()

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/models/{self._model}:generateContent"

    def generate(
        self,
        *,
        prompt: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature,
                "maxOutputTokens": max_output_tokens,
                "responseMimeType": "application/json",
            },
        }
        try:
            response = self._client.post(
                self.endpoint,
                params={"key": self._api_key},
                headers={"Content-Type": "application/json"},
                json=body,
            )
        except httpx.TimeoutException as exc:
            raise AIRequestFailedError(f"AI request timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise AIRequestFailedError(f"AI provider network error: {exc}") from exc

        if response.is_error:
            Log.error(f"AI API error: {response.status_code} {response.text[:500]}")
            raise AIRequestFailedError(f"API request failed: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise AIRequestFailedError(f"AI provider returned non-JSON body: {exc}") from exc
        Log.debug(f"Raw API response: {str(payload)[:500]}")

        text = self._answer_text(payload)
        if not text:
            raise AIRequestFailedError("No response from AI")
        return text

    @staticmethod
    def _answer_text(payload: Any) -> str | None:
        """Read ``candidates[0].content.parts[0].text`` if present."""
        try:
            text = payload["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) else None
