"""AI-powered document summarizer."""

import json
from pathlib import Path

from docintake.logging.logger import Log
from docintake.summary.base import BaseSummarizer
from docintake.summary.client_base import BaseSummaryClient
from docintake.summary.exceptions import InvalidAIResponseError
from docintake.summary.models import AIReport
from docintake.summary.prompt_loader import load_prompt_template
from docintake.summary.repair import repair_json_text
from docintake.summary.validator import validate_and_build


class Summarizer(BaseSummarizer):
    """Builds the report prompt, calls the AI client and validates the answer."""

    def __init__(
        self,
        *,
        client: BaseSummaryClient,
        temperature: float = 0.3,
        max_output_tokens: int = 4000,
        max_input_chars: int = 15000,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_output_tokens = max_output_tokens
        self._max_input_chars = max_input_chars
        self._prompt_template = load_prompt_template(prompt_template_path)

    def summarize(self, text: str) -> AIReport:
        prompt = self._build_prompt(text)
        Log.debug(f"Summary prompt:\n{prompt}")

        raw_response = self._client.generate(
            prompt=prompt,
            temperature=self._temperature,
            max_output_tokens=self._max_output_tokens,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        report = validate_and_build(parsed)

        Log.info(f"Summary complete: {len(report.highlights)} highlights")
        return report

    def close(self) -> None:
        self._client.close()

    def _build_prompt(self, text: str) -> str:
        if len(text) > self._max_input_chars:
            Log.info(
                f"Truncating document text from {len(text)} "
                f"to {self._max_input_chars} chars for summarization"
            )
        return self._prompt_template.replace(
            "{document_text}", text[: self._max_input_chars]
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = repair_json_text(raw)
        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise InvalidAIResponseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise InvalidAIResponseError("JSON response must be an object")
        return parsed
