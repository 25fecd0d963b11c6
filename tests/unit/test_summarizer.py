import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from docintake.summary.client_base import BaseSummaryClient
from docintake.summary.example_client_adapter import ExampleClientAdapter
from docintake.summary.exceptions import AIRequestFailedError, InvalidAIResponseError
from docintake.summary.summarizer import Summarizer

_REPORT = {
    "purposeAndScope": "Requests approval of the annual procurement plan.",
    "summary": "The plan lists supplies and equipment for the year.",
    "highlights": ["Total budget 2M", "Four quarters", "Twelve suppliers", "Audit in Q3"],
    "issues": "1. Supplier list incomplete\nBasis: Section 2",
    "recommendations": "1. Complete the supplier list\nBasis: Section 2",
}


def _client(answer: str) -> MagicMock:
    client = MagicMock(spec=BaseSummaryClient)
    client.generate.return_value = answer
    return client


class TestSummarizer:
    def test_parses_fenced_answer(self) -> None:
        client = _client("```json\n" + json.dumps(_REPORT) + "\n```")
        report = Summarizer(client=client).summarize("document body")
        assert report.to_dict() == _REPORT

    def test_parses_answer_wrapped_in_prose(self) -> None:
        client = _client("Here you go:\n" + json.dumps(_REPORT) + "\nThanks!")
        report = Summarizer(client=client).summarize("document body")
        assert report.summary == _REPORT["summary"]

    def test_prompt_contains_document_text(self) -> None:
        client = _client(json.dumps(_REPORT))
        Summarizer(client=client).summarize("UNIQUE-DOCUMENT-MARKER")
        prompt = client.generate.call_args.kwargs["prompt"]
        assert "UNIQUE-DOCUMENT-MARKER" in prompt
        assert "{document_text}" not in prompt

    def test_input_is_truncated(self, tmp_path: Path) -> None:
        template = tmp_path / "prompt.txt"
        template.write_text("<{document_text}>")
        client = _client(json.dumps(_REPORT))
        summarizer = Summarizer(
            client=client, max_input_chars=20, prompt_template_path=template
        )
        summarizer.summarize("a" * 20 + "b" * 20)
        assert client.generate.call_args.kwargs["prompt"] == "<" + "a" * 20 + ">"

    def test_passes_generation_options(self) -> None:
        client = _client(json.dumps(_REPORT))
        Summarizer(client=client, temperature=0.3, max_output_tokens=4000).summarize("x")
        kwargs = client.generate.call_args.kwargs
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_output_tokens"] == 4000

    def test_temperature_is_clamped(self) -> None:
        client = _client(json.dumps(_REPORT))
        Summarizer(client=client, temperature=3.5).summarize("x")
        assert client.generate.call_args.kwargs["temperature"] == 1.0

    def test_invalid_json_raises(self) -> None:
        client = _client("I could not summarize this document.")
        with pytest.raises(InvalidAIResponseError, match="Invalid JSON response"):
            Summarizer(client=client).summarize("x")

    def test_json_array_raises(self) -> None:
        client = _client('["not", "an", "object"]')
        with pytest.raises(InvalidAIResponseError, match="must be an object"):
            Summarizer(client=client).summarize("x")

    def test_missing_field_raises(self) -> None:
        partial = {k: v for k, v in _REPORT.items() if k != "recommendations"}
        client = _client(json.dumps(partial))
        with pytest.raises(InvalidAIResponseError, match="recommendations"):
            Summarizer(client=client).summarize("x")

    def test_client_errors_propagate(self) -> None:
        client = MagicMock(spec=BaseSummaryClient)
        client.generate.side_effect = AIRequestFailedError("API request failed: 500")
        with pytest.raises(AIRequestFailedError, match="500"):
            Summarizer(client=client).summarize("x")

    def test_custom_prompt_template(self, tmp_path: Path) -> None:
        template = tmp_path / "prompt.txt"
        template.write_text("Summarize: {document_text}")
        client = _client(json.dumps(_REPORT))
        Summarizer(client=client, prompt_template_path=template).summarize("memo")
        assert client.generate.call_args.kwargs["prompt"] == "Summarize: memo"

    def test_round_trip_with_example_client(self) -> None:
        report = Summarizer(client=ExampleClientAdapter()).summarize("anything")
        assert report.to_dict() == ExampleClientAdapter.DEFAULT_RESPONSE

    def test_close_closes_client(self) -> None:
        client = _client("{}")
        Summarizer(client=client).close()
        client.close.assert_called_once()
