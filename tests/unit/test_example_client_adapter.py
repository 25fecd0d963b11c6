"""Tests for ExampleClientAdapter (offline reference adapter)."""

import json

from docintake.summary.example_client_adapter import ExampleClientAdapter
from docintake.summary.repair import strip_code_fences
from docintake.summary.validator import REQUIRED_FIELDS


class TestExampleClientAdapter:
    def test_answers_with_fenced_json(self) -> None:
        result = ExampleClientAdapter().generate(
            prompt="anything", temperature=0.3, max_output_tokens=4000
        )
        assert result.startswith("```json")
        assert result.rstrip().endswith("```")

    def test_answer_contains_every_report_field(self) -> None:
        result = ExampleClientAdapter().generate(
            prompt="", temperature=0.0, max_output_tokens=1
        )
        parsed = json.loads(strip_code_fences(result))
        assert set(REQUIRED_FIELDS) <= set(parsed)
        assert 4 <= len(parsed["highlights"]) <= 6
