"""Tests for summary prompt template loading."""

from pathlib import Path

import pytest

from docintake.summary.exceptions import SummaryError
from docintake.summary.prompt_loader import load_prompt_template


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert "{document_text}" in template
        for name in ("purposeAndScope", "summary", "highlights", "issues", "recommendations"):
            assert name in template

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Hello {document_text}")
        assert load_prompt_template(custom) == "Hello {document_text}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(SummaryError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))

    def test_template_without_placeholder_raises_error(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("No placeholder here")
        with pytest.raises(SummaryError, match="placeholder"):
            load_prompt_template(custom)
