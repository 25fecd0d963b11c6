"""Offline summary client.

Returns a fixed, valid report without any network calls. Useful for local
development, demos and as a template for new provider adapters: implement
BaseSummaryClient and register the provider in SummarizerFactory.
"""

import json
from typing import ClassVar

from docintake.summary.client_base import BaseSummaryClient


class ExampleClientAdapter(BaseSummaryClient):
    """Answers every prompt with DEFAULT_RESPONSE wrapped in a json fence."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "purposeAndScope": "Example purpose and scope of the uploaded document.",
        "summary": "Example summary generated without contacting an AI provider.",
        "highlights": [
            "First example highlight",
            "Second example highlight",
            "Third example highlight",
            "Fourth example highlight",
        ],
        "issues": "1. Example issue\nBasis: Example section reference.",
        "recommendations": "1. Example recommendation\nBasis: Example justification.",
    }

    def generate(
        self,
        *,
        prompt: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        _ = prompt, temperature, max_output_tokens
        return "```json\n" + json.dumps(self.DEFAULT_RESPONSE) + "\n```"
