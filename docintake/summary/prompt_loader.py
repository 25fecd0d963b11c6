from pathlib import Path

from docintake.summary.exceptions import SummaryError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the summary prompt template.

    Args:
        path: Template file with a ``{document_text}`` placeholder.
              Defaults to the bundled summary_prompt.txt.

    Raises:
        SummaryError: if the file cannot be read or lacks the placeholder.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "summary_prompt.txt"
    try:
        template = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SummaryError(f"Failed to load prompt template: {exc}") from exc
    if "{document_text}" not in template:
        raise SummaryError(f"Prompt template {path} has no {{document_text}} placeholder")
    return template
