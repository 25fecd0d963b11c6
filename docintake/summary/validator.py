"""Validates a parsed model answer and builds an AIReport."""

from typing import Any

from docintake.logging.logger import Log
from docintake.summary.exceptions import InvalidAIResponseError
from docintake.summary.models import AIReport

REQUIRED_FIELDS = ("purposeAndScope", "summary", "highlights", "issues", "recommendations")
_TEXT_FIELDS = ("purposeAndScope", "summary", "issues", "recommendations")
_MIN_HIGHLIGHTS = 4
_MAX_HIGHLIGHTS = 6


def validate_and_build(data: dict[str, Any]) -> AIReport:
    """Check all five fields are present and non-empty, then build the report.

    Raises:
        InvalidAIResponseError: on any missing, empty or mistyped field.
    """
    missing = [name for name in REQUIRED_FIELDS if _is_blank(data.get(name))]
    if missing:
        raise InvalidAIResponseError(
            f"Invalid AI response structure: missing or empty {', '.join(missing)}"
        )

    texts: dict[str, str] = {}
    for name in _TEXT_FIELDS:
        texts[name] = _as_text(data[name], name)
        if not texts[name]:
            raise InvalidAIResponseError(f"Invalid AI response structure: empty {name}")

    highlights = _build_highlights(data["highlights"])
    return AIReport(
        purpose_and_scope=texts["purposeAndScope"],
        summary=texts["summary"],
        highlights=highlights,
        issues=texts["issues"],
        recommendations=texts["recommendations"],
    )


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list):
        return not value
    return False


def _as_text(value: Any, name: str) -> str:
    # Some models answer issues/recommendations as a list of numbered items
    if isinstance(value, list):
        items = [_as_text(item, name) for item in value]
        return "\n\n".join(item for item in items if item)
    if not isinstance(value, str):
        raise InvalidAIResponseError(f"'{name}' must be a string")
    return value.strip()


def _build_highlights(raw: Any) -> list[str]:
    if isinstance(raw, str):
        raise InvalidAIResponseError("'highlights' must be a list of strings")
    if not isinstance(raw, list):
        raise InvalidAIResponseError("'highlights' must be a list")

    highlights: list[str] = []
    for index, item in enumerate(raw):
        if not isinstance(item, str) or not item.strip():
            raise InvalidAIResponseError(
                f"Highlight at index {index} must be a non-empty string"
            )
        highlights.append(item.strip())

    if not _MIN_HIGHLIGHTS <= len(highlights) <= _MAX_HIGHLIGHTS:
        Log.warning(
            f"AI returned {len(highlights)} highlights, "
            f"expected {_MIN_HIGHLIGHTS}-{_MAX_HIGHLIGHTS}"
        )
    return highlights
