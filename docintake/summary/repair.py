"""Recovers a JSON object from free-form model output."""

import re

_FENCE_RE = re.compile(r"```(?:json)?[ \t]*\n?", re.IGNORECASE)


def strip_code_fences(raw: str) -> str:
    """Remove every Markdown code fence marker (```json / ```)."""
    return _FENCE_RE.sub("", raw).strip()


def extract_first_object(text: str) -> str | None:
    """Return the first balanced ``{...}`` substring, or None.

    Braces inside JSON string literals are ignored.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start : index + 1]
    return None


def repair_json_text(raw: str) -> str:
    """Strip fences, then narrow to the first balanced object if there is one."""
    cleaned = strip_code_fences(raw)
    obj = extract_first_object(cleaned)
    return obj if obj is not None else cleaned
