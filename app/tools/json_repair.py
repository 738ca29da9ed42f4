"""
JSON extraction for model output.

Handles the usual wrapping a model puts around a JSON answer:
- Markdown code fences (```json ... ``` or bare ```)
- Prose before/after the object
- Literal control characters inside string values

Unlike a best-effort repair, every failure here raises JsonParseError so
the caller can route it to a single fallback path.
"""

import json
import logging
import re
from typing import Any, Dict

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


class JsonParseError(ValueError):
    """Model output could not be turned into a JSON object."""


def strip_code_fences(text: str) -> str:
    """Remove every ``` / ```json marker and trim surrounding whitespace."""
    return _FENCE_RE.sub("", text or "").strip()


def extract_json_object(text: str) -> str:
    """Return the outermost {...} block using bracket counting.

    Text without an opening brace is returned unchanged (json.loads will
    then reject it). An unbalanced object raises JsonParseError.
    """
    start = text.find("{")
    if start == -1:
        return text

    depth = 0
    in_string = False
    escape_next = False
    for i in range(start, len(text)):
        ch = text[i]
        if escape_next:
            escape_next = False
            continue
        if ch == "\\" and in_string:
            escape_next = True
            continue
        if ch == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    raise JsonParseError(f"Unbalanced JSON object (truncated output?): {text[start:start + 200]!r}")


def parse_json_object(response: str) -> Dict[str, Any]:
    """Parse a JSON object out of model output.

    Raises JsonParseError when the text holds no parseable object, or when
    the parsed value is not an object.
    """
    cleaned = strip_code_fences(response)
    if not cleaned:
        raise JsonParseError("Empty model output")

    json_str = extract_json_object(cleaned)
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError:
        # Models sometimes emit literal newlines/tabs inside string values.
        try:
            data = json.loads(json_str, strict=False)
        except json.JSONDecodeError as e:
            logger.debug(f"Unparseable model output: {json_str[:500]}")
            raise JsonParseError(f"Malformed JSON: {e}") from e

    if not isinstance(data, dict):
        raise JsonParseError(f"Expected a JSON object, got {type(data).__name__}")
    return data
