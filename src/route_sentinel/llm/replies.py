"""Cleanup and parsing of raw model replies."""

import json
import re
from typing import Any

from route_sentinel.errors import ReplyParseError

_FENCE_RE = re.compile(r"```(?:json)?")


def strip_code_fences(raw: str) -> str:
    """Remove every markdown code-fence marker and surrounding whitespace.

    Models asked for raw JSON still sometimes wrap it in ```json fences.
    """
    return _FENCE_RE.sub("", raw).strip()


def parse_json_object(raw: str) -> dict[str, Any]:
    """Parse a model reply that must hold a single JSON object.

    Raises:
        ReplyParseError: If the cleaned reply is not a JSON object.
    """
    cleaned = strip_code_fences(raw)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ReplyParseError(f"Reply is not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise ReplyParseError(f"Expected a JSON object, got {type(parsed).__name__}")
    return parsed
