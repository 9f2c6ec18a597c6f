"""Convert multi-line text into JSON string arrays."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable

_LINE_BREAK_RE = re.compile(r"\r\n?")


def lines_to_array(text: object) -> list[str]:
    """Split text into its non-blank lines, keeping each kept line untouched."""
    if not isinstance(text, str) or not text:
        return []
    normalized = _LINE_BREAK_RE.sub("\n", text)
    return [line for line in normalized.split("\n") if line.strip()]


def format_json_array(items: Iterable[str]) -> str:
    """
    Render strings as a pretty JSON array, one element per line.

    Returns an empty string when there is nothing to render.
    """
    values = list(items)
    if not values:
        return ""
    body = ",\n".join(f"  {json.dumps(value, ensure_ascii=False)}" for value in values)
    return f"[\n{body}\n]"
