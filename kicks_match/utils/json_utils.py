"""JSON extraction from free-form model replies.

Models often wrap the requested JSON in prose or markdown fences, e.g.
``here you go: {"brand_guess": "Nike", ...} thanks``. ``extract_json``
recovers the object without a greedy first-``{``-to-last-``}`` match,
so nested objects, braces inside string values and several JSON-like
fragments in one reply are all handled.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def extract_json(text: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Return the first JSON object found in ``text``.

    Strategy:
    1. Decode the whole stripped text (fast path).
    2. For each ``{`` from left to right, find its matching ``}`` with a
       depth scanner that skips string contents, and decode that slice.
    3. Give up and return ``None``.

    Only objects count: a top-level array or scalar is not a result.
    """
    if not text or not text.strip():
        return None

    stripped = text.strip()

    try:
        parsed = json.loads(stripped)
    except ValueError:
        parsed = None
    if isinstance(parsed, dict):
        return parsed

    start = stripped.find("{")
    while start != -1:
        candidate = _balanced_object(stripped, start)
        if candidate is not None:
            try:
                parsed = json.loads(candidate)
            except ValueError:
                parsed = None
            if isinstance(parsed, dict):
                return parsed
        start = stripped.find("{", start + 1)

    logger.debug("[JSON] No JSON object found in %d chars of text", len(stripped))
    return None


def _balanced_object(text: str, start: int) -> Optional[str]:
    """Return ``text[start:end]`` where ``end`` closes the ``{`` at ``start``, or None."""
    depth = 0
    in_string = False
    escape = False

    for i in range(start, len(text)):
        ch = text[i]

        if in_string:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start : i + 1]

    return None
