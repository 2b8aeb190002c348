"""Helper utilities for pulling briefing text out of agent responses."""
from __future__ import annotations

import json
from typing import Any

# Short status strings such as "Processing" are not briefings.
_MIN_MESSAGE_LENGTH = 20


def _get(data: Any, key: str) -> Any:
    return data.get(key) if isinstance(data, dict) else None


def extract_response_text(result: Any) -> str:
    """Return the briefing text from an agent result envelope, or ``""``."""

    if not _get(result, "success"):
        return ""
    response = _get(result, "response")
    # An empty dict still counts as a response.
    if not response and not isinstance(response, (dict, list)):
        return ""

    message = _get(response, "message")
    if isinstance(message, str) and len(message) > _MIN_MESSAGE_LENGTH:
        return message

    payload = _get(response, "result")
    if isinstance(payload, str):
        return payload
    for key in ("text", "message", "raw_text"):
        value = _get(payload, key)
        if isinstance(value, str):
            return value

    raw = _get(result, "raw_response")
    if isinstance(raw, str) and len(raw) > _MIN_MESSAGE_LENGTH:
        return raw

    try:
        dumped = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return ""
    if dumped in {"{}", "null"}:
        return ""
    return dumped


__all__ = ["extract_response_text"]
