"""Unit tests for agent response text extraction."""

from __future__ import annotations

import pytest

from briefing.response_text import extract_response_text

LONG = "### AAPL Stock Briefing with enough text"


@pytest.mark.parametrize(
    ("result", "expected"),
    [
        (None, ""),
        ({"success": False, "response": {"message": LONG}}, ""),
        ({"success": True}, ""),
        ({"success": True, "response": {"message": LONG}}, LONG),
        ({"success": True, "response": {"message": "short", "result": "body"}}, "body"),
        ({"success": True, "response": {"result": {"text": "t"}}}, "t"),
        ({"success": True, "response": {"result": {"message": "m"}}}, "m"),
        ({"success": True, "response": {"result": {"raw_text": "r"}}}, "r"),
        ({"success": True, "response": {"status": "done"}, "raw_response": LONG}, LONG),
        ({"success": True, "response": {"result": {"score": 1}}}, '{"score":1}'),
        ({"success": True, "response": {"result": {}}}, ""),
        ({"success": True, "response": {"message": "short"}}, ""),
        ({"success": True, "response": {}, "raw_response": LONG}, LONG),
        ({"success": True, "response": "", "raw_response": LONG}, ""),
    ],
)
def test_extract_response_text(result, expected: str) -> None:
    assert extract_response_text(result) == expected
