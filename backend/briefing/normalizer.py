"""Turn stray HTML fragments in agent output into the markdown subset we parse."""
from __future__ import annotations

import re

_LINE_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_BOLD_TAG_RES = (
    re.compile(r"<strong>([\s\S]*?)</strong>", re.IGNORECASE),
    re.compile(r"<b>([\s\S]*?)</b>", re.IGNORECASE),
)
_ITALIC_TAG_RES = (
    re.compile(r"<em>([\s\S]*?)</em>", re.IGNORECASE),
    re.compile(r"<i>([\s\S]*?)</i>", re.IGNORECASE),
)
_ANY_TAG_RE = re.compile(r"<[^>]+>")
_CONTINUATION_RE = re.compile(r"\\\n")

# Applied in order, &amp; first.
_ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&nbsp;", " "),
)


def strip_markup(text: str | None) -> str:
    """Convert emphasis tags to markers, drop other tags and decode entities."""

    if not text:
        return ""

    result = _LINE_BREAK_RE.sub("\n", text)
    for pattern in _BOLD_TAG_RES:
        result = pattern.sub(r"**\1**", result)
    for pattern in _ITALIC_TAG_RES:
        result = pattern.sub(r"*\1*", result)
    result = _ANY_TAG_RE.sub("", result)
    for entity, value in _ENTITIES:
        result = result.replace(entity, value)
    return result


def normalize(text: str | None) -> str:
    """Return ``text`` ready for line classification.

    ``None`` and empty input give an empty string. Besides :func:`strip_markup`
    this collapses ``\\`` + newline continuations into plain newlines.
    """

    if not text:
        return ""
    return _CONTINUATION_RE.sub("\n", strip_markup(text))


__all__ = ["normalize", "strip_markup"]
