"""Split a single line or table cell into plain and bold spans."""
from __future__ import annotations

import re

from .document_models import Bold, InlineSpan, PlainText
from .normalizer import strip_markup

_CITATION_RE = re.compile(r"\[\d+\]", re.ASCII)
# The capture group keeps bold pairs at the odd indices of re.split output.
_BOLD_SPLIT_RE = re.compile(r"(\*\*[^*]+\*\*)")


def parse_inline(text: str | None) -> tuple[InlineSpan, ...]:
    """Return the inline spans of ``text``.

    Citation markers such as ``[3]`` are dropped. Only well-formed ``**...**``
    pairs become :class:`Bold`; anything else, including unmatched ``**`` and
    single-asterisk italics, is kept verbatim as :class:`PlainText`.
    """

    cleaned = _CITATION_RE.sub("", strip_markup(text))
    if not cleaned:
        return ()

    spans: list[InlineSpan] = []
    for index, part in enumerate(_BOLD_SPLIT_RE.split(cleaned)):
        if index % 2:
            spans.append(Bold(part[2:-2]))
        elif part:
            spans.append(PlainText(part))
    return tuple(spans)


__all__ = ["parse_inline"]
