"""Utility helpers for reading briefings into normalized blocks or lines."""
from __future__ import annotations

import logging

from .block_classifier import classify
from .document_models import (
    Block,
    Document,
    Heading,
    ListItem,
    Paragraph,
    Table,
    spans_text,
)
from .normalizer import normalize

logger = logging.getLogger(__name__)


def render_document(text: str | None) -> Document:
    """Return the :class:`Block` sequence for a raw agent briefing."""

    blocks = classify(normalize(text))
    logger.debug("Rendered briefing into %s blocks", len(blocks))
    return blocks


def _append_line(lines: list[str], value: str) -> None:
    value = value.strip()
    if value:
        lines.append(value)


def _block_lines(block: Block) -> list[str]:
    lines: list[str] = []
    if isinstance(block, Heading):
        _append_line(lines, spans_text(block.content))
    elif isinstance(block, Paragraph):
        _append_line(lines, spans_text(block.content))
    elif isinstance(block, ListItem):
        bullet = f"{block.marker}." if block.ordered else "-"
        _append_line(lines, f"{bullet} {spans_text(block.content)}")
    elif isinstance(block, Table):
        for row in (block.headers, *block.rows):
            row_text = " | ".join(
                spans_text(cell).strip() for cell in row if spans_text(cell).strip()
            )
            _append_line(lines, row_text)
    return lines


def document_to_lines(blocks: Document) -> list[str]:
    """Flatten a rendered document into plain text lines without emphasis."""

    lines: list[str] = []
    for block in blocks:
        lines.extend(_block_lines(block))
    return lines


def briefing_preview(text: str | None, limit: int = 150) -> str:
    """First three non-empty lines of ``text`` joined into a short preview."""

    lines = [line for line in (text or "").split("\n") if line.strip()]
    return " ".join(lines[:3])[:limit]


__all__ = [
    "briefing_preview",
    "document_to_lines",
    "render_document",
]
