"""Helpers for converting parser results into API schemas."""
from __future__ import annotations

from .document_models import (
    Block,
    Bold,
    Cell,
    Document,
    Heading,
    InlineSpan,
    ListItem,
    Paragraph,
    Spacer,
    Table,
)
from .schemas.document import (
    BoldSpan,
    DocumentBlock,
    DocumentResponse,
    HeadingBlock,
    ListItemBlock,
    ParagraphBlock,
    SpacerBlock,
    TableBlock,
    TextSpan,
)


def _make_span(span: InlineSpan) -> TextSpan | BoldSpan:
    if isinstance(span, Bold):
        return BoldSpan(text=span.text)
    return TextSpan(text=span.text)


def _make_cell(cell: Cell) -> list[TextSpan | BoldSpan]:
    return [_make_span(span) for span in cell]


def _make_block(block: Block) -> DocumentBlock:
    if isinstance(block, Heading):
        return HeadingBlock(level=block.level, content=_make_cell(block.content))
    if isinstance(block, Paragraph):
        return ParagraphBlock(content=_make_cell(block.content))
    if isinstance(block, ListItem):
        return ListItemBlock(
            ordered=block.ordered,
            marker=block.marker,
            content=_make_cell(block.content),
        )
    if isinstance(block, Spacer):
        return SpacerBlock()
    if isinstance(block, Table):
        return TableBlock(
            headers=[_make_cell(cell) for cell in block.headers],
            rows=[[_make_cell(cell) for cell in row] for row in block.rows],
        )
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def build_document_response(blocks: Document) -> DocumentResponse:
    """Convert rendered :class:`Block` objects to an API response schema."""

    return DocumentResponse(blocks=[_make_block(block) for block in blocks])


__all__ = ["build_document_response"]
