"""Tests for the end-to-end briefing rendering helpers."""

from __future__ import annotations

from briefing.document_builder import build_document_response
from briefing.document_models import Bold, Heading, ListItem, Paragraph, PlainText, Spacer, Table
from briefing.document_processing import briefing_preview, document_to_lines, render_document
from briefing.sample import SAMPLE_BRIEFING


def test_line_break_tag_splits_paragraphs() -> None:
    assert render_document("<strong>X</strong><br>Y") == (
        Paragraph(content=(Bold("X"),)),
        Paragraph(content=(PlainText("Y"),)),
    )


def test_empty_briefing() -> None:
    assert render_document(None) == ()
    assert render_document("") == ()


def test_html_wrapped_table_cells() -> None:
    (table,) = render_document("|<b>Ticker</b>|Price|\n|---|---|\n|AAPL|&#36;274|")

    assert table.headers == ((Bold("Ticker"),), (PlainText("Price"),))
    assert table.rows == (((PlainText("AAPL"),), (PlainText("&#36;274"),)),)


def test_sample_briefing_structure() -> None:
    blocks = render_document(SAMPLE_BRIEFING)

    assert blocks[0] == Heading(level=3, content=(PlainText("AAPL Stock Briefing"),))
    assert blocks[1] == Spacer()
    assert blocks[2] == Paragraph(content=(Bold("Current Price & Movement"),))

    tables = [block for block in blocks if isinstance(block, Table)]
    assert len(tables) == 2
    assert len(tables[0].rows) == 5
    assert len(tables[1].rows) == 4
    assert all(len(row) == 3 for table in tables for row in table.rows)

    items = [block for block in blocks if isinstance(block, ListItem)]
    assert len(items) == 11
    assert not any(item.ordered for item in items)

    assert len(blocks) <= SAMPLE_BRIEFING.count("\n") + 2


def test_document_to_lines() -> None:
    blocks = render_document("### T\n\n- **a**: b\n2. two\n|A|B|\n|-|-|\n|1|2|")

    assert document_to_lines(blocks) == ["T", "- a: b", "2. two", "A | B", "1 | 2"]


def test_briefing_preview() -> None:
    text = "### Title\n\nline two\nline three\nline four"

    assert briefing_preview(text) == "### Title line two line three"
    assert briefing_preview(text, limit=9) == "### Title"
    assert briefing_preview(None) == ""


def test_build_document_response() -> None:
    blocks = render_document("## Signals\n3. **Buy**\n|A|\n|-|\n|1|\n")
    payload = build_document_response(blocks).model_dump()

    assert payload["blocks"] == [
        {"type": "heading", "level": 2, "content": [{"type": "text", "text": "Signals"}]},
        {
            "type": "list_item",
            "ordered": True,
            "marker": "3",
            "content": [{"type": "bold", "text": "Buy"}],
        },
        {
            "type": "table",
            "headers": [[{"type": "text", "text": "A"}]],
            "rows": [[[{"type": "text", "text": "1"}]]],
        },
        {"type": "spacer"},
    ]
