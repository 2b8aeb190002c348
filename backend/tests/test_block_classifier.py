"""Unit tests for line classification and table accumulation."""

from __future__ import annotations

import pytest

from briefing.block_classifier import IDLE, TableState, classify, finish, step
from briefing.document_models import (
    Bold,
    Heading,
    ListItem,
    Paragraph,
    PlainText,
    Spacer,
    Table,
)


def _cell(text: str) -> tuple:
    return (PlainText(text),)


@pytest.mark.parametrize("value", [None, ""])
def test_empty_input_gives_no_blocks(value) -> None:
    assert classify(value) == ()


@pytest.mark.parametrize(
    ("line", "level", "text"),
    [
        ("### Title", 3, "Title"),
        ("## Section", 2, "Section"),
        ("# Top", 1, "Top"),
        ("   ### Indented", 3, "Indented"),
    ],
)
def test_headings(line: str, level: int, text: str) -> None:
    assert classify(line) == (Heading(level=level, content=(PlainText(text),)),)


def test_four_hashes_is_not_a_heading() -> None:
    assert classify("#### Deep") == (Paragraph(content=(PlainText("#### Deep"),)),)


def test_simple_table() -> None:
    assert classify("|A|B|\n|---|---|\n|1|2|") == (
        Table(
            headers=(_cell("A"), _cell("B")),
            rows=((_cell("1"), _cell("2")),),
        ),
    )


def test_missing_trailing_pipe_is_a_paragraph() -> None:
    assert classify("|A|B") == (Paragraph(content=(PlainText("|A|B"),)),)


def test_cells_are_trimmed_and_inline_parsed() -> None:
    blocks = classify("| Indicator | Signal |\n|:---|---:|\n| 50-day MA | **Bullish** |")

    assert blocks == (
        Table(
            headers=(_cell("Indicator"), _cell("Signal")),
            rows=((_cell("50-day MA"), (Bold("Bullish"),)),),
        ),
    )


def test_table_is_flushed_before_next_block() -> None:
    blocks = classify("|A|B|\n|-|-|\n|1|2|\nAfter the table")

    assert len(blocks) == 2
    assert isinstance(blocks[0], Table)
    assert blocks[1] == Paragraph(content=(PlainText("After the table"),))


def test_table_before_blank_line() -> None:
    blocks = classify("|A|\n|-|\n|1|\n\nNext")

    assert [type(block) for block in blocks] == [Table, Spacer, Paragraph]


def test_ragged_rows_are_preserved() -> None:
    (table,) = classify("|A|B|\n|-|-|\n|1|\n|1|2|3|")

    assert [len(row) for row in table.rows] == [1, 3]
    assert len(table.headers) == 2


def test_table_without_header_row() -> None:
    (table,) = classify("|---|---|\n|1|2|\n|3|4|")

    assert table.headers == ()
    assert table.rows == ((_cell("1"), _cell("2")), (_cell("3"), _cell("4")))


def test_lone_header_row_flushes_as_table() -> None:
    assert classify("|A|B|\ntext") == (
        Table(headers=(_cell("A"), _cell("B")), rows=()),
        Paragraph(content=(PlainText("text"),)),
    )


def test_empty_cells_are_kept() -> None:
    (table,) = classify("|A||B|")

    assert table.headers == (_cell("A"), (), _cell("B"))


def test_blank_lines_each_become_a_spacer() -> None:
    assert classify("a\n\n  \nb") == (
        Paragraph(content=(PlainText("a"),)),
        Spacer(),
        Spacer(),
        Paragraph(content=(PlainText("b"),)),
    )


def test_unordered_list_item() -> None:
    assert classify("- **50-day MA**: $267.88") == (
        ListItem(ordered=False, content=(Bold("50-day MA"), PlainText(": $267.88"))),
    )


def test_ordered_list_item_keeps_marker() -> None:
    assert classify("12. Trim position") == (
        ListItem(ordered=True, marker="12", content=(PlainText("Trim position"),)),
    )


def test_ordered_marker_needs_whitespace() -> None:
    assert classify("1.5% gain") == (Paragraph(content=(PlainText("1.5% gain"),)),)


def test_ordered_marker_needs_ascii_digits() -> None:
    assert classify("\u0661. item") == (Paragraph(content=(PlainText("\u0661. item"),)),)


def test_trailing_backslash_is_dropped() -> None:
    assert classify("first line\\") == (Paragraph(content=(PlainText("first line"),)),)


def test_trailing_backslash_after_table_row() -> None:
    assert classify("| A | B |\\") == (Table(headers=(_cell("A"), _cell("B")), rows=()),)


def test_step_does_not_mutate_state() -> None:
    state, emitted = step(IDLE, "|A|B|")

    assert emitted == ()
    assert state == TableState(in_table=False, headers=(_cell("A"), _cell("B")))
    assert IDLE == TableState()

    state, emitted = step(state, "|---|---|")
    assert emitted == ()
    assert state.in_table is True

    state, emitted = step(state, "plain")
    assert state == IDLE
    assert emitted == (
        Table(headers=(_cell("A"), _cell("B")), rows=()),
        Paragraph(content=(PlainText("plain"),)),
    )


def test_finish_on_idle_state_emits_nothing() -> None:
    assert finish(IDLE) == ()
    assert finish(TableState(in_table=True)) == ()


@pytest.mark.parametrize(
    "text",
    [
        "\n\n\n",
        "|",
        "||\n||",
        "|a|\n|-|\nx\n|b|\n|-|",
        "# \n## \n### ",
        "- \n1. \n**",
        "\\\n\\\\\n\\",
    ],
)
def test_block_count_is_bounded_by_line_count(text: str) -> None:
    blocks = classify(text)

    assert len(blocks) <= text.count("\n") + 2
