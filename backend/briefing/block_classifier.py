"""Line-oriented classification of normalized briefing text into blocks."""
from __future__ import annotations

import re
from dataclasses import dataclass

from .document_models import (
    Block,
    Cell,
    Document,
    Heading,
    ListItem,
    Paragraph,
    Spacer,
    Table,
)
from .inline_parser import parse_inline

_SEPARATOR_CELL_RE = re.compile(r"[\s\-:]+")
_ORDERED_ITEM_RE = re.compile(r"(\d+)\.\s(.*)", re.ASCII)
# Longest marker first so "### " is never read as "# ".
_HEADING_MARKERS = (("### ", 3), ("## ", 2), ("# ", 1))


@dataclass(frozen=True, slots=True)
class TableState:
    """Table accumulator carried from one line to the next.

    ``in_table`` is set once a separator or body row has been seen; a lone
    header row keeps it ``False`` but still counts as pending.
    """

    in_table: bool = False
    headers: tuple[Cell, ...] = ()
    rows: tuple[tuple[Cell, ...], ...] = ()

    @property
    def pending(self) -> bool:
        return self.in_table or bool(self.headers) or bool(self.rows)


IDLE = TableState()


def _is_table_row(trimmed: str) -> bool:
    return trimmed.startswith("|") and trimmed.endswith("|")


def _split_cells(trimmed: str) -> list[str]:
    """Split a pipe row, dropping the fields outside the boundary pipes."""

    return trimmed.split("|")[1:-1]


def _parse_cells(cells: list[str]) -> tuple[Cell, ...]:
    return tuple(parse_inline(cell.strip()) for cell in cells)


def _table_step(state: TableState, trimmed: str) -> TableState:
    cells = _split_cells(trimmed)
    if all(_SEPARATOR_CELL_RE.fullmatch(cell) for cell in cells):
        return TableState(in_table=True, headers=state.headers, rows=state.rows)
    if not state.in_table and not state.headers:
        return TableState(in_table=False, headers=_parse_cells(cells), rows=state.rows)
    return TableState(
        in_table=True,
        headers=state.headers,
        rows=state.rows + (_parse_cells(cells),),
    )


def finish(state: TableState) -> tuple[Block, ...]:
    """Flush whatever the accumulator holds into at most one :class:`Table`."""

    if state.headers or state.rows:
        return (Table(headers=state.headers, rows=state.rows),)
    return ()


def _classify_line(trimmed: str) -> Block:
    if not trimmed:
        return Spacer()

    for marker, level in _HEADING_MARKERS:
        if trimmed.startswith(marker):
            return Heading(level=level, content=parse_inline(trimmed[len(marker):]))

    if trimmed.startswith("- "):
        return ListItem(ordered=False, content=parse_inline(trimmed[2:]))

    match = _ORDERED_ITEM_RE.match(trimmed)
    if match:
        return ListItem(ordered=True, marker=match.group(1), content=parse_inline(match.group(2)))

    return Paragraph(content=parse_inline(trimmed))


def step(state: TableState, line: str) -> tuple[TableState, tuple[Block, ...]]:
    """Consume one source line.

    Returns the next accumulator state and the blocks the line produced. A
    non-table line arriving while a table is pending first flushes that table.
    """

    if line.endswith("\\"):
        line = line[:-1]
    trimmed = line.strip()

    if _is_table_row(trimmed):
        return _table_step(state, trimmed), ()

    emitted: tuple[Block, ...] = ()
    if state.pending:
        emitted = finish(state)
        state = IDLE
    return state, emitted + (_classify_line(trimmed),)


def classify(normalized_text: str | None) -> Document:
    """Classify every line of ``normalized_text`` into an ordered document."""

    if not normalized_text:
        return ()

    state = IDLE
    blocks: list[Block] = []
    for line in normalized_text.split("\n"):
        state, emitted = step(state, line)
        blocks.extend(emitted)
    blocks.extend(finish(state))
    return tuple(blocks)


__all__ = ["IDLE", "TableState", "classify", "finish", "step"]
