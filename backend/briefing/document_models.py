"""Common document model definitions used across parsing utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

HeadingLevel = Literal[1, 2, 3]


@dataclass(frozen=True, slots=True)
class PlainText:
    """A run of text rendered without emphasis."""

    text: str


@dataclass(frozen=True, slots=True)
class Bold:
    """A run of text that was wrapped in ``**`` delimiters."""

    text: str


InlineSpan = Union[PlainText, Bold]
Cell = tuple[InlineSpan, ...]


@dataclass(frozen=True, slots=True)
class Heading:
    """A ``#``/``##``/``###`` heading line.

    Parameters
    ----------
    level:
        Number of leading hash marks, between one and three.
    content:
        Inline spans parsed from the text after the marker.
    """

    level: HeadingLevel
    content: tuple[InlineSpan, ...]


@dataclass(frozen=True, slots=True)
class Paragraph:
    content: tuple[InlineSpan, ...]


@dataclass(frozen=True, slots=True)
class ListItem:
    """A single list line. Ordered items keep their source ordinal in ``marker``."""

    ordered: bool
    content: tuple[InlineSpan, ...]
    marker: str | None = None


@dataclass(frozen=True, slots=True)
class Spacer:
    """A blank source line."""


@dataclass(frozen=True, slots=True)
class Table:
    """A pipe table.

    Rows keep the column count of their source line, so a ragged table stays
    ragged. ``headers`` is empty when the table had no header row.
    """

    headers: tuple[Cell, ...]
    rows: tuple[tuple[Cell, ...], ...]


Block = Union[Heading, Paragraph, ListItem, Spacer, Table]
Document = tuple[Block, ...]


def spans_text(spans: tuple[InlineSpan, ...]) -> str:
    """Return the concatenated text of ``spans`` without emphasis markers."""

    return "".join(span.text for span in spans)


__all__ = [
    "Block",
    "Bold",
    "Cell",
    "Document",
    "Heading",
    "HeadingLevel",
    "InlineSpan",
    "ListItem",
    "Paragraph",
    "PlainText",
    "Spacer",
    "Table",
    "spans_text",
]
