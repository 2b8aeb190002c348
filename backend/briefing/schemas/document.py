"""Pydantic schemas for rendered briefing documents."""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class TextSpan(BaseModel):
    type: Literal["text"] = "text"
    text: str = Field(..., description="Plain text run")


class BoldSpan(BaseModel):
    type: Literal["bold"] = "bold"
    text: str = Field(..., description="Text rendered with strong emphasis")


Span = Annotated[Union[TextSpan, BoldSpan], Field(discriminator="type")]


class HeadingBlock(BaseModel):
    type: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=3, description="Heading level, 1 to 3")
    content: List[Span] = Field(default_factory=list)


class ParagraphBlock(BaseModel):
    type: Literal["paragraph"] = "paragraph"
    content: List[Span] = Field(default_factory=list)


class ListItemBlock(BaseModel):
    type: Literal["list_item"] = "list_item"
    ordered: bool = Field(..., description="Whether the item came from a numbered list")
    marker: Optional[str] = Field(default=None, description="Source ordinal of a numbered item")
    content: List[Span] = Field(default_factory=list)


class SpacerBlock(BaseModel):
    type: Literal["spacer"] = "spacer"


class TableBlock(BaseModel):
    type: Literal["table"] = "table"
    headers: List[List[Span]] = Field(default_factory=list, description="Header cells, may be empty")
    rows: List[List[List[Span]]] = Field(
        default_factory=list,
        description="Body rows; column counts follow the source and may differ between rows",
    )


DocumentBlock = Annotated[
    Union[HeadingBlock, ParagraphBlock, ListItemBlock, SpacerBlock, TableBlock],
    Field(discriminator="type"),
]


class RenderRequest(BaseModel):
    text: str = Field(default="", description="Raw briefing text as returned by the agent")


class DocumentResponse(BaseModel):
    blocks: List[DocumentBlock] = Field(default_factory=list, description="Blocks in source order")
