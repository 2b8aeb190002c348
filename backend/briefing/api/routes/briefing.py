"""Endpoints for running briefings and browsing their history."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from briefing.api.deps import get_agent_client, get_store
from briefing.document_builder import build_document_response
from briefing.document_processing import briefing_preview, document_to_lines, render_document
from briefing.response_text import extract_response_text
from briefing.sample import SAMPLE_BRIEFING
from briefing.schemas.briefing import (
    BriefingResponse,
    HistoryResponse,
    RunBriefingRequest,
)
from briefing.services.agent_client import AgentClient, AgentError, build_briefing_message
from briefing.services.storage import BriefingStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["briefing"])


def _render(text: str) -> list:
    return build_document_response(render_document(text)).blocks


@router.get("/briefing/sample", response_model=BriefingResponse)
def sample_briefing() -> BriefingResponse:
    return BriefingResponse(text=SAMPLE_BRIEFING, blocks=_render(SAMPLE_BRIEFING))


@router.post("/briefing/run", response_model=BriefingResponse)
def run_briefing(
    payload: RunBriefingRequest,
    client: AgentClient = Depends(get_agent_client),
    store: BriefingStore = Depends(get_store),
) -> BriefingResponse:
    """Ask the agent for a briefing on the watchlist and store the result."""

    tickers = payload.tickers if payload.tickers is not None else store.load_watchlist()
    if not tickers:
        raise HTTPException(status_code=400, detail="Add stocks to your watchlist first.")

    prefs = store.load_settings().analysis_prefs if payload.use_preferences else None
    message = build_briefing_message(tickers, prefs)
    try:
        result = client.chat(message)
    except AgentError as exc:
        logger.error("Agent call failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    text = extract_response_text(result.as_dict())
    if not text:
        raise HTTPException(
            status_code=502,
            detail=result.error or "No response received from agent.",
        )

    record = store.add_to_history(text, tickers)
    blocks = render_document(text)
    logger.info(
        "Stored briefing %s for %s (%s lines)",
        record.id,
        ", ".join(tickers),
        len(document_to_lines(blocks)),
    )
    return BriefingResponse(
        text=text,
        blocks=build_document_response(blocks).blocks,
        record=record,
    )


@router.get("/history", response_model=HistoryResponse)
def list_history(store: BriefingStore = Depends(get_store)) -> HistoryResponse:
    records = store.load_history()
    return HistoryResponse(
        records=records,
        previews=[briefing_preview(record.content) for record in records],
    )


@router.delete("/history", response_model=HistoryResponse)
def clear_history(store: BriefingStore = Depends(get_store)) -> HistoryResponse:
    store.clear_history()
    return HistoryResponse()


@router.delete("/history/{record_id}", response_model=HistoryResponse)
def remove_history_entry(record_id: str, store: BriefingStore = Depends(get_store)) -> HistoryResponse:
    if not store.remove_entry(record_id):
        raise HTTPException(status_code=404, detail=f"History entry '{record_id}' not found")
    return list_history(store)
