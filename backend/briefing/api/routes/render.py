"""Endpoint that turns raw briefing text into a structured document."""

from fastapi import APIRouter

from briefing.document_builder import build_document_response
from briefing.document_processing import render_document
from briefing.schemas.document import DocumentResponse, RenderRequest

router = APIRouter(tags=["render"])


@router.post("/render", response_model=DocumentResponse)
def render(payload: RenderRequest) -> DocumentResponse:
    """Render ``payload.text``; malformed input still yields a best-effort document."""

    return build_document_response(render_document(payload.text))
