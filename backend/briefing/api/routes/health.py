"""Liveness endpoint for the briefing service."""

from fastapi import APIRouter

router = APIRouter(tags=["system"])


@router.get("/health")
def service_health() -> dict[str, str]:
    return {"status": "ok"}
