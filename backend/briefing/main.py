from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import briefing, health, render, scheduler, watchlist
from .core.config import settings

logger = logging.getLogger("stock_briefing.backend")
logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")

app = FastAPI(title=settings.app_name)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (health, render, briefing, watchlist, scheduler):
    app.include_router(module.router, prefix="/api")

if not settings.api_key:
    logger.warning("BRIEFING_API_KEY is not set; agent and scheduler endpoints will fail")


__all__ = ["app"]
