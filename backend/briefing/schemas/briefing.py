"""Schemas for the watchlist, briefing history and user settings."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .document import DocumentBlock

WEEKDAYS = ["1", "2", "3", "4", "5"]


class BriefingRecord(BaseModel):
    id: str = Field(..., description="Record identifier")
    date: str = Field(..., description="ISO-8601 timestamp of when the briefing was produced")
    content: str = Field(..., description="Raw briefing text")
    stocks: List[str] = Field(default_factory=list, description="Tickers the briefing covered")


class AnalysisPrefs(BaseModel):
    technical: bool = True
    fundamental: bool = True
    news_sentiment: bool = True


class ScheduleSettings(BaseModel):
    days: List[str] = Field(
        default_factory=lambda: list(WEEKDAYS),
        description="Cron day-of-week values, 0 is Sunday",
    )
    hour: int = Field(default=17, ge=0, le=23)
    minute: int = Field(default=20, ge=0, le=59)
    timezone: str = Field(default="America/New_York")


class AppSettings(BaseModel):
    email: str = Field(default="", description="Address the scheduled briefing is sent to")
    timezone: str = Field(default="America/New_York")
    analysis_prefs: AnalysisPrefs = Field(default_factory=AnalysisPrefs)
    schedule: ScheduleSettings = Field(default_factory=ScheduleSettings)


class WatchlistResponse(BaseModel):
    tickers: List[str] = Field(default_factory=list)


class WatchlistUpdate(BaseModel):
    tickers: List[str] = Field(..., description="Replacement watchlist")


class HistoryResponse(BaseModel):
    records: List[BriefingRecord] = Field(default_factory=list, description="Newest first")
    previews: List[str] = Field(default_factory=list, description="Short preview per record")


class RunBriefingRequest(BaseModel):
    tickers: Optional[List[str]] = Field(
        default=None,
        description="Tickers to analyse; the stored watchlist is used when omitted.",
    )
    use_preferences: bool = Field(
        default=False,
        description="Narrow the prompt to the analysis preferences from settings.",
    )


class BriefingResponse(BaseModel):
    text: str = Field(..., description="Raw briefing text")
    blocks: List[DocumentBlock] = Field(default_factory=list, description="Rendered briefing")
    record: Optional[BriefingRecord] = Field(default=None, description="Stored history entry")
