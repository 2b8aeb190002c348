"""Schemas for the scheduler proxy endpoints."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class ScheduleInfo(BaseModel):
    is_active: bool = True
    cron_expression: str = "20 17 * * 1-5"
    next_run: str = ""
    timezone: str = "America/New_York"

    @classmethod
    def from_payload(cls, data: Any) -> "ScheduleInfo":
        """Build from a scheduler payload, falling back to defaults for missing keys."""

        if not isinstance(data, dict):
            return cls()
        values = {key: data[key] for key in cls.model_fields if data.get(key) is not None}
        return cls(**values)


class SchedulerActionRequest(BaseModel):
    action: str = Field(..., description="One of 'pause', 'resume' or 'create'")
    schedule_id: Optional[str] = Field(default=None, description="Target schedule for pause/resume")
    agent_id: Optional[str] = None
    cron_expression: Optional[str] = None
    timezone: Optional[str] = None
    message: Optional[str] = None
    max_retries: Optional[int] = None
    retry_delay: Optional[int] = None


class SchedulerResponse(BaseModel):
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None


class BriefingScheduleResponse(BaseModel):
    success: bool
    cron_expression: str
    display: str
    frequency: Optional[str] = None
    data: Optional[Any] = None
