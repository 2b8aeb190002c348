"""Proxy endpoints for the remote briefing scheduler."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from briefing.api.deps import get_app_settings, get_scheduler_client, get_store
from briefing.core.config import Settings
from briefing.scheduling import (
    BRIEFING_SCHEDULE_MESSAGE,
    build_cron_expression,
    format_schedule_display,
    frequency_mode,
)
from briefing.schemas.scheduler import (
    BriefingScheduleResponse,
    ScheduleInfo,
    SchedulerActionRequest,
    SchedulerResponse,
)
from briefing.services.scheduler_client import (
    SchedulerClient,
    SchedulerError,
    SchedulerNotConfiguredError,
)
from briefing.services.storage import BriefingStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


def _require_configured(client: SchedulerClient) -> None:
    if not client.api_key:
        exc = SchedulerNotConfiguredError()
        raise HTTPException(status_code=exc.status_code, detail=str(exc))


def _upstream_error(exc: SchedulerError) -> HTTPException:
    logger.warning("Scheduler request failed (%s): %s", exc.status_code, exc)
    return HTTPException(status_code=exc.status_code, detail=str(exc))


@router.get("", response_model=SchedulerResponse)
async def get_schedule(
    schedule_id: Optional[str] = Query(default=None),
    client: SchedulerClient = Depends(get_scheduler_client),
) -> SchedulerResponse:
    _require_configured(client)
    if not schedule_id:
        raise HTTPException(status_code=400, detail="schedule_id is required")
    try:
        data = await client.get_schedule(schedule_id)
    except SchedulerError as exc:
        raise _upstream_error(exc) from exc
    return SchedulerResponse(success=True, data=data)


@router.post("", response_model=SchedulerResponse)
async def schedule_action(
    payload: SchedulerActionRequest,
    client: SchedulerClient = Depends(get_scheduler_client),
) -> SchedulerResponse:
    """Pause, resume or create a schedule depending on ``payload.action``."""

    _require_configured(client)

    if payload.action in {"pause", "resume"}:
        if not payload.schedule_id:
            raise HTTPException(status_code=400, detail="schedule_id is required")
        try:
            await client.set_paused(payload.schedule_id, payload.action == "pause")
        except SchedulerError as exc:
            raise _upstream_error(exc) from exc
        return SchedulerResponse(success=True)

    if payload.action == "create":
        if not payload.agent_id or not payload.cron_expression:
            raise HTTPException(status_code=400, detail="agent_id and cron_expression are required")
        try:
            data = await client.create_schedule(
                payload.agent_id,
                payload.cron_expression,
                timezone=payload.timezone,
                message=payload.message,
                max_retries=payload.max_retries,
                retry_delay=payload.retry_delay,
            )
        except SchedulerError as exc:
            raise _upstream_error(exc) from exc
        return SchedulerResponse(success=True, data=data)

    raise HTTPException(
        status_code=400,
        detail='Invalid action. Use "pause", "resume", or "create"',
    )


@router.delete("", response_model=SchedulerResponse)
async def delete_schedule(
    schedule_id: Optional[str] = Query(default=None),
    client: SchedulerClient = Depends(get_scheduler_client),
) -> SchedulerResponse:
    _require_configured(client)
    if not schedule_id:
        raise HTTPException(status_code=400, detail="schedule_id is required")
    try:
        await client.delete_schedule(schedule_id)
    except SchedulerError as exc:
        raise _upstream_error(exc) from exc
    return SchedulerResponse(success=True)


@router.get("/briefing", response_model=BriefingScheduleResponse)
async def briefing_schedule(
    client: SchedulerClient = Depends(get_scheduler_client),
    settings: Settings = Depends(get_app_settings),
) -> BriefingScheduleResponse:
    """Status of the configured briefing schedule with a readable summary."""

    _require_configured(client)
    try:
        data = await client.get_schedule(settings.schedule_id)
    except SchedulerError as exc:
        raise _upstream_error(exc) from exc
    info = ScheduleInfo.from_payload(data)
    return BriefingScheduleResponse(
        success=True,
        cron_expression=info.cron_expression,
        display=format_schedule_display(info),
        data=info.model_dump(),
    )


@router.put("/briefing", response_model=BriefingScheduleResponse)
async def reschedule_briefing(
    client: SchedulerClient = Depends(get_scheduler_client),
    store: BriefingStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> BriefingScheduleResponse:
    """Replace the briefing schedule with the one stored in user settings."""

    _require_configured(client)
    schedule = store.load_settings().schedule
    cron_expression = build_cron_expression(schedule.days, schedule.hour, schedule.minute)

    try:
        await client.delete_schedule(settings.schedule_id)
    except SchedulerError as exc:
        # Old schedule may already be gone.
        logger.warning("Could not delete schedule '%s': %s", settings.schedule_id, exc)

    try:
        data = await client.create_schedule(
            settings.agent_id,
            cron_expression,
            timezone=schedule.timezone,
            message=BRIEFING_SCHEDULE_MESSAGE,
            max_retries=3,
            retry_delay=300,
        )
    except SchedulerError as exc:
        raise _upstream_error(exc) from exc

    info = ScheduleInfo(cron_expression=cron_expression, timezone=schedule.timezone)
    return BriefingScheduleResponse(
        success=True,
        cron_expression=cron_expression,
        display=format_schedule_display(info),
        frequency=frequency_mode(schedule.days),
        data=data,
    )
