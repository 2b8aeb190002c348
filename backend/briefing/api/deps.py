"""Common dependency functions for API routes."""

from functools import lru_cache

from fastapi import Depends

from briefing.core.config import Settings, get_settings
from briefing.services.agent_client import AgentClient
from briefing.services.scheduler_client import SchedulerClient
from briefing.services.storage import BriefingStore, open_store


def get_app_settings() -> Settings:
    return get_settings()


@lru_cache
def get_agent_client() -> AgentClient:
    settings = get_settings()
    return AgentClient(
        settings.agent_base_url,
        api_key=settings.api_key,
        agent_id=settings.agent_id,
        user_id=settings.agent_user_id,
        timeout=settings.request_timeout,
    )


@lru_cache
def get_scheduler_client() -> SchedulerClient:
    settings = get_settings()
    return SchedulerClient(
        base_url=settings.scheduler_base_url,
        api_key=settings.api_key,
        timeout=settings.request_timeout,
    )


def get_store(settings: Settings = Depends(get_app_settings)) -> BriefingStore:
    return open_store(
        settings.storage_dir,
        default_watchlist=settings.default_watchlist,
        history_limit=settings.history_limit,
    )
