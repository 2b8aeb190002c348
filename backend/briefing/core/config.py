"""Application configuration and settings management."""

from functools import lru_cache
from pathlib import Path
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="BRIEFING_", extra="ignore")

    app_name: str = Field(default="Stock Briefing API", description="Human readable application name.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    api_key: str = Field(
        default="",
        description="API key sent as x-api-key to the agent and scheduler services.",
    )
    agent_id: str = Field(
        default="698b17e3a6240bbb9e1087ef",
        description="Identifier of the agent that writes stock briefings.",
    )
    agent_base_url: str = Field(
        default="https://agent-prod.studio.lyzr.ai/v3/inference/chat/",
        description="Chat endpoint of the agent service.",
    )
    agent_user_id: str = Field(
        default="stock-briefing",
        description="User identifier reported to the agent service.",
    )
    schedule_id: str = Field(
        default="698b1a9bebe6fd87d1dcc0c4",
        description="Identifier of the recurring briefing schedule.",
    )
    scheduler_base_url: str = Field(
        default="https://scheduler.studio.lyzr.ai",
        description="Base URL for the scheduler service.",
    )
    request_timeout: float = Field(
        default=120.0,
        description="Timeout in seconds for calls to the agent and scheduler services.",
    )
    storage_dir: Path = Field(
        default=Path("data"),
        description="Directory holding the watchlist, history and settings documents.",
    )
    default_timezone: str = Field(
        default="America/New_York",
        description="Timezone used when none is configured.",
    )
    default_watchlist: List[str] = Field(
        default_factory=lambda: ["AAPL", "MSFT", "GOOGL", "AMZN", "TSLA"],
        description="Tickers used when no watchlist has been stored yet.",
    )
    history_limit: int = Field(
        default=50,
        description="Maximum number of briefings kept in history.",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


settings = get_settings()
