"""Async client for the remote schedule resource."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class SchedulerError(RuntimeError):
    """Raised when the scheduler rejects a request."""

    def __init__(self, message: str, status_code: int = 502) -> None:
        super().__init__(message)
        self.status_code = status_code


class SchedulerNotConfiguredError(SchedulerError):
    """Raised when no API key is available for the scheduler."""

    def __init__(self) -> None:
        super().__init__("Scheduler API key not configured on server", status_code=500)


class SchedulerClient:
    """Minimal client for the scheduler service."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        if not self.api_key:
            raise SchedulerNotConfiguredError()
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"x-api-key": self.api_key},
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        async with self._client() as client:
            try:
                return await client.request(method, path, **kwargs)
            except httpx.HTTPError as exc:
                logger.error("Error talking to scheduler: %s", exc)
                raise SchedulerError(f"Failed to connect to scheduler: {exc}") from exc

    async def get_schedule(self, schedule_id: str) -> dict[str, Any]:
        response = await self._request("GET", f"/schedules/{schedule_id}")
        if response.is_error:
            raise SchedulerError(
                f"Scheduler API returned status {response.status_code}",
                status_code=response.status_code,
            )
        return response.json()

    async def create_schedule(
        self,
        agent_id: str,
        cron_expression: str,
        *,
        timezone: Optional[str] = None,
        message: Optional[str] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[int] = None,
    ) -> dict[str, Any]:
        payload = {
            "agent_id": agent_id,
            "cron_expression": cron_expression,
            "timezone": timezone or "America/New_York",
            "message": message or "",
            "max_retries": 3 if max_retries is None else max_retries,
            "retry_delay": 300 if retry_delay is None else retry_delay,
        }
        logger.info("Creating schedule for agent '%s' with cron '%s'", agent_id, cron_expression)
        response = await self._request("POST", "/schedules", json=payload)
        if response.is_error:
            raise SchedulerError(
                f"Failed to create schedule: {response.text}",
                status_code=response.status_code,
            )
        return response.json()

    async def set_paused(self, schedule_id: str, pause: bool) -> None:
        action = "pause" if pause else "resume"
        logger.info("Requesting %s of schedule '%s'", action, schedule_id)
        response = await self._request("POST", f"/schedules/{schedule_id}/{action}")
        if response.is_error:
            raise SchedulerError(f"Failed to {action} schedule", status_code=response.status_code)

    async def delete_schedule(self, schedule_id: str) -> None:
        logger.info("Deleting schedule '%s'", schedule_id)
        response = await self._request("DELETE", f"/schedules/{schedule_id}")
        if response.is_error:
            raise SchedulerError(
                f"Failed to delete schedule: status {response.status_code}",
                status_code=response.status_code,
            )
