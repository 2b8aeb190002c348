"""Client wrapper around the briefing agent REST API."""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

import requests

from briefing.schemas.briefing import AnalysisPrefs

logger = logging.getLogger(__name__)


class AgentError(RuntimeError):
    """Raised when the agent API returns an unexpected response."""


@dataclass
class AgentResponse:
    """Result envelope understood by :func:`briefing.response_text.extract_response_text`."""

    success: bool
    response: Dict[str, Any] = field(default_factory=dict)
    raw_response: str = ""
    error: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "response": self.response,
            "raw_response": self.raw_response,
            "error": self.error,
        }


def build_briefing_message(tickers: Iterable[str], prefs: Optional[AnalysisPrefs] = None) -> str:
    """Return the analysis prompt for ``tickers``.

    Without ``prefs`` the prompt asks for the full briefing. With ``prefs`` it
    names the enabled analysis areas instead.
    """

    message = f"Analyze the following stocks and provide a comprehensive briefing: {', '.join(tickers)}."
    if prefs is None:
        return (
            f"{message} Include price movements, technical indicators, news sentiment,"
            " and actionable recommendations."
        )

    focus = []
    if prefs.technical:
        focus.append("technical indicators")
    if prefs.fundamental:
        focus.append("fundamental analysis")
    if prefs.news_sentiment:
        focus.append("news sentiment")
    focus_text = f" Focus on: {', '.join(focus)}." if focus else ""
    return f"{message}{focus_text} Include price movements and actionable recommendations."


class AgentClient:
    """Synchronous HTTP client for agent interactions."""

    def __init__(
        self,
        base_url: str,
        *,
        api_key: str,
        agent_id: str,
        user_id: str = "stock-briefing",
        timeout: float = 120.0,
    ) -> None:
        self.base_url = base_url
        self.api_key = api_key
        self.agent_id = agent_id
        self.user_id = user_id
        self.timeout = timeout

    def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        headers = {"Content-Type": "application/json", "x-api-key": self.api_key}
        try:
            response = requests.post(self.base_url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:  # pragma: no cover - network errors are rare
            raise AgentError(f"Failed to connect to agent at {self.base_url}: {exc}") from exc
        if response.status_code != 200:
            raise AgentError(
                f"Agent POST {self.base_url} failed with status {response.status_code}: {response.text}"
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise AgentError(f"Agent returned a non-JSON payload: {response.text[:200]}") from exc
        if not isinstance(data, dict):
            raise AgentError(f"Unexpected agent payload type: {type(data).__name__}")
        return data

    def chat(self, message: str, *, session_id: Optional[str] = None) -> AgentResponse:
        """Send ``message`` to the configured agent and wrap its reply."""

        if not self.api_key:
            raise AgentError("Agent API key is not configured")

        payload = {
            "user_id": self.user_id,
            "agent_id": self.agent_id,
            "session_id": session_id or f"{self.agent_id}-{uuid.uuid4().hex[:12]}",
            "message": message,
        }
        logger.info("Calling agent '%s'", self.agent_id)
        data = self._post(payload)
        return self._wrap_response(data)

    @staticmethod
    def _wrap_response(data: Dict[str, Any]) -> AgentResponse:
        """Normalize the agent reply into an :class:`AgentResponse`."""

        reply = data.get("response")
        if isinstance(reply, dict):
            return AgentResponse(success=True, response=reply, raw_response=json.dumps(reply, ensure_ascii=False))
        if not isinstance(reply, str):
            return AgentResponse(success=False, raw_response=json.dumps(data, ensure_ascii=False), error="Empty agent reply")

        try:
            parsed = json.loads(reply)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, dict):
            return AgentResponse(success=True, response=parsed, raw_response=reply)
        return AgentResponse(success=True, response={"result": reply}, raw_response=reply)
