"""Cron helpers for the recurring briefing schedule."""
from __future__ import annotations

from typing import Iterable, Literal

from .schemas.scheduler import ScheduleInfo

FrequencyMode = Literal["weekdays", "everyday", "custom"]

_TIMEZONE_LABELS = {
    "America/New_York": "ET",
    "America/Chicago": "CT",
    "America/Los_Angeles": "PT",
    "America/Denver": "MT",
    "America/Anchorage": "AKT",
    "Pacific/Honolulu": "HT",
}

BRIEFING_SCHEDULE_MESSAGE = (
    "Analyze the following stocks and send a comprehensive briefing email. Include current price"
    " movements, technical indicators, recent news and events, analyst sentiment, and actionable"
    " recommendations. Format as a structured briefing with clear sections and tables."
)


def build_cron_expression(days: Iterable[str], hour: int, minute: int) -> str:
    """Return ``"M H * * D"``; a full week collapses to ``*``."""

    day_list = list(days)
    day_field = "*" if len(day_list) == 7 else ",".join(day_list)
    return f"{minute} {hour} * * {day_field}"


def frequency_mode(days: Iterable[str]) -> FrequencyMode:
    day_list = list(days)
    if len(day_list) == 7:
        return "everyday"
    if len(day_list) == 5 and all(day in day_list for day in ("1", "2", "3", "4", "5")):
        return "weekdays"
    return "custom"


def _days_label(days: str) -> str:
    if days == "*":
        return "Daily"
    if days in {"1,2,3,4,5", "1-5"}:
        return "Weekdays"
    if days == "0,1,2,3,4,5,6":
        return "Everyday"
    return f"Days: {days}"


def format_schedule_display(info: ScheduleInfo | None) -> str:
    """Describe a schedule for humans, e.g. ``"Weekdays 5:20 PM ET"``."""

    if info is None:
        return "Loading..."

    parts = info.cron_expression.split(" ")
    if len(parts) < 5:
        return info.cron_expression

    minute, hour_field, days = parts[0], parts[1], parts[4]
    try:
        hour = int(hour_field)
    except ValueError:
        return info.cron_expression

    hour12 = 12 if hour == 0 else hour - 12 if hour > 12 else hour
    suffix = "PM" if hour >= 12 else "AM"
    tz_label = _TIMEZONE_LABELS.get(info.timezone, info.timezone)
    return f"{_days_label(days)} {hour12}:{minute.zfill(2)} {suffix} {tz_label}"


__all__ = [
    "BRIEFING_SCHEDULE_MESSAGE",
    "FrequencyMode",
    "build_cron_expression",
    "format_schedule_display",
    "frequency_mode",
]
