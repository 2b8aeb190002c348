"""Unit tests for cron helpers and schedule display."""

from __future__ import annotations

import pytest

from briefing.scheduling import build_cron_expression, format_schedule_display, frequency_mode
from briefing.schemas.scheduler import ScheduleInfo


def test_build_cron_expression_for_weekdays() -> None:
    assert build_cron_expression(["1", "2", "3", "4", "5"], 17, 20) == "20 17 * * 1,2,3,4,5"


def test_full_week_collapses_to_wildcard() -> None:
    days = ["0", "1", "2", "3", "4", "5", "6"]

    assert build_cron_expression(days, 9, 5) == "5 9 * * *"


@pytest.mark.parametrize(
    ("cron", "timezone", "expected"),
    [
        ("20 17 * * 1-5", "America/New_York", "Weekdays 5:20 PM ET"),
        ("20 17 * * 1,2,3,4,5", "America/Chicago", "Weekdays 5:20 PM CT"),
        ("5 0 * * *", "UTC", "Daily 12:05 AM UTC"),
        ("0 12 * * 0,1,2,3,4,5,6", "Pacific/Honolulu", "Everyday 12:00 PM HT"),
        ("30 8 * * 1,3", "Europe/Berlin", "Days: 1,3 8:30 AM Europe/Berlin"),
    ],
)
def test_format_schedule_display(cron: str, timezone: str, expected: str) -> None:
    info = ScheduleInfo(cron_expression=cron, timezone=timezone)

    assert format_schedule_display(info) == expected


def test_format_schedule_display_edge_cases() -> None:
    assert format_schedule_display(None) == "Loading..."
    assert format_schedule_display(ScheduleInfo(cron_expression="@daily")) == "@daily"
    assert format_schedule_display(ScheduleInfo(cron_expression="0 */2 * * *")) == "0 */2 * * *"


def test_frequency_mode() -> None:
    assert frequency_mode(["0", "1", "2", "3", "4", "5", "6"]) == "everyday"
    assert frequency_mode(["5", "4", "3", "2", "1"]) == "weekdays"
    assert frequency_mode(["1", "2"]) == "custom"


def test_schedule_info_defaults_for_missing_values() -> None:
    info = ScheduleInfo.from_payload({"is_active": False, "cron_expression": None, "extra": 1})

    assert info.is_active is False
    assert info.cron_expression == "20 17 * * 1-5"
    assert info.timezone == "America/New_York"
    assert ScheduleInfo.from_payload("not a dict") == ScheduleInfo()
