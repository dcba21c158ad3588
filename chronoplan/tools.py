"""
Tool implementations for JSON-style callers.

Provides three tools:
1. build_schedule - One day of blocks with metadata and recommendations
2. build_weekly_schedule - Seven days with weekly aggregates
3. timeline - One day of blocks flattened for a 00:00-24:00 axis

Inputs are plain dicts, outputs are plain dicts. Invalid input comes back as
{"error": ..., "field": ...} instead of raising.
"""

from dataclasses import asdict
from datetime import datetime
from typing import Any

from .scheduler import ScheduleGenerator
from .scheduling.normalizer import normalize_blocks
from .validation import ScheduleValidationError, request_from_dict
from .weekly import WeeklyScheduleGenerator


def get_daily_schedule(
    params: dict[str, Any], current_datetime: datetime | None = None
) -> dict[str, Any]:
    """Generate one day's schedule from a request payload."""
    request = request_from_dict(params)
    result = ScheduleGenerator().generate_day(request, current_datetime)
    return asdict(result)


def get_weekly_schedule(
    params: dict[str, Any], current_datetime: datetime | None = None
) -> dict[str, Any]:
    """
    Generate a week from a request payload.

    The first day's blocks are repeated under "schedule" for callers that
    only display a single day.
    """
    request = request_from_dict(params)
    week = WeeklyScheduleGenerator().generate_week(request, current_datetime)
    first_day = week.days[0].blocks if week.days else []

    return {
        "schedule": [asdict(b) for b in first_day],
        "weekly_schedule": asdict(week),
        "recommendations": asdict(week.recommendations),
    }


def get_timeline(params: dict[str, Any]) -> dict[str, Any]:
    """Generate one day and return its midnight-split segments."""
    request = request_from_dict(params)
    blocks = ScheduleGenerator().build_blocks(request)
    return {
        "segments": [
            {
                "start": s.start,
                "end": s.end,
                "start_min": s.start_min,
                "end_min": s.end_min,
                "label": s.label,
                "id": s.block.id,
            }
            for s in normalize_blocks(blocks)
        ]
    }


def invoke_tool(tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Router function for CLI/subprocess invocation."""
    try:
        if tool_name == "build_schedule":
            return get_daily_schedule(arguments)
        elif tool_name == "build_weekly_schedule":
            return get_weekly_schedule(arguments)
        elif tool_name == "timeline":
            return get_timeline(arguments)
    except ScheduleValidationError as e:
        return e.to_dict()
    raise ValueError(f"Unknown tool: {tool_name}")
