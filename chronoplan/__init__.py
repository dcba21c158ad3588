"""
Chronoplan Circadian Day Planning

Builds day and week schedules around a person's chronotype: a synthetic
energy curve picks where focus, exercise and break blocks go in the time
left free by sleep and fixed commitments.

Entry points: build_schedule, build_weekly_schedule
"""

from .circadian_math import duration_minutes, is_asleep, to_minutes, to_time
from .scheduler import ScheduleGenerator, build_schedule
from .scheduling.normalizer import normalize_blocks, split_across_midnight
from .science.energy import energy_curve
from .types import (
    Chronotype,
    Commitment,
    DaySchedule,
    Recommendations,
    ScheduleBlock,
    ScheduleRequest,
    ScheduleResult,
    TimelineSegment,
    WeeklySchedule,
)
from .validation import ScheduleValidationError
from .weekly import WeeklyScheduleGenerator, build_weekly_schedule

__all__ = [
    # Types
    "Chronotype",
    "Commitment",
    "ScheduleBlock",
    "ScheduleRequest",
    "ScheduleResult",
    "DaySchedule",
    "WeeklySchedule",
    "Recommendations",
    "TimelineSegment",
    # Time arithmetic
    "to_minutes",
    "to_time",
    "duration_minutes",
    "is_asleep",
    # Energy
    "energy_curve",
    # Schedulers
    "ScheduleGenerator",
    "WeeklyScheduleGenerator",
    "build_schedule",
    "build_weekly_schedule",
    # Timeline
    "split_across_midnight",
    "normalize_blocks",
    # Errors
    "ScheduleValidationError",
]
