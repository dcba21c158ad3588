"""
Weekly schedule generation.

Repeats the daily pipeline for seven consecutive dates starting at the
requested week start (or the Monday of the current week), projecting each
commitment onto the days its recurrence covers.
"""

import logging
from datetime import UTC, date, datetime, timedelta

from .circadian_math import (
    format_date,
    get_current_datetime_in_tz,
    monday_of_week,
    parse_date,
)
from .recommendations import weekly_recommendations
from .scheduler import (
    SCHEDULE_VERSION,
    ScheduleGenerator,
    schedule_confidence,
    total_duration,
)
from .types import (
    Chronotype,
    Commitment,
    DaySchedule,
    ScheduleMetadata,
    ScheduleRequest,
    WeeklySchedule,
)
from .validation import validate_request

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7
WEEKLY_ALGORITHM = "circadian-aware-greedy-weekly"


def commitments_for_day(commitments: list[Commitment], day: date) -> list[Commitment]:
    """
    Select the commitments that apply on `day`.

    - daily: every day
    - weekly: Monday to Friday
    - monthly: every day (day of month is not checked)
    - none: every day. One-time commitments carry no date, so they are
      repeated across the whole generated week.
    """
    is_weekday = day.weekday() < 5

    selected = []
    for commitment in commitments:
        if commitment.recurrence == "weekly" and not is_weekday:
            continue
        selected.append(commitment)
    return selected


def resolve_week_start(request: ScheduleRequest, current_datetime: datetime | None) -> date:
    """
    Pick the first date of the generated week.

    An explicit `week_start` is used as given. Otherwise the Monday of the
    week containing "now", where now is `current_datetime` if supplied, else
    the wall clock in the request's timezone (or the process's local time).
    """
    if request.week_start:
        return parse_date(request.week_start)

    if current_datetime is None:
        if request.timezone:
            current_datetime = get_current_datetime_in_tz(request.timezone)
        else:
            current_datetime = datetime.now()

    return monday_of_week(current_datetime.date())


class WeeklyScheduleGenerator:
    """Seven-day scheduler built on ScheduleGenerator."""

    def __init__(self, day_generator: ScheduleGenerator | None = None) -> None:
        self.day_generator = day_generator or ScheduleGenerator()

    def generate_week(
        self, request: ScheduleRequest, current_datetime: datetime | None = None
    ) -> WeeklySchedule:
        """
        Generate a full week.

        Args:
            request: Validated schedule request
            current_datetime: "Now" for week-start derivation and the
                generated_at stamp. Pass it for reproducible output.

        Returns:
            WeeklySchedule with exactly seven days
        """
        start = resolve_week_start(request, current_datetime)
        generated_at = (current_datetime or datetime.now(UTC)).isoformat()

        days = []
        for offset in range(DAYS_PER_WEEK):
            day = start + timedelta(days=offset)
            day_commitments = commitments_for_day(request.commitments, day)
            logger.debug(
                "%s: %d of %d commitments apply",
                day.isoformat(),
                len(day_commitments),
                len(request.commitments),
            )

            day_request = ScheduleRequest(
                wake_time=request.wake_time,
                sleep_time=request.sleep_time,
                chronotype=request.chronotype,
                commitments=day_commitments,
                min_slot_minutes=request.min_slot_minutes,
            )
            blocks = self.day_generator.build_blocks(day_request)

            days.append(
                DaySchedule(
                    date=format_date(day),
                    blocks=blocks,
                    total_duration=total_duration(blocks),
                    confidence=schedule_confidence(blocks),
                )
            )

        overall = round(sum(d.confidence for d in days) / len(days), 2)

        return WeeklySchedule(
            week_start=format_date(start),
            week_end=format_date(start + timedelta(days=DAYS_PER_WEEK - 1)),
            days=days,
            overall_confidence=overall,
            recommendations=weekly_recommendations(days, request.chronotype),
            metadata=ScheduleMetadata(
                chronotype=request.chronotype,
                generated_at=generated_at,
                version=SCHEDULE_VERSION,
                algorithm=WEEKLY_ALGORITHM,
                confidence=overall,
            ),
        )


def build_weekly_schedule(
    wake: str,
    sleep: str,
    chronotype: Chronotype,
    commitments: list[Commitment],
    week_start: str | None = None,
    timezone: str | None = None,
    current_datetime: datetime | None = None,
) -> WeeklySchedule:
    """
    Build a seven-day schedule.

    Args:
        wake: "HH:MM" wake time
        sleep: "HH:MM" sleep time
        chronotype: "morning", "intermediate" or "evening"
        commitments: Fixed obligations, projected by recurrence
        week_start: "YYYY-MM-DD" first day; defaults to this week's Monday
        timezone: IANA zone used to decide what "this week" is
        current_datetime: Injected "now" for deterministic output

    Raises:
        ScheduleValidationError: If any input is malformed
    """
    request = ScheduleRequest(
        wake_time=wake,
        sleep_time=sleep,
        chronotype=chronotype,
        commitments=list(commitments),
        week_start=week_start,
        timezone=timezone,
    )
    validate_request(request)
    return WeeklyScheduleGenerator().generate_week(request, current_datetime)
