"""
Daily schedule generation.

Pipeline for one day:
1. Fixed blocks: one sleep block [sleep, wake) plus one block per commitment
2. Energy curve for the wake/sleep window and chronotype (science/)
3. Free slots between fixed blocks (scheduling/slot_finder)
4. Greedy focus/exercise/break placement (scheduling/activity_placer)
5. Merge and sort everything by start time
"""

import logging
from datetime import UTC, datetime

from .circadian_math import block_duration, to_minutes
from .recommendations import daily_recommendations
from .scheduling.activity_placer import ActivityPlacer
from .scheduling.slot_finder import find_available_slots
from .science.energy import energy_curve
from .types import (
    Chronotype,
    Commitment,
    ScheduleBlock,
    ScheduleMetadata,
    ScheduleRequest,
    ScheduleResult,
)
from .validation import validate_request

logger = logging.getLogger(__name__)

SCHEDULE_VERSION = "1.0.0"
DAILY_ALGORITHM = "circadian-aware-greedy"


def total_duration(blocks: list[ScheduleBlock]) -> int:
    """Sum of block durations in minutes, midnight-crossing blocks included."""
    return sum(block_duration(b.start, b.end) for b in blocks)


def schedule_confidence(blocks: list[ScheduleBlock]) -> float:
    """Mean block confidence rounded to two decimals (0 for an empty schedule)."""
    if not blocks:
        return 0.0
    return round(sum(b.confidence for b in blocks) / len(blocks), 2)


def sleep_block(wake_time: str, sleep_time: str) -> ScheduleBlock:
    return ScheduleBlock(
        id="sleep-block",
        start=sleep_time,
        end=wake_time,
        label="sleep",
        title="Sleep",
        rationale="Essential rest period for circadian rhythm",
        confidence=1.0,
        priority="critical",
        estimated_duration=block_duration(sleep_time, wake_time),
        tags=["rest", "recovery"],
    )


def commitment_block(commitment: Commitment, number: int) -> ScheduleBlock:
    """Fixed block for a commitment; `number` only feeds the fallback id."""
    return ScheduleBlock(
        id=commitment.id or f"commitment-{number}",
        start=commitment.start,
        end=commitment.end,
        label="commitment",
        title=commitment.title,
        rationale=commitment.rationale or "Scheduled commitment",
        confidence=1.0,
        priority=commitment.priority,
        estimated_duration=to_minutes(commitment.end) - to_minutes(commitment.start),
        tags=list(commitment.tags) or ["commitment"],
        description=commitment.description,
        location=commitment.location,
        commitment_id=commitment.id,
    )


class ScheduleGenerator:
    """
    Circadian-aware single-day scheduler.

    Stateless: a generator can be reused for any number of requests, and
    identical requests yield identical blocks.
    """

    def build_blocks(self, request: ScheduleRequest) -> list[ScheduleBlock]:
        """
        Produce the sorted block list for one day.

        Assumes the request has already been validated.

        Returns:
            Sleep, commitment and generated blocks ordered by start time
        """
        fixed = [sleep_block(request.wake_time, request.sleep_time)]
        for commitment in request.commitments:
            fixed.append(commitment_block(commitment, len(fixed)))

        curve = energy_curve(request.wake_time, request.sleep_time, request.chronotype)
        slots = find_available_slots(
            fixed,
            request.wake_time,
            request.sleep_time,
            curve,
            min_duration=request.min_slot_minutes,
        )
        generated = ActivityPlacer(request.chronotype).place(slots)

        # Stable sort keeps sleep ahead of a commitment starting at the same minute
        return sorted(fixed + generated, key=lambda b: to_minutes(b.start))

    def generate_day(
        self, request: ScheduleRequest, current_datetime: datetime | None = None
    ) -> ScheduleResult:
        """
        Build one day's blocks with metadata and recommendations.

        Args:
            request: Validated schedule request
            current_datetime: Timestamp recorded in metadata (defaults to now)

        Returns:
            ScheduleResult for the day
        """
        if current_datetime is None:
            current_datetime = datetime.now(UTC)

        blocks = self.build_blocks(request)
        metadata = ScheduleMetadata(
            chronotype=request.chronotype,
            generated_at=current_datetime.isoformat(),
            version=SCHEDULE_VERSION,
            algorithm=DAILY_ALGORITHM,
            confidence=schedule_confidence(blocks),
            total_duration=total_duration(blocks),
        )
        logger.debug("Generated %d blocks for %s chronotype", len(blocks), request.chronotype)

        return ScheduleResult(
            schedule=blocks,
            metadata=metadata,
            recommendations=daily_recommendations(blocks, request.chronotype),
        )


def build_schedule(
    wake: str,
    sleep: str,
    chronotype: Chronotype,
    commitments: list[Commitment],
) -> list[ScheduleBlock]:
    """
    Build a day's schedule.

    Args:
        wake: "HH:MM" wake time
        sleep: "HH:MM" sleep time
        chronotype: "morning", "intermediate" or "evening"
        commitments: Fixed obligations for the day

    Returns:
        Blocks sorted by start time

    Raises:
        ScheduleValidationError: If any input is malformed
    """
    request = ScheduleRequest(
        wake_time=wake,
        sleep_time=sleep,
        chronotype=chronotype,
        commitments=list(commitments),
    )
    validate_request(request)
    return ScheduleGenerator().build_blocks(request)
