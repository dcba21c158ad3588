"""
Data structures for schedule generation.

All times are "HH:MM" strings (minutes since local midnight, 0-1439) at the
edges of the engine. Internal slot math works in integer minutes.
"""

from dataclasses import dataclass, field
from typing import Literal

Chronotype = Literal["morning", "intermediate", "evening"]

CHRONOTYPES: tuple[str, ...] = ("morning", "intermediate", "evening")

RecurrenceType = Literal["none", "daily", "weekly", "monthly"]

RECURRENCE_TYPES: tuple[str, ...] = ("none", "daily", "weekly", "monthly")

ActivityType = Literal["sleep", "focus", "exercise", "break", "commitment"]

Priority = Literal["critical", "high", "medium", "low"]


def clamp_confidence(value: float) -> float:
    """Clamp a confidence score into [0, 1]."""
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class Commitment:
    """Fixed obligation supplied by the caller. Never mutated by the engine."""

    start: str  # "HH:MM"
    end: str  # "HH:MM", later than start on the same day
    title: str
    recurrence: RecurrenceType = "none"
    id: str | None = None
    priority: Priority = "medium"
    description: str | None = None
    location: str | None = None
    rationale: str | None = None
    tags: tuple[str, ...] = ()


@dataclass
class ScheduleBlock:
    """
    Single labeled interval of the output schedule.

    Blocks are created per call and never persisted. A block whose end is
    not after its start crosses midnight (the sleep block usually does).
    """

    start: str  # "HH:MM"
    end: str  # "HH:MM"
    label: ActivityType
    confidence: float
    rationale: str
    title: str
    id: str
    priority: Priority = "medium"
    estimated_duration: int = 0  # Minutes, wraparound-aware
    tags: list[str] = field(default_factory=list)

    # Commitment passthrough
    description: str | None = None
    location: str | None = None
    commitment_id: str | None = None

    def __post_init__(self) -> None:
        self.confidence = clamp_confidence(self.confidence)


@dataclass(frozen=True)
class Slot:
    """
    Free interval inside the waking window.

    `index` is assigned once when the slot is discovered and is the only
    identity used to track whether a slot has been consumed.
    """

    index: int
    start: int  # Minutes since midnight
    end: int  # Minutes since midnight (exclusive)
    energy: float  # Mean of the energy curve over [start, end)

    @property
    def duration(self) -> int:
        """Length of the slot in minutes."""
        return self.end - self.start


@dataclass
class Recommendations:
    """Advisory text grouped by category."""

    optimizations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


@dataclass
class ScheduleMetadata:
    """Descriptive metadata attached to daily and weekly results."""

    chronotype: Chronotype
    generated_at: str  # ISO 8601 timestamp
    version: str
    algorithm: str
    confidence: float
    total_duration: int | None = None


@dataclass
class ScheduleRequest:
    """Input for daily and weekly generation."""

    wake_time: str  # "07:00" format
    sleep_time: str  # "23:00" format
    chronotype: Chronotype
    commitments: list[Commitment] = field(default_factory=list)
    week_start: str | None = None  # "YYYY-MM-DD"; defaults to this week's Monday
    timezone: str | None = None  # IANA name used to resolve "today"
    min_slot_minutes: int = 30


@dataclass
class ScheduleResult:
    """One day's blocks with metadata and advice."""

    schedule: list[ScheduleBlock]
    metadata: ScheduleMetadata
    recommendations: Recommendations


@dataclass
class DaySchedule:
    """Blocks for one calendar day of a generated week."""

    date: str  # "2025-01-13" ISO date
    blocks: list[ScheduleBlock] = field(default_factory=list)
    total_duration: int = 0  # Minutes
    confidence: float = 0.0


@dataclass
class WeeklySchedule:
    """Seven consecutive day schedules plus week-level aggregates."""

    week_start: str
    week_end: str
    days: list[DaySchedule]
    overall_confidence: float
    recommendations: Recommendations
    metadata: ScheduleMetadata


@dataclass(frozen=True)
class TimelineSegment:
    """
    Non-wrapping piece of a block for linear-axis consumers.

    `end_min` may be 1440 for the first half of a split block; the `end`
    string is then "23:59" because "24:00" is not a valid clock time.
    """

    start: str
    end: str
    start_min: int
    end_min: int
    label: ActivityType
    block: ScheduleBlock
