"""
Advisory text for generated schedules.

Advice is an ordered table of rules. Each rule has a category, a predicate
over summary statistics and a message; evaluating the table in order gives
the categorized recommendations. Wording can change without touching the
thresholds and vice versa.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from .types import Chronotype, DaySchedule, Recommendations, ScheduleBlock

Category = Literal["optimizations", "warnings", "suggestions"]


@dataclass(frozen=True)
class DayStats:
    """Block counts for a single day."""

    chronotype: Chronotype
    focus_blocks: int
    exercise_blocks: int
    break_blocks: int


@dataclass(frozen=True)
class WeekStats:
    """Aggregates across all days of a week."""

    chronotype: Chronotype
    average_confidence: float
    focus_blocks: int
    exercise_blocks: int


@dataclass(frozen=True)
class Rule:
    category: Category
    applies: Callable[[DayStats | WeekStats], bool]
    message: str


DAILY_RULES: tuple[Rule, ...] = (
    Rule(
        "suggestions",
        lambda s: s.focus_blocks == 0,
        "Consider adding focused work blocks during your peak energy hours",
    ),
    Rule(
        "warnings",
        lambda s: s.focus_blocks > 3,
        "Multiple focus blocks may lead to mental fatigue - consider adding more breaks",
    ),
    Rule(
        "suggestions",
        lambda s: s.exercise_blocks == 0,
        "Adding exercise blocks can improve energy levels and sleep quality",
    ),
    Rule(
        "suggestions",
        lambda s: s.break_blocks < 2,
        "Consider adding more break periods to prevent burnout",
    ),
    Rule(
        "optimizations",
        lambda s: s.chronotype == "morning",
        "Morning types benefit from early focus blocks and afternoon exercise",
    ),
    Rule(
        "optimizations",
        lambda s: s.chronotype == "evening",
        "Evening types perform better with afternoon focus and morning light activities",
    ),
)

WEEKLY_RULES: tuple[Rule, ...] = (
    Rule(
        "warnings",
        lambda s: s.average_confidence < 0.6,
        "Overall schedule confidence is low - consider adjusting wake/sleep times",
    ),
    Rule(
        "optimizations",
        lambda s: s.average_confidence > 0.8,
        "Excellent schedule optimization for your chronotype!",
    ),
    Rule(
        "suggestions",
        lambda s: s.focus_blocks < 5,
        "Consider adding more focus blocks throughout the week for better productivity",
    ),
    Rule(
        "warnings",
        lambda s: s.focus_blocks > 15,
        "High number of focus blocks may lead to burnout - ensure adequate breaks",
    ),
    Rule(
        "suggestions",
        lambda s: s.exercise_blocks < 3,
        "Adding more exercise blocks can improve energy levels and sleep quality",
    ),
    Rule(
        "optimizations",
        lambda s: s.chronotype == "morning",
        "Morning types benefit from consistent early wake times throughout the week",
    ),
    Rule(
        "optimizations",
        lambda s: s.chronotype == "evening",
        "Evening types should maintain consistent late sleep schedules",
    ),
)


def evaluate_rules(rules: tuple[Rule, ...], stats: DayStats | WeekStats) -> Recommendations:
    """Apply rules in order, appending each matching message to its category."""
    result = Recommendations()
    for rule in rules:
        if rule.applies(stats):
            getattr(result, rule.category).append(rule.message)
    return result


def _count(blocks: list[ScheduleBlock], label: str) -> int:
    return sum(1 for b in blocks if b.label == label)


def daily_recommendations(blocks: list[ScheduleBlock], chronotype: Chronotype) -> Recommendations:
    """Advice for a single day's schedule."""
    stats = DayStats(
        chronotype=chronotype,
        focus_blocks=_count(blocks, "focus"),
        exercise_blocks=_count(blocks, "exercise"),
        break_blocks=_count(blocks, "break"),
    )
    return evaluate_rules(DAILY_RULES, stats)


def weekly_recommendations(days: list[DaySchedule], chronotype: Chronotype) -> Recommendations:
    """Advice for a generated week."""
    average = sum(d.confidence for d in days) / len(days) if days else 0.0
    stats = WeekStats(
        chronotype=chronotype,
        average_confidence=average,
        focus_blocks=sum(_count(d.blocks, "focus") for d in days),
        exercise_blocks=sum(_count(d.blocks, "exercise") for d in days),
    )
    return evaluate_rules(WEEKLY_RULES, stats)
