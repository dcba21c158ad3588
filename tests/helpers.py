"""
Test helper functions for schedule validation.

These functions can be imported by test modules for schedule analysis.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from chronoplan.circadian_math import MINUTES_PER_DAY, to_minutes
from chronoplan.types import ScheduleBlock

GENERATED_LABELS = {"focus", "exercise", "break"}
FIXED_LABELS = {"sleep", "commitment"}


def blocks_with_label(blocks: list[ScheduleBlock], label: str) -> list[ScheduleBlock]:
    """All blocks carrying the given label."""
    return [b for b in blocks if b.label == label]


def minute_set(block: ScheduleBlock) -> set[int]:
    """
    Every minute of the day a block occupies.

    Handles midnight crossing: 23:00-07:00 covers 1380-1439 and 0-419.
    """
    start = to_minutes(block.start)
    end = to_minutes(block.end)
    if end > start:
        return set(range(start, end))
    return set(range(start, MINUTES_PER_DAY)) | set(range(0, end))


def find_overlaps(blocks: list[ScheduleBlock]) -> list[tuple[str, str]]:
    """
    Pairs of block ids that overlap where at least one block is generated.

    Commitments are allowed to overlap each other (callers may double-book),
    so fixed-fixed pairs are not reported.
    """
    overlaps = []
    for i, a in enumerate(blocks):
        for b in blocks[i + 1 :]:
            if a.label in FIXED_LABELS and b.label in FIXED_LABELS:
                continue
            if minute_set(a) & minute_set(b):
                overlaps.append((a.id, b.id))
    return overlaps


def is_sorted_by_start(blocks: list[ScheduleBlock]) -> bool:
    """True if blocks are in ascending start order (string and numeric agree)."""
    starts = [b.start for b in blocks]
    numeric = [to_minutes(s) for s in starts]
    return starts == sorted(starts) and numeric == sorted(numeric)
