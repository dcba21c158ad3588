"""
Flatten midnight-crossing blocks for linear time axes.

A block such as sleep 23:00-07:00 becomes [1380, 1440) + [0, 420), so a
consumer plotting 00:00-24:00 left to right never sees a wrapped range.
"""

from ..circadian_math import MINUTES_PER_DAY, to_minutes
from ..types import ScheduleBlock, TimelineSegment

END_OF_DAY_LABEL = "23:59"
START_OF_DAY_LABEL = "00:00"


def split_across_midnight(block: ScheduleBlock) -> list[TimelineSegment]:
    """
    Split a block into non-wrapping segments.

    Blocks whose end is after their start come back as a single segment.
    Otherwise the block is cut at midnight into two segments that both
    reference the original block.
    """
    start_min = to_minutes(block.start)
    end_min = to_minutes(block.end)

    if end_min > start_min:
        return [
            TimelineSegment(
                start=block.start,
                end=block.end,
                start_min=start_min,
                end_min=end_min,
                label=block.label,
                block=block,
            )
        ]

    return [
        TimelineSegment(
            start=block.start,
            end=END_OF_DAY_LABEL,
            start_min=start_min,
            end_min=MINUTES_PER_DAY,
            label=block.label,
            block=block,
        ),
        TimelineSegment(
            start=START_OF_DAY_LABEL,
            end=block.end,
            start_min=0,
            end_min=end_min,
            label=block.label,
            block=block,
        ),
    ]


def normalize_blocks(blocks: list[ScheduleBlock]) -> list[TimelineSegment]:
    """Split every block and return the segments sorted by start minute."""
    segments = [segment for block in blocks for segment in split_across_midnight(block)]
    return sorted(segments, key=lambda s: s.start_min)
