"""
Free-interval discovery around fixed blocks.

Walks the waking day from wake time, emitting the gaps between the sleep
block and commitments that are long enough to schedule into. Each gap is
annotated with its mean energy.

The walk runs on an axis anchored at wake time and extended past midnight,
so a waking window such as 09:00-01:00 is the single range [540, 1500).
Slot bounds may therefore exceed 1439; to_time() and the energy lookup both
reduce them modulo one day.
"""

import logging

from ..circadian_math import MINUTES_PER_DAY, duration_minutes, to_minutes
from ..science.energy import average_energy
from ..types import ScheduleBlock, Slot

logger = logging.getLogger(__name__)

DEFAULT_MIN_SLOT_MINUTES = 30


def waking_window(wake_time: str, sleep_time: str) -> tuple[int, int]:
    """Return (wake, sleep) on the wake-anchored axis; sleep is always after wake."""
    wake = to_minutes(wake_time)
    sleep = to_minutes(sleep_time)
    if sleep <= wake:
        sleep += MINUTES_PER_DAY
    return wake, sleep


def anchor_block(block: ScheduleBlock, wake: int) -> tuple[int, int]:
    """
    Place a block on the wake-anchored axis.

    Blocks starting before wake belong to the following night unless they
    run past wake (e.g. 06:30-07:30 with a 07:00 wake). Blocks crossing
    midnight keep their full length.
    """
    start = to_minutes(block.start)
    end = to_minutes(block.end)
    length = duration_minutes(start, end)

    if start < wake and start + length <= wake:
        start += MINUTES_PER_DAY
    return start, start + length


def find_available_slots(
    fixed_blocks: list[ScheduleBlock],
    wake_time: str,
    sleep_time: str,
    curve: list[float],
    min_duration: int = DEFAULT_MIN_SLOT_MINUTES,
) -> list[Slot]:
    """
    Find gaps of at least `min_duration` minutes between fixed blocks.

    The pointer only moves forward (to the max of itself and each block's
    end), so overlapping or nested commitments never yield negative-length
    gaps. Gaps shorter than `min_duration` are dropped.

    Args:
        fixed_blocks: Sleep block plus commitment blocks, any order
        wake_time: "HH:MM" where the walk starts
        sleep_time: "HH:MM" bounding the final gap
        curve: Per-minute energy from energy_curve()
        min_duration: Shortest gap worth returning

    Returns:
        Slots in chronological order, indexed from 0
    """
    wake, sleep = waking_window(wake_time, sleep_time)
    anchored = sorted(anchor_block(b, wake) for b in fixed_blocks)

    slots: list[Slot] = []
    pointer = wake

    def emit(start: int, end: int) -> None:
        slots.append(
            Slot(
                index=len(slots),
                start=start,
                end=end,
                energy=average_energy(curve, start, end),
            )
        )

    for block_start, block_end in anchored:
        gap_end = min(block_start, sleep)
        if gap_end - pointer >= min_duration:
            emit(pointer, gap_end)

        pointer = max(pointer, block_end)

    if sleep - pointer >= min_duration:
        emit(pointer, sleep)

    logger.debug("Found %d free slots between %s and %s", len(slots), wake_time, sleep_time)
    return slots
